import json

import pytest

from sprite_sheet.config import RETINA_PIXEL_RATIO, SpritesheetConfig, load_config


def test_defaults():
    config = load_config()
    assert config == SpritesheetConfig()
    assert config.pixel_ratio == 1
    assert config.max_growth == 10.0


def test_file_values_and_overrides(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"spacing": 2, "unique": True, "pixel_ratio": 3}))
    config = load_config(path, spacing=4, unique=None)
    assert config.spacing == 4
    assert config.unique is True
    assert config.pixel_ratio == 3


def test_retina_means_double_ratio(tmp_path):
    assert load_config(retina=True).pixel_ratio == RETINA_PIXEL_RATIO
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"retina": True}))
    assert load_config(path).pixel_ratio == 2


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"padding": 1}))
    with pytest.raises(ValueError):
        load_config(path)
    with pytest.raises(TypeError):
        load_config(padding=1)


def test_config_file_must_be_an_object(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "field, value",
    [("pixel_ratio", 0), ("spacing", -1), ("max_growth", 0.5), ("workers", 0)],
)
def test_invalid_values(field, value):
    with pytest.raises(ValueError):
        SpritesheetConfig(**{field: value})


def test_with_overrides_skips_none():
    config = SpritesheetConfig(spacing=3)
    assert config.with_overrides(spacing=None, sdf=True) == SpritesheetConfig(spacing=3, sdf=True)


def test_ratio_override_beats_retina_from_file(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"retina": True}))
    assert load_config(path, pixel_ratio=3).pixel_ratio == 3
    assert load_config(path, pixel_ratio=None).pixel_ratio == 2


def test_retina_override_beats_ratio_from_file(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"pixel_ratio": 3}))
    assert load_config(path, retina=True).pixel_ratio == 2


def test_retina_and_ratio_together_are_rejected(tmp_path):
    path = tmp_path / "sprites.json"
    path.write_text(json.dumps({"retina": True, "pixel_ratio": 3}))
    with pytest.raises(ValueError):
        load_config(path)
    with pytest.raises(ValueError):
        load_config(retina=True, pixel_ratio=3)
