import pytest

from sprite_sheet.errors import SpriteNameError
from sprite_sheet.io.files import get_svg_input_paths, sprite_name


@pytest.fixture
def icon_tree(tmp_path):
    (tmp_path / "b.svg").write_text("<svg/>")
    (tmp_path / "a.svg").write_text("<svg/>")
    (tmp_path / "upper.SVG").write_text("<svg/>")
    (tmp_path / "c.svgz").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("")
    (tmp_path / ".hidden.svg").write_text("<svg/>")
    (tmp_path / "transport").mkdir()
    (tmp_path / "transport" / "bus.svg").write_text("<svg/>")
    (tmp_path / "transport" / ".draft.svg").write_text("<svg/>")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "old.svg").write_text("<svg/>")
    return tmp_path


def test_flat_listing(icon_tree):
    names = [path.name for path in get_svg_input_paths(icon_tree)]
    assert names == ["a.svg", "b.svg", "c.svgz"]


def test_extensions_are_case_sensitive(icon_tree):
    assert "upper.SVG" not in [path.name for path in get_svg_input_paths(icon_tree, recursive=True)]


def test_recursive_listing_enters_hidden_directories(icon_tree):
    paths = get_svg_input_paths(icon_tree, recursive=True)
    assert [sprite_name(path, icon_tree) for path in paths] == [".cache/old", "a", "b", "c", "transport/bus"]


def test_sprite_name_errors(tmp_path):
    with pytest.raises(SpriteNameError):
        sprite_name(tmp_path, tmp_path)
    with pytest.raises(SpriteNameError):
        sprite_name(tmp_path.parent / "elsewhere.svg", tmp_path)
    with pytest.raises(SpriteNameError):
        sprite_name("", tmp_path)
