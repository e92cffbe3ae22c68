import json

import numpy as np
import pytest

from svg_samples import PLAIN

from sprite_sheet.config import SpritesheetConfig
from sprite_sheet.data import Sprite
from sprite_sheet.errors import SvgLoadError
from sprite_sheet.io.images import decode_png
from sprite_sheet.server import SpritesheetCache, create_app, parse_sprite_path

try:
    import cairosvg  # noqa: F401

    HAVE_CAIRO = True
except (ImportError, OSError):
    HAVE_CAIRO = False

needs_cairo = pytest.mark.skipif(not HAVE_CAIRO, reason="CairoSVG needs the cairo library")


class CountingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, pixel_ratio):
        self.calls.append(pixel_ratio)
        size = 4 * pixel_ratio
        pixels = np.full((size, size, 4), 200, dtype=np.uint8)
        return {"dot": Sprite(pixels=pixels, pixel_ratio=pixel_ratio)}


@pytest.fixture
def loader():
    return CountingLoader()


@pytest.fixture
def client(loader):
    return create_app(loader=loader).test_client()


@pytest.mark.parametrize(
    "path, expected",
    [
        ("sprite.json", ("sprite", 1, "json")),
        ("sprite@2x.png", ("sprite", 2, "png")),
        ("sprite@0x.png", None),
        ("sprite.gif", None),
    ],
)
def test_parse_sprite_path(path, expected):
    assert parse_sprite_path(path) == expected


def test_index_and_png(client, loader):
    response = client.get("/sprite.json")
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert json.loads(response.data)["dot"]["width"] == 4

    response = client.get("/sprite@2x.png")
    assert response.status_code == 200
    assert response.mimetype == "image/png"
    assert decode_png(response.data).shape == (8, 8, 4)
    assert loader.calls == [1, 2]


def test_sheets_are_cached_until_reload(client, loader):
    client.get("/sprite.json")
    client.get("/sprite.png")
    assert loader.calls == [1]
    assert client.post("/reload").status_code == 200
    client.get("/sprite.png")
    assert loader.calls == [1, 1]


@pytest.mark.parametrize("path", ["/other.json", "/sprite@9x.png", "/sprite.gif"])
def test_unknown_files_are_not_found(client, path):
    assert client.get(path).status_code == 404


def test_build_errors_are_reported():
    def failing(pixel_ratio):
        raise SvgLoadError("bad icon")

    response = create_app(loader=failing).test_client().get("/sprite.json")
    assert response.status_code == 500
    assert json.loads(response.data) == {"error": "bad icon"}


def test_cache_rejects_unsupported_ratios(loader):
    cache = SpritesheetCache(loader, SpritesheetConfig(), max_ratio=2)
    with pytest.raises(ValueError):
        cache.get(0)
    with pytest.raises(ValueError):
        cache.get(3)
    assert loader.calls == []


@needs_cairo
def test_serves_a_directory(tmp_path):
    (tmp_path / "pin.svg").write_text(PLAIN, encoding="utf-8")
    client = create_app(sprites_dir=tmp_path, name="icons").test_client()
    index = json.loads(client.get("/icons@2x.json").data)
    assert index["pin"]["width"] == 40
    assert index["pin"]["pixelRatio"] == 2
