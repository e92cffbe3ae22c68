import gzip

import pytest

try:
    import cairosvg  # noqa: F401
except (ImportError, OSError):
    pytest.skip("CairoSVG needs the cairo library", allow_module_level=True)

from svg_samples import HIDDEN, PLAIN, STRETCHABLE, TRANSFORMED, WITH_CONTENT

from sprite_sheet.errors import SvgLoadError
from sprite_sheet.io.svg import (
    SvgDocument,
    create_raster_context,
    load_sprite,
    load_sprites,
    rasterize,
    read_svg_text,
)


@pytest.fixture
def context():
    return create_raster_context()


def test_svgz_is_decompressed():
    assert read_svg_text(gzip.compress(PLAIN.encode("utf-8"))) == PLAIN
    assert read_svg_text(PLAIN.encode("utf-8")) == PLAIN


def test_bad_bytes_are_load_errors():
    with pytest.raises(SvgLoadError):
        read_svg_text(b"\xff\xfe\x00")
    with pytest.raises(SvgLoadError):
        read_svg_text(b"\x1f\x8bnot gzip")


def test_context_rejects_bad_dpi():
    with pytest.raises(ValueError):
        create_raster_context(dpi=0)


def test_node_bbox(context):
    document = SvgDocument(WITH_CONTENT, context)
    assert document.size == pytest.approx((20.0, 20.0))
    assert document.node_bbox("mapbox-content") == pytest.approx((2.0, 5.0, 18.0, 18.0))
    assert document.node_bbox("mapbox-stretch-x") is None


def test_node_bbox_applies_transforms(context):
    document = SvgDocument(TRANSFORMED, context)
    assert document.node_bbox("mapbox-content") == pytest.approx((10.0, 0.0, 15.0, 5.0))


def test_hidden_nodes_are_ignored(context):
    assert SvgDocument(HIDDEN, context).node_bbox("mapbox-content") is None


def test_rasterize_scales(context):
    pixels = rasterize(PLAIN, 2, context)
    assert pixels.shape == (40, 40, 4)
    assert tuple(pixels[20, 20]) == (255, 0, 0, 255)


def test_load_sprite_at_double_ratio(tmp_path, context):
    path = tmp_path / "label.svg"
    path.write_text(WITH_CONTENT, encoding="utf-8")
    sprite = load_sprite(path, 2, context)
    assert (sprite.width, sprite.height, sprite.pixel_ratio) == (40, 40, 2)
    content = sprite.content_area
    assert (content.left, content.top, content.right, content.bottom) == pytest.approx((4.0, 10.0, 36.0, 36.0))


def test_stretch_shorthand_covers_both_axes(tmp_path, context):
    path = tmp_path / "panel.svg"
    path.write_text(STRETCHABLE, encoding="utf-8")
    sprite = load_sprite(path, 1, context)
    assert sprite.stretch_x_areas == sprite.stretch_y_areas
    (zone,) = sprite.stretch_x_areas
    assert (zone.left, zone.top, zone.right, zone.bottom) == pytest.approx((4.0, 6.0, 16.0, 14.0))


def test_load_sprite_as_sdf(tmp_path, context):
    path = tmp_path / "dot.svg"
    path.write_text(PLAIN, encoding="utf-8")
    sprite = load_sprite(path, 1, context, sdf=True)
    assert sprite.sdf
    assert (sprite.width, sprite.height) == (26, 26)


def test_broken_svg_is_a_load_error(tmp_path, context):
    path = tmp_path / "broken.svg"
    path.write_text("<svg", encoding="utf-8")
    with pytest.raises(SvgLoadError):
        load_sprite(path, 1, context)


def test_load_sprites_names_and_sorts(tmp_path, context):
    (tmp_path / "b.svg").write_text(PLAIN, encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "a.svg").write_text(PLAIN, encoding="utf-8")
    paths = [tmp_path / "b.svg", tmp_path / "nested" / "a.svg"]
    sprites = load_sprites(paths, tmp_path, 1, context, workers=2)
    assert list(sprites) == ["b", "nested/a"]
