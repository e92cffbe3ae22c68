"""Load SVG icons and rasterize them into sprites.

Rasterization is done by CairoSVG and node geometry by svgelements. Both are
driven by a :class:`RasterContext` that is created once at startup and shared,
read-only, by every worker.
"""

from __future__ import annotations

import gzip
import io
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

import cairosvg
import numpy as np
import svgelements

from sprite_sheet.data import Sprite
from sprite_sheet.errors import InvalidMetadataGeometry, SvgLoadError
from sprite_sheet.io.files import sprite_name
from sprite_sheet.io.images import decode_png

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class RasterContext:
    """Shared rasterizer settings.

    ``unsafe`` lets SVGs reference external files and entities, which is
    needed for icons that embed PNGs by relative URL.
    """

    dpi: float = 96.0
    unsafe: bool = False


def create_raster_context(dpi: float = 96.0, unsafe: bool = False) -> RasterContext:
    if dpi <= 0:
        raise ValueError("DPI must be positive.")
    return RasterContext(dpi=dpi, unsafe=unsafe)


def read_svg_text(data: bytes) -> str:
    """Decode SVG bytes, decompressing SVGZ first."""

    if data.startswith(_GZIP_MAGIC):
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError) as exc:
            raise SvgLoadError(f"Corrupt SVGZ data: {exc}") from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SvgLoadError("SVG data is not valid UTF-8.") from exc


def _is_hidden(element: svgelements.SVGElement) -> bool:
    values = getattr(element, "values", None) or {}
    display = str(values.get("display", "")).strip().lower()
    visibility = str(values.get("visibility", "")).strip().lower()
    return display == "none" or visibility in ("hidden", "collapse")


class SvgDocument:
    """A parsed SVG that can report the absolute bounding box of a node by id."""

    def __init__(self, text: str, context: RasterContext) -> None:
        self._svg = svgelements.SVG.parse(io.BytesIO(text.encode("utf-8")), reify=True, ppi=context.dpi)

    @property
    def size(self) -> Tuple[float, float]:
        """Width and height of the document in CSS pixels."""

        return float(self._svg.width), float(self._svg.height)

    def node_bbox(self, node_id: str) -> Optional[Tuple[float, float, float, float]]:
        element = self._svg.get_element_by_id(node_id)
        if element is None or _is_hidden(element):
            return None
        measure = getattr(element, "bbox", None)
        if measure is None:
            return None
        try:
            bbox = measure()
        except (ArithmeticError, ValueError, TypeError) as exc:
            raise InvalidMetadataGeometry(f"Cannot measure node {node_id!r}: {exc}") from exc
        if bbox is None:
            return None
        left, top, right, bottom = bbox
        return float(left), float(top), float(right), float(bottom)


def rasterize(text: str, pixel_ratio: int, context: RasterContext, base_url: Optional[str] = None) -> np.ndarray:
    """Render SVG text to an RGBA8 array scaled by ``pixel_ratio``."""

    png = cairosvg.svg2png(
        bytestring=text.encode("utf-8"),
        url=base_url,
        scale=pixel_ratio,
        dpi=context.dpi,
        unsafe=context.unsafe,
    )
    return decode_png(png)


def load_sprite(
    path: PathLike,
    pixel_ratio: int,
    context: RasterContext,
    sdf: bool = False,
) -> Sprite:
    """Read, parse and rasterize one SVG file."""

    path = Path(path)
    try:
        text = read_svg_text(path.read_bytes())
        document = SvgDocument(text, context)
        pixels = rasterize(text, pixel_ratio, context, base_url=str(path.resolve()))
        sprite = Sprite(pixels=pixels, pixel_ratio=pixel_ratio, document=document)
    except (SvgLoadError, OSError, ValueError, SyntaxError) as exc:
        raise SvgLoadError(f"{path}: {exc}") from exc
    return sprite.to_sdf() if sdf else sprite


def load_sprites(
    paths: Iterable[PathLike],
    base_path: PathLike,
    pixel_ratio: int,
    context: RasterContext,
    sdf: bool = False,
    workers: int = 4,
) -> Dict[str, Sprite]:
    """Rasterize ``paths`` in parallel and return sprites keyed by name, sorted."""

    named = [(sprite_name(path, base_path), Path(path)) for path in paths]

    def _load(item: Tuple[str, Path]) -> Tuple[str, Sprite]:
        name, path = item
        logger.debug("Rasterizing %s as %r", path, name)
        return name, load_sprite(path, pixel_ratio, context, sdf=sdf)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        loaded = list(executor.map(_load, named))
    return {name: sprite for name, sprite in sorted(loaded, key=lambda item: item[0])}
