"""Metadata for stretchable icons.

Stretchable icons carry their metadata as specially named nodes in the source
SVG. The bounding box of ``mapbox-content`` is the area that text is fitted
into when a symbol uses ``icon-text-fit``. Nodes named ``mapbox-stretch-x``,
``mapbox-stretch-x-1``, ``mapbox-stretch-x-2`` (and so on) mark the horizontal
zones that may be stretched; ``mapbox-stretch-y`` works the same way
vertically. ``mapbox-stretch`` is shorthand for both axes and is only used for
an axis that has no explicit nodes of its own.

See https://github.com/mapbox/mapbox-gl-js/issues/8917.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from sprite_sheet.errors import InvalidMetadataGeometry
from sprite_sheet.geometry import BoundingBox

logger = logging.getLogger(__name__)

CONTENT_ID = "mapbox-content"
STRETCH_ID = "mapbox-stretch"


class VectorDocument(Protocol):
    """Parsed vector image that can report the bounding box of a node by id.

    ``node_bbox`` returns ``(left, top, right, bottom)`` in absolute document
    units, or ``None`` when the node is absent, hidden or has no geometry. It
    may raise :class:`InvalidMetadataGeometry` for geometry it cannot measure.
    """

    def node_bbox(self, node_id: str) -> Optional[Tuple[float, float, float, float]]:
        ...


@dataclass(frozen=True)
class SpriteMetadata:
    """Content and stretch areas of a sprite, in destination pixels."""

    content: Optional[BoundingBox] = None
    stretch_x: Optional[List[BoundingBox]] = None
    stretch_y: Optional[List[BoundingBox]] = None


def node_bbox(
    document: Optional[VectorDocument],
    node_id: str,
    pixel_ratio: int,
) -> Optional[BoundingBox]:
    """Return the scaled bounding box of ``node_id``, or ``None`` if unusable."""

    if document is None:
        return None
    try:
        raw = document.node_bbox(node_id)
        if raw is None:
            return None
        return BoundingBox.from_ltrb(*raw).scaled(pixel_ratio)
    except InvalidMetadataGeometry as exc:
        logger.debug("Ignoring metadata node %r: %s", node_id, exc)
        return None


def content_area(document: Optional[VectorDocument], pixel_ratio: int) -> Optional[BoundingBox]:
    return node_bbox(document, CONTENT_ID, pixel_ratio)


def _stretch_areas(
    document: Optional[VectorDocument],
    axis: str,
    pixel_ratio: int,
) -> Optional[List[BoundingBox]]:
    prefix = f"{STRETCH_ID}-{axis}"
    areas: List[BoundingBox] = []
    unnumbered = node_bbox(document, prefix, pixel_ratio)
    if unnumbered is not None:
        areas.append(unnumbered)
    # Numbered zones stop at the first missing index.
    for index in itertools.count(1):
        area = node_bbox(document, f"{prefix}-{index}", pixel_ratio)
        if area is None:
            break
        areas.append(area)
    if areas:
        return areas
    shorthand = node_bbox(document, STRETCH_ID, pixel_ratio)
    return [shorthand] if shorthand is not None else None


def stretch_x_areas(
    document: Optional[VectorDocument], pixel_ratio: int
) -> Optional[List[BoundingBox]]:
    """Horizontal stretch zones. Only their left and right edges end up in the index."""

    return _stretch_areas(document, "x", pixel_ratio)


def stretch_y_areas(
    document: Optional[VectorDocument], pixel_ratio: int
) -> Optional[List[BoundingBox]]:
    """Vertical stretch zones. Only their top and bottom edges end up in the index."""

    return _stretch_areas(document, "y", pixel_ratio)


def extract_metadata(document: Optional[VectorDocument], pixel_ratio: int) -> SpriteMetadata:
    return SpriteMetadata(
        content=content_area(document, pixel_ratio),
        stretch_x=stretch_x_areas(document, pixel_ratio),
        stretch_y=stretch_y_areas(document, pixel_ratio),
    )
