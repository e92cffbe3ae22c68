"""Stretchable-icon metadata lookup."""

from sprite_sheet.metadata.extractor import (
    CONTENT_ID,
    STRETCH_ID,
    SpriteMetadata,
    VectorDocument,
    content_area,
    extract_metadata,
    node_bbox,
    stretch_x_areas,
    stretch_y_areas,
)

__all__ = [
    "CONTENT_ID",
    "STRETCH_ID",
    "SpriteMetadata",
    "VectorDocument",
    "content_area",
    "extract_metadata",
    "node_bbox",
    "stretch_x_areas",
    "stretch_y_areas",
]
