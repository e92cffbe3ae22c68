"""Sprite index file construction and serialization."""

from sprite_sheet.index.serialize import (
    build_index,
    describe,
    description_to_dict,
    icon_number,
    index_to_json,
)

__all__ = ["build_index", "describe", "description_to_dict", "icon_number", "index_to_json"]
