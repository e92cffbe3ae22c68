"""Rectangle packing for spritesheet layout."""

from sprite_sheet.packing.maxrects import (
    DEFAULT_MAX_GROWTH,
    MaxRectsBin,
    PackItem,
    PackResult,
    candidate_bins,
    pack_rectangles,
)

__all__ = [
    "DEFAULT_MAX_GROWTH",
    "MaxRectsBin",
    "PackItem",
    "PackResult",
    "candidate_bins",
    "pack_rectangles",
]
