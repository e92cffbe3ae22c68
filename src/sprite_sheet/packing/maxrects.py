"""Pack sprite rectangles into the smallest power-of-two bin that holds them.

Each candidate bin is filled with the Maximal Rectangles algorithm using a
best-area-fit heuristic. Candidate bins are tried smallest first, and only bins
up to ``max_growth`` times the minimum area are ever considered, so the search
always terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sprite_sheet.data import PlacedSprite
from sprite_sheet.errors import PackingExhausted
from sprite_sheet.geometry import Rect

logger = logging.getLogger(__name__)

DEFAULT_MAX_GROWTH = 10.0


@dataclass(frozen=True)
class PackItem:
    """A named box to place."""

    name: str
    width: int
    height: int


@dataclass(frozen=True)
class PackResult:
    """Placements plus the tight size of the area they use."""

    placements: List[PlacedSprite]
    width: int
    height: int
    bin_width: int
    bin_height: int


class MaxRectsBin:
    """A single bin tracking its maximal free rectangles."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.free_rects: List[Rect] = [Rect(0, 0, width, height)]

    def _find_position(self, width: int, height: int) -> Optional[Rect]:
        best: Optional[Rect] = None
        best_score: Optional[Tuple[int, int, int, int]] = None
        for free in self.free_rects:
            if free.width < width or free.height < height:
                continue
            leftover_w = free.width - width
            leftover_h = free.height - height
            score = (free.area - width * height, min(leftover_w, leftover_h), free.y, free.x)
            if best_score is None or score < best_score:
                best_score = score
                best = Rect(free.x, free.y, width, height)
        return best

    def insert(self, width: int, height: int) -> Optional[Rect]:
        """Place a box, returning where it went or ``None`` if it doesn't fit."""

        placed = self._find_position(width, height)
        if placed is None:
            return None
        self._split_free_rects(placed)
        self._prune_free_rects()
        return placed

    def _split_free_rects(self, used: Rect) -> None:
        """Replace every free rectangle that overlaps ``used`` with its maximal leftovers."""

        new_free: List[Rect] = []
        for free in self.free_rects:
            if not used.intersects(free):
                new_free.append(free)
                continue
            if used.y > free.y:
                new_free.append(Rect(free.x, free.y, free.width, used.y - free.y))
            if used.bottom < free.bottom:
                new_free.append(Rect(free.x, used.bottom, free.width, free.bottom - used.bottom))
            if used.x > free.x:
                new_free.append(Rect(free.x, free.y, used.x - free.x, free.height))
            if used.right < free.right:
                new_free.append(Rect(used.right, free.y, free.right - used.right, free.height))
        self.free_rects = new_free

    def _prune_free_rects(self) -> None:
        """Drop free rectangles that are contained in another one."""

        pruned: List[Rect] = []
        for index, rect in enumerate(self.free_rects):
            redundant = False
            for other_index, other in enumerate(self.free_rects):
                if index == other_index or not other.contains(rect):
                    continue
                # Identical rectangles: keep only the first.
                if rect != other or other_index < index:
                    redundant = True
                    break
            if not redundant:
                pruned.append(rect)
        self.free_rects = pruned


def _next_power_of_two(value: int) -> int:
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


def candidate_bins(
    min_width: int,
    min_height: int,
    min_area: int,
    max_growth: float = DEFAULT_MAX_GROWTH,
) -> List[Tuple[int, int]]:
    """All power-of-two bins worth trying, smallest area first.

    Bins must be at least ``min_width`` x ``min_height`` and hold ``min_area``
    pixels. Their area is capped at ``max_growth`` times the smallest area any
    bin could have. Within one area, squarer bins come first.
    """

    base_width = _next_power_of_two(min_width)
    base_height = _next_power_of_two(min_height)
    max_area = max_growth * max(min_area, base_width * base_height)

    bins: List[Tuple[int, int]] = []
    width = base_width
    while width * base_height <= max_area:
        height = base_height
        while width * height <= max_area:
            if width * height >= min_area:
                bins.append((width, height))
            height *= 2
        width *= 2
    bins.sort(key=lambda size: (size[0] * size[1], abs(size[0].bit_length() - size[1].bit_length()), size[0]))
    return bins


def _try_pack(
    items: Sequence[PackItem],
    bin_width: int,
    bin_height: int,
    spacing: int,
) -> Optional[List[PlacedSprite]]:
    packer = MaxRectsBin(bin_width, bin_height)
    placements: List[PlacedSprite] = []
    for item in items:
        slot = packer.insert(item.width + spacing, item.height + spacing)
        if slot is None:
            return None
        placements.append(PlacedSprite(item.name, Rect(slot.x, slot.y, item.width, item.height)))
    return placements


def pack_rectangles(
    items: Sequence[PackItem],
    spacing: int = 0,
    max_growth: float = DEFAULT_MAX_GROWTH,
) -> PackResult:
    """Assign non-overlapping rectangles to ``items``.

    ``spacing`` pixels are added to the right and bottom of every box while
    packing, so placed sprites are at least ``spacing`` apart. The reported
    width and height are the right-most and bottom-most sprite edges, which
    trims unused space without moving any sprite.

    Raises :class:`PackingExhausted` if no candidate bin works.
    """

    if not items:
        raise ValueError("Nothing to pack.")
    if spacing < 0:
        raise ValueError("Spacing must be non-negative.")
    if max_growth < 1.0:
        raise ValueError("Maximum growth must be at least 1.")
    for item in items:
        if item.width <= 0 or item.height <= 0:
            raise ValueError(f"Item {item.name!r} has no area.")

    ordered = sorted(items, key=lambda item: (-item.height, -item.width, item.name))
    min_width = max(item.width + spacing for item in items)
    min_height = max(item.height + spacing for item in items)
    min_area = sum((item.width + spacing) * (item.height + spacing) for item in items)

    bins = candidate_bins(min_width, min_height, min_area, max_growth)
    for bin_width, bin_height in bins:
        placements = _try_pack(ordered, bin_width, bin_height, spacing)
        if placements is None:
            logger.debug("Sprites do not fit a %dx%d bin", bin_width, bin_height)
            continue
        logger.debug("Packed %d sprites into a %dx%d bin", len(placements), bin_width, bin_height)
        placements.sort(key=lambda placed: placed.name)
        return PackResult(
            placements=placements,
            width=max(placed.rect.right for placed in placements),
            height=max(placed.rect.bottom for placed in placements),
            bin_width=bin_width,
            bin_height=bin_height,
        )

    raise PackingExhausted(
        f"Could not pack {len(items)} sprites into any bin up to {max_growth:g}x their area "
        f"({len(bins)} bins tried)."
    )
