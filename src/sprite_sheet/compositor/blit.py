"""Sprite compositing into a single RGBA8 bitmap."""

from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np

from sprite_sheet.data import PlacedSprite, Sprite
from sprite_sheet.errors import RasterAllocationFailed
from sprite_sheet.geometry import Rect


def allocate_canvas(width: int, height: int) -> np.ndarray:
    """Allocate a fully transparent RGBA canvas."""

    if width <= 0 or height <= 0:
        raise RasterAllocationFailed(f"Cannot allocate a {width}x{height} bitmap.")
    try:
        return np.zeros((height, width, 4), dtype=np.uint8)
    except (MemoryError, ValueError) as exc:
        raise RasterAllocationFailed(f"Cannot allocate a {width}x{height} bitmap: {exc}") from exc


def blit_sprite(canvas: np.ndarray, pixels: np.ndarray, rect: Rect) -> np.ndarray:
    """Copy ``pixels`` into ``canvas`` at ``rect``, replacing what was there.

    Placements never overlap, so there is nothing to blend with.
    """

    if rect.x < 0 or rect.y < 0 or rect.right > canvas.shape[1] or rect.bottom > canvas.shape[0]:
        raise ValueError("Sprite placement is out of canvas bounds.")
    if pixels.shape[:2] != (rect.height, rect.width):
        raise ValueError("Sprite size does not match its placement.")
    canvas[rect.y : rect.bottom, rect.x : rect.right] = pixels
    return canvas


def composite(
    placements: Iterable[PlacedSprite],
    sprites: Mapping[str, Sprite],
    width: int,
    height: int,
) -> np.ndarray:
    """Build the spritesheet bitmap from packer placements."""

    canvas = allocate_canvas(width, height)
    for placed in placements:
        blit_sprite(canvas, sprites[placed.name].pixels, placed.rect)
    return canvas
