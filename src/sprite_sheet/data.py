"""Core data structures used throughout the pipeline."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from functools import cached_property
from typing import List, Optional

import numpy as np

from sprite_sheet.geometry import BoundingBox, Rect
from sprite_sheet.metadata import SpriteMetadata, VectorDocument, extract_metadata
from sprite_sheet.sdf import sdf_pixels


@dataclass(eq=False)
class Sprite:
    """A rasterized icon: straight-alpha RGBA8 pixels plus its pixel ratio.

    ``document`` is the parsed source image, used only to look up
    stretchable-icon metadata. The pixel buffer is treated as immutable once
    the sprite is created.
    """

    pixels: np.ndarray
    pixel_ratio: int = 1
    sdf: bool = False
    document: Optional[VectorDocument] = None

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError("Sprite pixels must have shape (height, width, 4).")
        if self.pixels.dtype != np.uint8:
            raise ValueError("Sprite pixels must be uint8.")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError("Sprite has no pixels.")
        if int(self.pixel_ratio) < 1:
            raise ValueError("Pixel ratio must be a positive integer.")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @cached_property
    def metadata(self) -> SpriteMetadata:
        return extract_metadata(self.document, self.pixel_ratio)

    @property
    def content_area(self) -> Optional[BoundingBox]:
        return self.metadata.content

    @property
    def stretch_x_areas(self) -> Optional[List[BoundingBox]]:
        return self.metadata.stretch_x

    @property
    def stretch_y_areas(self) -> Optional[List[BoundingBox]]:
        return self.metadata.stretch_y

    def fingerprint(self) -> str:
        """SHA-256 over the dimensions and raw pixel bytes."""

        digest = hashlib.sha256()
        digest.update(f"{self.width}x{self.height}:".encode("ascii"))
        digest.update(np.ascontiguousarray(self.pixels).tobytes())
        return digest.hexdigest()

    def to_sdf(self) -> "Sprite":
        """Return the SDF variant of this sprite (3px larger on every side)."""

        if self.sdf:
            return self
        return Sprite(
            pixels=sdf_pixels(self.pixels),
            pixel_ratio=self.pixel_ratio,
            sdf=True,
            document=self.document,
        )


@dataclass(frozen=True)
class PlacedSprite:
    """A sprite name and where the packer put it."""

    name: str
    rect: Rect


@dataclass(frozen=True)
class SpriteDescription:
    """One entry of the sprite index file."""

    height: int
    width: int
    pixel_ratio: int
    x: int
    y: int
    content: Optional[BoundingBox] = None
    stretch_x: Optional[List[BoundingBox]] = None
    stretch_y: Optional[List[BoundingBox]] = None
    sdf: bool = False
