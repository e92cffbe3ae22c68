"""Rectangle value types shared by the packer, compositor and metadata lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sprite_sheet.errors import InvalidMetadataGeometry


@dataclass(frozen=True)
class Rect:
    """Integer rectangle in destination pixel space."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: "Rect") -> bool:
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, other: "Rect") -> bool:
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True)
class BoundingBox:
    """Floating-point box (left, top, right, bottom) of a vector node."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> "BoundingBox":
        """Build a box, rejecting non-finite or inverted edges.

        Zero-width or zero-height boxes are valid: stretch zones are often drawn
        as horizontal or vertical lines.
        """

        edges = (float(left), float(top), float(right), float(bottom))
        if not all(math.isfinite(edge) for edge in edges):
            raise InvalidMetadataGeometry(f"Bounding box has non-finite edges: {edges}")
        if edges[2] < edges[0] or edges[3] < edges[1]:
            raise InvalidMetadataGeometry(f"Bounding box is inverted: {edges}")
        return cls(*edges)

    def scaled(self, ratio: float) -> "BoundingBox":
        return BoundingBox(
            left=self.left * ratio,
            top=self.top * ratio,
            right=self.right * ratio,
            bottom=self.bottom * ratio,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top
