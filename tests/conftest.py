from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import pytest

from sprite_sheet.data import Sprite

Box = Tuple[float, float, float, float]


class FakeDocument:
    """Vector document backed by a dict of node id -> bounding box (or exception)."""

    def __init__(self, boxes: Dict[str, Union[Box, Exception]]) -> None:
        self.boxes = boxes
        self.lookups: List[str] = []

    def node_bbox(self, node_id: str) -> Optional[Box]:
        self.lookups.append(node_id)
        value = self.boxes.get(node_id)
        if isinstance(value, Exception):
            raise value
        return value


def solid_pixels(width: int, height: int, color=(255, 0, 0, 255)) -> np.ndarray:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[...] = color
    return pixels


@pytest.fixture
def make_sprite() -> Callable[..., Sprite]:
    def _make(width: int, height: int, color=(255, 0, 0, 255), pixel_ratio: int = 1, document=None) -> Sprite:
        return Sprite(pixels=solid_pixels(width, height, color), pixel_ratio=pixel_ratio, document=document)

    return _make


@pytest.fixture
def fake_document() -> Callable[[Dict[str, Union[Box, Exception]]], FakeDocument]:
    return FakeDocument
