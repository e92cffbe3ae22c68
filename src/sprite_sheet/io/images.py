"""PNG encoding and decoding."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image

from sprite_sheet.errors import EncodingFailure


def encode_png(pixels: np.ndarray) -> bytes:
    """Encode a straight-alpha RGBA8 array as an optimized PNG."""

    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise EncodingFailure("PNG encoding needs a (height, width, 4) uint8 array.")
    buffer = io.BytesIO()
    try:
        Image.fromarray(np.ascontiguousarray(pixels)).save(buffer, format="PNG", optimize=True)
    except (OSError, ValueError) as exc:
        raise EncodingFailure(f"PNG encoding failed: {exc}") from exc
    return buffer.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    """Decode PNG bytes into a straight-alpha RGBA8 array."""

    with Image.open(io.BytesIO(data)) as image:
        return np.array(image.convert("RGBA"), dtype=np.uint8)


def load_png(path: Path) -> np.ndarray:
    return decode_png(Path(path).read_bytes())
