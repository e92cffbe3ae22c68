"""Build a spritesheet bitmap and its index from rasterized sprites."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Union

import numpy as np

from sprite_sheet.builder.dedup import make_unique
from sprite_sheet.compositor import composite
from sprite_sheet.config.schema import SpritesheetConfig
from sprite_sheet.data import Sprite, SpriteDescription
from sprite_sheet.errors import EmptySpritesheet
from sprite_sheet.index import build_index, index_to_json
from sprite_sheet.io.images import encode_png
from sprite_sheet.packing import PackItem, pack_rectangles

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Spritesheet:
    """A composited bitmap and the index that describes it."""

    sheet: np.ndarray
    index: Dict[str, SpriteDescription]

    @property
    def width(self) -> int:
        return int(self.sheet.shape[1])

    @property
    def height(self) -> int:
        return int(self.sheet.shape[0])

    def encode_png(self) -> bytes:
        """Encode the bitmap as a losslessly compressed PNG."""

        return encode_png(self.sheet)

    def save_spritesheet(self, path: Union[str, Path]) -> None:
        Path(path).write_bytes(self.encode_png())

    def index_json(self, minify: bool = False) -> str:
        return index_to_json(self.index, minify=minify)

    def save_index(self, file_name_prefix: Union[str, Path], minify: bool = False) -> Path:
        """Write the index to ``file_name_prefix`` + ``.json`` and return that path."""

        path = Path(f"{file_name_prefix}.json")
        path.write_text(self.index_json(minify=minify), encoding="utf-8")
        return path


def build_spritesheet(sprites: Mapping[str, Sprite], config: SpritesheetConfig) -> Spritesheet:
    """Pack, composite and index ``sprites``.

    Sprites are processed in name order whatever order they arrive in, so the
    output only depends on the names, pixels and ``config``.
    """

    if not sprites:
        raise EmptySpritesheet("No sprites to build a spritesheet from.")

    ordered = {name: sprites[name] for name in sorted(sprites)}
    if config.unique:
        canonical, aliases = make_unique(ordered)
    else:
        canonical, aliases = ordered, {}

    items: List[PackItem] = [PackItem(name, sprite.width, sprite.height) for name, sprite in canonical.items()]
    packed = pack_rectangles(items, spacing=config.spacing, max_growth=config.max_growth)
    sheet = composite(packed.placements, canonical, packed.width, packed.height)
    index = build_index(packed.placements, canonical, aliases, sdf=config.sdf)
    logger.info(
        "Built %dx%d spritesheet: %d images, %d index entries",
        packed.width,
        packed.height,
        len(canonical),
        len(index),
    )
    return Spritesheet(sheet=sheet, index=index)
