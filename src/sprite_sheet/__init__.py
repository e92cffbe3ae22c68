"""Build Mapbox/MapLibre spritesheets from SVG icons."""

from sprite_sheet.builder import Spritesheet, build_spritesheet, make_unique
from sprite_sheet.config import SpritesheetConfig, load_config
from sprite_sheet.data import PlacedSprite, Sprite, SpriteDescription
from sprite_sheet.errors import (
    EmptySpritesheet,
    EncodingFailure,
    InvalidMetadataGeometry,
    PackingExhausted,
    RasterAllocationFailed,
    SpriteNameError,
    SpriteSheetError,
    SvgLoadError,
)
from sprite_sheet.geometry import BoundingBox, Rect

__all__ = [
    "BoundingBox",
    "EmptySpritesheet",
    "EncodingFailure",
    "InvalidMetadataGeometry",
    "PackingExhausted",
    "PlacedSprite",
    "RasterAllocationFailed",
    "Rect",
    "Sprite",
    "SpriteDescription",
    "SpriteNameError",
    "SpriteSheetError",
    "Spritesheet",
    "SpritesheetConfig",
    "SvgLoadError",
    "build_spritesheet",
    "load_config",
    "make_unique",
]
