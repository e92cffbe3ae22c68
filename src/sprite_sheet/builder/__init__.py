"""Spritesheet assembly."""

from sprite_sheet.builder.dedup import make_unique
from sprite_sheet.builder.spritesheet import Spritesheet, build_spritesheet

__all__ = ["Spritesheet", "build_spritesheet", "make_unique"]
