"""Configuration loading and defaults."""

from sprite_sheet.config.schema import (
    RETINA_PIXEL_RATIO,
    SpritesheetConfig,
    load_config,
)

__all__ = [
    "RETINA_PIXEL_RATIO",
    "SpritesheetConfig",
    "load_config",
]
