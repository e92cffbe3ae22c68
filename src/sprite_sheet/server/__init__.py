"""HTTP server for spritesheets built on demand."""

from sprite_sheet.server.app import SpritesheetCache, create_app, parse_sprite_path

__all__ = ["SpritesheetCache", "create_app", "parse_sprite_path"]
