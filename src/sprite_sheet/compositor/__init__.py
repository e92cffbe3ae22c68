"""Draw packed sprites into the spritesheet bitmap."""

from sprite_sheet.compositor.blit import allocate_canvas, blit_sprite, composite

__all__ = ["allocate_canvas", "blit_sprite", "composite"]
