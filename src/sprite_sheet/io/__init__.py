"""File discovery and PNG I/O.

SVG loading lives in :mod:`sprite_sheet.io.svg`, which needs the cairo
libraries, so it is imported explicitly by the code that rasterizes.
"""

from sprite_sheet.io.files import get_svg_input_paths, is_hidden, is_svg_file, sprite_name
from sprite_sheet.io.images import decode_png, encode_png, load_png

__all__ = [
    "decode_png",
    "encode_png",
    "get_svg_input_paths",
    "is_hidden",
    "is_svg_file",
    "load_png",
    "sprite_name",
]
