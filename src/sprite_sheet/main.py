"""Command-line entry point: build a spritesheet from a directory of SVGs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from sprite_sheet.builder import build_spritesheet
from sprite_sheet.config import load_config
from sprite_sheet.errors import (
    EmptySpritesheet,
    EncodingFailure,
    PackingExhausted,
    RasterAllocationFailed,
    SpriteNameError,
    SvgLoadError,
)
from sprite_sheet.io import get_svg_input_paths
from sprite_sheet.io.svg import create_raster_context, load_sprites

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70
EX_IOERR = 74


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        number = int(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sprite-sheet",
        description="Create a spritesheet and index file from a directory of SVG images",
    )
    parser.add_argument("input", type=Path, help="A directory of SVGs to include in the spritesheet")
    parser.add_argument("output", help="Name of the file in which to save the spritesheet")
    ratio_group = parser.add_mutually_exclusive_group()
    ratio_group.add_argument("-r", "--ratio", type=_positive_int, help="Set the output pixel ratio")
    ratio_group.add_argument(
        "--retina",
        action="store_true",
        default=None,
        help="Set the pixel ratio to 2 (equivalent to --ratio=2)",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        default=None,
        help="Store only unique images in the spritesheet, and map them to multiple names",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="Include images in sub-directories",
    )
    parser.add_argument(
        "-s",
        "--spacing",
        type=_non_negative_int,
        help="Add pixel spacing between sprites",
    )
    parser.add_argument(
        "-m",
        "--minify-index-file",
        action="store_true",
        default=None,
        help="Remove whitespace from the JSON index file",
    )
    parser.add_argument(
        "--sdf",
        action="store_true",
        default=None,
        help="Output a spritesheet using a signed distance field for each sprite",
    )
    parser.add_argument("--config", type=Path, help="Optional JSON config path")
    parser.add_argument("--workers", type=_positive_int, help="Number of rasterizer threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _fail(code: int, message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return code


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input.is_dir():
        parser.error(f"{args.input} must be an existing directory")

    try:
        config = load_config(
            args.config,
            pixel_ratio=args.ratio,
            retina=args.retina,
            spacing=args.spacing,
            unique=args.unique,
            recursive=args.recursive,
            sdf=args.sdf,
            minify_index_file=args.minify_index_file,
            workers=args.workers,
        )
    except (OSError, ValueError) as exc:
        parser.error(f"invalid configuration: {exc}")

    try:
        paths = get_svg_input_paths(args.input, recursive=config.recursive)
    except OSError as exc:
        return _fail(EX_IOERR, f"cannot read {args.input}: {exc}")
    if not paths:
        return _fail(EX_DATAERR, f"no SVG images found in {args.input}")

    context = create_raster_context()
    try:
        sprites = load_sprites(
            paths,
            args.input,
            config.pixel_ratio,
            context,
            sdf=config.sdf,
            workers=config.workers,
        )
        spritesheet = build_spritesheet(sprites, config)
        png = spritesheet.encode_png()
        index_json = spritesheet.index_json(minify=config.minify_index_file)
    except (SvgLoadError, SpriteNameError, EmptySpritesheet) as exc:
        return _fail(EX_DATAERR, str(exc))
    except (PackingExhausted, RasterAllocationFailed) as exc:
        return _fail(EX_SOFTWARE, str(exc))
    except EncodingFailure as exc:
        return _fail(EX_IOERR, str(exc))

    png_path = Path(f"{args.output}.png")
    json_path = Path(f"{args.output}.json")
    try:
        png_path.write_bytes(png)
        json_path.write_text(index_json, encoding="utf-8")
    except OSError as exc:
        return _fail(EX_IOERR, f"cannot write output: {exc}")

    print(f"Sprites: {len(spritesheet.index)} ({len(sprites)} files)")
    print(f"Spritesheet: {png_path} ({spritesheet.width}x{spritesheet.height})")
    print(f"Index: {json_path}")
    return EX_OK


if __name__ == "__main__":
    raise SystemExit(main())
