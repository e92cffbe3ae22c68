"""Unified entrypoint for CLI and sprite server usage."""

from __future__ import annotations

import argparse
from pathlib import Path

from sprite_sheet.config import load_config
from sprite_sheet.main import main as cli_main
from sprite_sheet.server import create_app


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spritesheet builder launcher")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Serve a directory of SVGs as a sprite")
    serve_parser.add_argument("sprites_dir", type=Path, help="Directory of SVG icons")
    serve_parser.add_argument("--name", default="sprite", help="Sprite base name in URLs")
    serve_parser.add_argument("--config", type=Path, help="Optional JSON config path")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Server host")
    serve_parser.add_argument("--port", type=int, default=5000, help="Server port")
    serve_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")

    cli_parser = subparsers.add_parser("cli", help="Build a spritesheet once")
    cli_parser.add_argument("cli_args", nargs=argparse.REMAINDER, help="Arguments passed to the CLI")

    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    if args.command == "serve":
        if not args.sprites_dir.is_dir():
            raise SystemExit(f"{args.sprites_dir} must be an existing directory")
        config = load_config(args.config)
        app = create_app(args.sprites_dir, config=config, name=args.name)
        app.run(host=args.host, port=args.port, debug=bool(args.debug))
        return

    if args.command == "cli":
        raise SystemExit(cli_main(args.cli_args))

    raise SystemExit(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
