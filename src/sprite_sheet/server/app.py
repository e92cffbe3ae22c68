"""Flask app serving a directory of SVGs as a MapLibre sprite.

Map clients request ``<name>.json`` and ``<name>.png`` for the standard pixel
ratio and ``<name>@2x.json`` / ``<name>@2x.png`` for high-DPI screens. Each
ratio is built on first request and cached.
"""

from __future__ import annotations

import io
import re
import threading
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Tuple

from flask import Flask, jsonify, send_file

from sprite_sheet.builder import Spritesheet, build_spritesheet
from sprite_sheet.config import SpritesheetConfig
from sprite_sheet.data import Sprite
from sprite_sheet.errors import SpriteSheetError
from sprite_sheet.io import get_svg_input_paths

_SPRITE_PATH = re.compile(r"^(?P<name>[^/@]+?)(?:@(?P<ratio>[1-9][0-9]*)x)?\.(?P<ext>json|png)$")

SpriteLoader = Callable[[int], Mapping[str, Sprite]]


def parse_sprite_path(path: str) -> Optional[Tuple[str, int, str]]:
    """Split ``sprite@2x.png`` into ``("sprite", 2, "png")``."""

    match = _SPRITE_PATH.match(path)
    if match is None:
        return None
    ratio = int(match.group("ratio") or 1)
    return match.group("name"), ratio, match.group("ext")


def directory_loader(sprites_dir: Path, config: SpritesheetConfig) -> SpriteLoader:
    """Load sprites from ``sprites_dir`` at a requested pixel ratio.

    The rasterizer is imported here so apps built around a custom loader do
    not need the cairo libraries.
    """

    from sprite_sheet.io.svg import create_raster_context, load_sprites

    context = create_raster_context()

    def _load(pixel_ratio: int) -> Mapping[str, Sprite]:
        paths = get_svg_input_paths(sprites_dir, recursive=config.recursive)
        return load_sprites(
            paths,
            sprites_dir,
            pixel_ratio,
            context,
            sdf=config.sdf,
            workers=config.workers,
        )

    return _load


class SpritesheetCache:
    """Thread-safe cache of spritesheets and their encoded PNGs, keyed by pixel ratio."""

    def __init__(self, loader: SpriteLoader, config: SpritesheetConfig, max_ratio: int = 4) -> None:
        self.loader = loader
        self.config = config
        self.max_ratio = max_ratio
        self.lock = threading.Lock()
        self._sheets: Dict[int, Tuple[Spritesheet, bytes]] = {}

    def get(self, pixel_ratio: int) -> Tuple[Spritesheet, bytes]:
        if pixel_ratio < 1 or pixel_ratio > self.max_ratio:
            raise ValueError(f"Unsupported pixel ratio {pixel_ratio}")
        with self.lock:
            cached = self._sheets.get(pixel_ratio)
            if cached is None:
                sprites = self.loader(pixel_ratio)
                sheet = build_spritesheet(sprites, self.config.with_overrides(pixel_ratio=pixel_ratio))
                cached = (sheet, sheet.encode_png())
                self._sheets[pixel_ratio] = cached
            return cached

    def clear(self) -> None:
        with self.lock:
            self._sheets.clear()


def create_app(
    sprites_dir: Optional[Path] = None,
    config: Optional[SpritesheetConfig] = None,
    name: str = "sprite",
    loader: Optional[SpriteLoader] = None,
) -> Flask:
    config = config or SpritesheetConfig()
    if loader is None:
        if sprites_dir is None:
            raise ValueError("Either sprites_dir or loader must be provided.")
        loader = directory_loader(Path(sprites_dir), config)
    cache = SpritesheetCache(loader, config)

    app = Flask(__name__)
    app.config["SPRITESHEET_CACHE"] = cache

    @app.errorhandler(SpriteSheetError)
    def build_failed(exc: SpriteSheetError):
        return jsonify({"error": str(exc)}), 500

    @app.route("/<sprite_file>")
    def sprite(sprite_file: str):
        parsed = parse_sprite_path(sprite_file)
        if parsed is None or parsed[0] != name:
            return jsonify({"error": "Not found"}), 404
        _, ratio, ext = parsed
        if ratio > cache.max_ratio:
            return jsonify({"error": f"Unsupported pixel ratio {ratio}"}), 404
        sheet, png = cache.get(ratio)
        if ext == "json":
            return app.response_class(
                sheet.index_json(minify=config.minify_index_file),
                mimetype="application/json",
            )
        return send_file(io.BytesIO(png), mimetype="image/png")

    @app.route("/reload", methods=["POST"])
    def reload():
        cache.clear()
        return jsonify({"status": "cleared"})

    return app
