"""Configuration schema and loading utilities."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

RETINA_PIXEL_RATIO = 2


@dataclass(frozen=True)
class SpritesheetConfig:
    """Everything that controls how a spritesheet is built and written."""

    pixel_ratio: int = 1
    spacing: int = 0
    unique: bool = False
    sdf: bool = False
    minify_index_file: bool = False
    recursive: bool = False
    max_growth: float = 10.0
    workers: int = 4

    def __post_init__(self) -> None:
        if self.pixel_ratio < 1:
            raise ValueError("Pixel ratio must be greater than zero.")
        if self.spacing < 0:
            raise ValueError("Spacing must be zero or greater.")
        if self.max_growth < 1.0:
            raise ValueError("Maximum growth must be at least 1.")
        if self.workers < 1:
            raise ValueError("Worker count must be at least 1.")

    def with_overrides(self, **overrides: Any) -> "SpritesheetConfig":
        """Return a copy with the given fields replaced; ``None`` values are ignored."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


_DEFAULTS: Dict[str, Any] = {
    "pixel_ratio": 1,
    "retina": False,
    "spacing": 0,
    "unique": False,
    "sdf": False,
    "minify_index_file": False,
    "recursive": False,
    "max_growth": 10.0,
    "workers": 4,
}


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into base without mutating either input."""

    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None, **overrides: Any) -> SpritesheetConfig:
    """Load configuration from JSON, then apply keyword overrides.

    Overrides set to ``None`` are skipped so unset command-line options fall
    through to the file or the defaults. ``retina`` is shorthand for a pixel
    ratio of 2. A ``pixel_ratio`` override wins over ``retina`` from the file;
    setting both in the same place is an error.
    """

    unknown_overrides = sorted(set(overrides) - set(_DEFAULTS))
    if unknown_overrides:
        raise TypeError(f"Unknown config overrides: {', '.join(unknown_overrides)}")

    merged = dict(_DEFAULTS)
    if path:
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object.")
        unknown = sorted(set(raw) - set(_DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        if "retina" in raw and "pixel_ratio" in raw:
            raise ValueError(f"Config file {path} sets both retina and pixel_ratio.")
        merged = _merge_dict(merged, raw)

    active = {key: value for key, value in overrides.items() if value is not None}
    if "retina" in active and "pixel_ratio" in active:
        raise ValueError("Set either retina or pixel_ratio, not both.")
    if "pixel_ratio" in active:
        merged["retina"] = False
    merged = _merge_dict(merged, active)

    pixel_ratio = RETINA_PIXEL_RATIO if merged["retina"] else int(merged["pixel_ratio"])
    return SpritesheetConfig(
        pixel_ratio=pixel_ratio,
        spacing=int(merged["spacing"]),
        unique=bool(merged["unique"]),
        sdf=bool(merged["sdf"]),
        minify_index_file=bool(merged["minify_index_file"]),
        recursive=bool(merged["recursive"]),
        max_growth=float(merged["max_growth"]),
        workers=int(merged["workers"]),
    )
