"""Find SVG inputs and derive sprite names from their paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

from sprite_sheet.errors import SpriteNameError

SVG_EXTENSIONS = (".svg", ".svgz")

PathLike = Union[str, Path]


def is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def is_svg_file(path: Path) -> bool:
    return path.is_file() and path.suffix in SVG_EXTENSIONS


def get_svg_input_paths(path: PathLike, recursive: bool = False) -> List[Path]:
    """Return every visible ``.svg``/``.svgz`` file in ``path``, sorted.

    Extensions are matched case-sensitively and hidden files are skipped.
    Symlinks are followed. When ``recursive`` is true every sub-directory is
    searched, hidden ones included.
    """

    results: List[Path] = []
    for entry in sorted(Path(path).iterdir()):
        if recursive and entry.is_dir():
            results.extend(get_svg_input_paths(entry, recursive=True))
        elif not is_hidden(entry) and is_svg_file(entry):
            results.append(entry)
    return sorted(results)


def sprite_name(path: PathLike, base_path: PathLike) -> str:
    """Name of a sprite: its path relative to ``base_path`` without the extension.

    Nested files keep their directories, joined with ``/``, so
    ``icons/transport/bus.svg`` under ``icons`` is named ``transport/bus``.
    """

    path = Path(path)
    if not path.name:
        raise SpriteNameError(f"Cannot name a sprite from the empty path {str(path)!r}.")
    abs_path = Path(os.path.abspath(path))
    abs_base = Path(os.path.abspath(base_path))
    try:
        relative = abs_path.relative_to(abs_base)
    except ValueError as exc:
        raise SpriteNameError(f"{path} is not inside {base_path}.") from exc
    if not relative.parts:
        raise SpriteNameError(f"{path} is the base directory, not a file in it.")
    return relative.with_suffix("").as_posix()
