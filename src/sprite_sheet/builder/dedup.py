"""Collapse byte-identical sprites into one image with several names."""

from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

from sprite_sheet.data import Sprite


def make_unique(sprites: Mapping[str, Sprite]) -> Tuple[Dict[str, Sprite], Dict[str, List[str]]]:
    """Keep the first sprite for each distinct bitmap.

    Returns the canonical sprites and a mapping from each canonical name to
    the names that share its pixels, in the order they were seen. Iteration
    order of ``sprites`` decides which name is canonical.
    """

    unique: Dict[str, Sprite] = {}
    aliases: Dict[str, List[str]] = {}
    names_by_fingerprint: Dict[str, str] = {}
    for name, sprite in sprites.items():
        fingerprint = sprite.fingerprint()
        canonical = names_by_fingerprint.get(fingerprint)
        if canonical is None:
            names_by_fingerprint[fingerprint] = name
            unique[name] = sprite
        else:
            aliases.setdefault(canonical, []).append(name)
    return unique, aliases
