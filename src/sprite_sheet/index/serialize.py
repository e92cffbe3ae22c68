"""Index file output matching the Mapbox Style Specification sprite index.

See https://docs.mapbox.com/mapbox-gl-js/style-spec/sprite/#index-file.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from sprite_sheet.data import PlacedSprite, Sprite, SpriteDescription
from sprite_sheet.geometry import BoundingBox, Rect

Number = Union[int, float]


def icon_number(value: float) -> Number:
    """Whole numbers become ints, anything else is rounded to 3 decimal places.

    This keeps the JavaScript style of mixing integers and floats, and avoids a
    trailing ``.0`` on the common integer case.
    """

    if float(value).is_integer():
        return int(value)
    scaled = value * 1e3
    # Round half away from zero.
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / 1e3


def describe(rect: Rect, sprite: Sprite, sdf: bool = False) -> SpriteDescription:
    return SpriteDescription(
        height=rect.height,
        width=rect.width,
        pixel_ratio=sprite.pixel_ratio,
        x=rect.x,
        y=rect.y,
        content=sprite.content_area,
        stretch_x=sprite.stretch_x_areas,
        stretch_y=sprite.stretch_y_areas,
        sdf=sdf or sprite.sdf,
    )


def build_index(
    placements: Iterable[PlacedSprite],
    sprites: Mapping[str, Sprite],
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
    sdf: bool = False,
) -> Dict[str, SpriteDescription]:
    """Describe every placed sprite and every alias that points at it.

    Aliases share the canonical sprite's description. Keys are sorted.
    """

    aliases = aliases or {}
    index: Dict[str, SpriteDescription] = {}
    for placed in placements:
        description = describe(placed.rect, sprites[placed.name], sdf)
        index[placed.name] = description
        for alias in aliases.get(placed.name, ()):
            index[alias] = description
    return {name: index[name] for name in sorted(index)}


def _content_list(box: BoundingBox) -> List[Number]:
    return [icon_number(box.left), icon_number(box.top), icon_number(box.right), icon_number(box.bottom)]


def description_to_dict(description: SpriteDescription) -> Dict[str, Any]:
    """JSON-ready mapping with camelCase keys; empty optional fields are left out."""

    payload: Dict[str, Any] = {
        "height": description.height,
        "pixelRatio": description.pixel_ratio,
        "width": description.width,
        "x": description.x,
        "y": description.y,
    }
    if description.content is not None:
        payload["content"] = _content_list(description.content)
    if description.stretch_x:
        payload["stretchX"] = [
            [icon_number(box.left), icon_number(box.right)] for box in description.stretch_x
        ]
    if description.stretch_y:
        payload["stretchY"] = [
            [icon_number(box.top), icon_number(box.bottom)] for box in description.stretch_y
        ]
    if description.sdf:
        payload["sdf"] = True
    return payload


def index_to_json(index: Mapping[str, SpriteDescription], minify: bool = False) -> str:
    """Serialize an index. Minified output only drops whitespace."""

    payload = {name: description_to_dict(index[name]) for name in sorted(index)}
    if minify:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=2)
