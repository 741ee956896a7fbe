"""Shorthand properties expanded into the runtime's longhand keys."""

from __future__ import annotations

from typing import Any

from cssnative.errors import UnparsableDeclarationError
from cssnative.translate.values import (
    NUMBER_RE,
    camel_case,
    is_length_token,
    parse_length,
    parse_scalar,
    parse_value,
    split_commas,
    split_tokens,
    to_number,
    unquote,
)

StyleMap = dict[str, Any]

SIDES = ("Top", "Right", "Bottom", "Left")
CORNERS = ("TopLeft", "TopRight", "BottomRight", "BottomLeft")

BORDER_STYLES = frozenset({
    "solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset",
    "hidden", "none",
})
FLEX_DIRECTIONS = frozenset({"row", "row-reverse", "column", "column-reverse"})
FLEX_WRAPS = frozenset({"wrap", "nowrap", "wrap-reverse"})
DECORATION_LINES = frozenset({"none", "underline", "line-through", "overline"})
DECORATION_STYLES = frozenset({"solid", "double", "dotted", "dashed", "wavy"})


def _four_values(property: str, value: str) -> list[str]:
    """Expand 1-4 CSS box values into (top, right, bottom, left) order."""
    tokens = split_tokens(value)
    # Elliptical radii (``10px / 20px``) have no native equivalent.
    if not 1 <= len(tokens) <= 4 or (property == "border-radius" and "/" in value):
        raise UnparsableDeclarationError(property, value)
    top = tokens[0]
    right = tokens[1] if len(tokens) > 1 else top
    bottom = tokens[2] if len(tokens) > 2 else top
    left = tokens[3] if len(tokens) > 3 else right
    return [top, right, bottom, left]


def _box(prefix: str, suffix: str, names: tuple[str, ...], lengths: bool):
    def handler(property: str, value: str) -> StyleMap:
        out: StyleMap = {}
        for name, token in zip(names, _four_values(property, value)):
            key = f"{prefix}{name}{suffix}"
            out[key] = parse_length(property, token, value) if lengths else token
        return out

    return handler


margin = _box("margin", "", SIDES, lengths=True)
padding = _box("padding", "", SIDES, lengths=True)
border_width = _box("border", "Width", SIDES, lengths=True)
border_color = _box("border", "Color", SIDES, lengths=False)
border_radius = _box("border", "Radius", CORNERS, lengths=True)


def border_style(property: str, value: str) -> StyleMap:
    tokens = split_tokens(value)
    if len(tokens) != 1 or tokens[0] not in BORDER_STYLES:
        raise UnparsableDeclarationError(property, value)
    return {"borderStyle": tokens[0]}


def border(property: str, value: str) -> StyleMap:
    """``border: 1px solid red`` in any token order."""
    if value in ("none", "0"):
        return {"borderWidth": 0, "borderColor": "black", "borderStyle": "solid"}
    width = style = color = None
    for token in split_tokens(value):
        if width is None and is_length_token(token):
            width = parse_length(property, token, value)
        elif style is None and token in BORDER_STYLES:
            style = token
        elif color is None:
            color = token
        else:
            raise UnparsableDeclarationError(property, value)
    return {
        "borderWidth": 1 if width is None else width,
        "borderColor": "black" if color is None else color,
        "borderStyle": "solid" if style is None else style,
    }


def flex(property: str, value: str) -> StyleMap:
    if value == "none":
        return {"flexGrow": 0, "flexShrink": 0, "flexBasis": "auto"}
    if value == "auto":
        return {"flexGrow": 1, "flexShrink": 1, "flexBasis": "auto"}

    tokens = split_tokens(value)
    numbers = [t for t in tokens if NUMBER_RE.match(t)]
    rest = [t for t in tokens if not NUMBER_RE.match(t)]
    if len(numbers) == 3 and not rest:
        # ``flex: 1 1 0`` -- the last unitless number is the basis.
        numbers, rest = numbers[:2], numbers[2:]
    if len(tokens) > 3 or len(numbers) > 2 or len(rest) > 1:
        raise UnparsableDeclarationError(property, value)

    grow = to_number(numbers[0]) if numbers else 1
    shrink = to_number(numbers[1]) if len(numbers) > 1 else 1
    basis: Any = parse_length(property, rest[0], value) if rest else 0
    return {"flexGrow": grow, "flexShrink": shrink, "flexBasis": basis}


def flex_flow(property: str, value: str) -> StyleMap:
    direction = wrap = None
    for token in split_tokens(value):
        if direction is None and token in FLEX_DIRECTIONS:
            direction = token
        elif wrap is None and token in FLEX_WRAPS:
            wrap = token
        else:
            raise UnparsableDeclarationError(property, value)
    return {"flexDirection": direction or "row", "flexWrap": wrap or "nowrap"}


def place_content(property: str, value: str) -> StyleMap:
    tokens = split_tokens(value)
    if not 1 <= len(tokens) <= 2:
        raise UnparsableDeclarationError(property, value)
    return {"alignContent": tokens[0], "justifyContent": tokens[-1]}


def text_decoration(property: str, value: str) -> StyleMap:
    lines: list[str] = []
    style = color = None
    for token in split_tokens(value):
        if token in DECORATION_LINES:
            lines.append(token)
        elif style is None and token in DECORATION_STYLES:
            style = token
        elif color is None:
            color = token
        else:
            raise UnparsableDeclarationError(property, value)
    if "none" in lines and len(lines) > 1:
        raise UnparsableDeclarationError(property, value)
    return {
        "textDecorationLine": " ".join(lines) or "none",
        "textDecorationStyle": style or "solid",
        "textDecorationColor": color or "black",
    }


def _shadow(property: str, value: str) -> tuple[dict[str, Any], Any, str]:
    """Parse ``offset-x offset-y [blur] [color]`` into (offset, radius, color)."""
    if value == "none":
        return {"width": 0, "height": 0}, 0, "black"
    if len(split_commas(value)) > 1:
        raise UnparsableDeclarationError(property, value)
    lengths: list[Any] = []
    color = None
    for token in split_tokens(value):
        if is_length_token(token):
            lengths.append(parse_length(property, token, value))
        elif color is None and token != "inset":
            color = token
        else:
            raise UnparsableDeclarationError(property, value)
    if not 2 <= len(lengths) <= 3:
        raise UnparsableDeclarationError(property, value)
    offset = {"width": lengths[0], "height": lengths[1]}
    radius = lengths[2] if len(lengths) > 2 else 0
    return offset, radius, color or "black"


def box_shadow(property: str, value: str) -> StyleMap:
    offset, radius, color = _shadow(property, value)
    return {
        "shadowOffset": offset,
        "shadowRadius": radius,
        "shadowColor": color,
        "shadowOpacity": 1,
    }


def text_shadow(property: str, value: str) -> StyleMap:
    offset, radius, color = _shadow(property, value)
    return {
        "textShadowOffset": offset,
        "textShadowRadius": radius,
        "textShadowColor": color,
    }


def font_family(property: str, value: str) -> StyleMap:
    families = split_commas(value)
    if not families:
        raise UnparsableDeclarationError(property, value)
    return {"fontFamily": unquote(families[0])}


def font_weight(property: str, value: str) -> StyleMap:
    return {"fontWeight": value}


def aspect_ratio(property: str, value: str) -> StyleMap:
    tokens = split_tokens(value.replace("/", " / "))
    if len(tokens) == 1:
        return {"aspectRatio": parse_scalar(tokens[0])}
    if len(tokens) == 3 and tokens[1] == "/" and all(NUMBER_RE.match(t) for t in tokens[::2]):
        denominator = float(tokens[2])
        if denominator == 0:
            raise UnparsableDeclarationError(property, value)
        return {"aspectRatio": float(tokens[0]) / denominator}
    raise UnparsableDeclarationError(property, value)


def background(property: str, value: str) -> StyleMap:
    tokens = split_tokens(value)
    if len(tokens) != 1:
        raise UnparsableDeclarationError(property, value)
    return {"backgroundColor": tokens[0]}


def default(property: str, value: str) -> StyleMap:
    return {camel_case(property): parse_value(property, value)}
