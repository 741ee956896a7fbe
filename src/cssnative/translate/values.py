"""Value tokenizing and scalar conversion shared by property handlers."""

from __future__ import annotations

import re
from typing import Union

from cssnative.errors import UnparsableDeclarationError
from cssnative.units import PERCENT_RE, UNSUPPORTED_UNIT_RE, VIEWPORT_UNIT_RE

Scalar = Union[int, float, str]

_NUMBER = r"[+-]?(?:\d*\.)?\d+(?:[eE][+-]?\d+)?"
NUMBER_RE = re.compile(rf"^{_NUMBER}$")
PX_RE = re.compile(rf"^({_NUMBER})px$")
DIMENSION_RE = re.compile(rf"^{_NUMBER}[a-zA-Z]+$")
ANGLE_RE = re.compile(rf"^{_NUMBER}(?:deg|rad|grad|turn)$")
TIME_RE = re.compile(rf"^{_NUMBER}(?:ms|s)$")

# Properties whose values are lengths, and therefore unit-checked.
LENGTH_PROPERTIES = frozenset({
    "width", "height", "min-width", "max-width", "min-height", "max-height",
    "top", "right", "bottom", "left", "start", "end", "inset",
    "margin-top", "margin-right", "margin-bottom", "margin-left",
    "margin-horizontal", "margin-vertical",
    "padding-top", "padding-right", "padding-bottom", "padding-left",
    "padding-horizontal", "padding-vertical",
    "border-top-width", "border-right-width", "border-bottom-width",
    "border-left-width",
    "border-top-left-radius", "border-top-right-radius",
    "border-bottom-right-radius", "border-bottom-left-radius",
    "font-size", "line-height", "letter-spacing", "flex-basis",
    "gap", "row-gap", "column-gap",
})

LENGTH_KEYWORDS = frozenset({"auto", "none", "normal", "inherit", "initial", "unset"})


def camel_case(name: str) -> str:
    """``border-top-width`` -> ``borderTopWidth``; ``-webkit-x`` -> ``WebkitX``.

    Custom properties (``--name``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    vendor = name.startswith("-")
    parts = [p for p in name.split("-") if p]
    if not parts:
        return name
    head = parts[0].capitalize() if vendor else parts[0]
    return head + "".join(p.capitalize() for p in parts[1:])


def to_number(text: str) -> int | float:
    number = float(text)
    if number.is_integer() and abs(number) < 1e15:
        return int(number)
    return number


def split_tokens(value: str, separator: str | None = None) -> list[str]:
    """Split *value* on whitespace (or *separator*) outside parentheses and quotes."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    quote = ""
    for char in value:
        if quote:
            current.append(char)
            if char == quote:
                quote = ""
            continue
        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1
        is_break = char.isspace() if separator is None else char == separator
        if is_break and depth == 0:
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return [t.strip() for t in tokens if t.strip()]


def split_commas(value: str) -> list[str]:
    return split_tokens(value, ",")


def is_length_token(token: str) -> bool:
    return (
        token == "0"
        or PX_RE.match(token) is not None
        or NUMBER_RE.match(token) is not None
        or PERCENT_RE.match(token) is not None
        or VIEWPORT_UNIT_RE.match(token) is not None
    )


def parse_scalar(token: str) -> Scalar:
    """Numbers and px lengths become numbers; anything else stays a string."""
    match = PX_RE.match(token)
    if match:
        return to_number(match.group(1))
    if NUMBER_RE.match(token):
        return to_number(token)
    return token


def parse_length(property: str, token: str, value: str | None = None) -> Scalar:
    """Convert a length token, rejecting units the runtime cannot express."""
    if is_length_token(token) or token in LENGTH_KEYWORDS:
        return parse_scalar(token)
    if UNSUPPORTED_UNIT_RE.match(token) or DIMENSION_RE.match(token):
        raise UnparsableDeclarationError(property, value if value is not None else token)
    return token


def parse_value(property: str, value: str) -> Scalar:
    """Default conversion of a whole declaration value."""
    if property.startswith("--"):
        return value
    if property in LENGTH_PROPERTIES:
        return parse_length(property, value)
    return parse_scalar(value)


def unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text
