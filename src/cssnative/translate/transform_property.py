"""The ``transform`` property: a list of single-key transform objects.

    transform: translate(10px, 5px) rotate(45deg)
    -> [{"translateX": 10}, {"translateY": 5}, {"rotate": "45deg"}]
"""

from __future__ import annotations

import re
from typing import Any

from cssnative.errors import UnparsableDeclarationError
from cssnative.translate.values import (
    ANGLE_RE,
    NUMBER_RE,
    is_length_token,
    parse_scalar,
    split_commas,
    to_number,
)

_FUNCTION_RE = re.compile(r"\s*([a-zA-Z][a-zA-Z0-9]*)\(([^()]*)\)\s*")

_ANGLE_FUNCTIONS = frozenset({"rotate", "rotateX", "rotateY", "rotateZ", "skewX", "skewY"})
_LENGTH_FUNCTIONS = frozenset({"translateX", "translateY"})
_NUMBER_FUNCTIONS = frozenset({"scaleX", "scaleY", "perspective"})


class _BadTransform(Exception):
    pass


def _angle(token: str) -> str:
    if token == "0":
        return "0deg"
    if not ANGLE_RE.match(token):
        raise _BadTransform(token)
    return token


def _length(token: str) -> Any:
    if not is_length_token(token):
        raise _BadTransform(token)
    return parse_scalar(token)


def _number(token: str) -> int | float:
    if not NUMBER_RE.match(token):
        raise _BadTransform(token)
    return to_number(token)


def _function(name: str, args: list[str]) -> list[dict[str, Any]]:
    if name in _ANGLE_FUNCTIONS and len(args) == 1:
        return [{name: _angle(args[0])}]
    if name in _LENGTH_FUNCTIONS and len(args) == 1:
        return [{name: _length(args[0])}]
    if name in _NUMBER_FUNCTIONS and len(args) == 1:
        return [{name: _number(args[0])}]
    if name == "translate" and len(args) in (1, 2):
        y = args[1] if len(args) == 2 else "0"
        return [{"translateX": _length(args[0])}, {"translateY": _length(y)}]
    if name == "scale" and len(args) == 1:
        return [{"scale": _number(args[0])}]
    if name == "scale" and len(args) == 2:
        return [{"scaleX": _number(args[0])}, {"scaleY": _number(args[1])}]
    if name == "skew" and len(args) in (1, 2):
        y = args[1] if len(args) == 2 else "0"
        return [{"skewX": _angle(args[0])}, {"skewY": _angle(y)}]
    if name == "matrix" and len(args) == 6:
        return [{"matrix": [_number(a) for a in args]}]
    raise _BadTransform(name)


def transform(property: str, value: str) -> dict[str, Any]:
    if value == "none":
        return {"transform": []}

    functions: list[dict[str, Any]] = []
    position = 0
    while position < len(value):
        match = _FUNCTION_RE.match(value, position)
        if match is None:
            raise UnparsableDeclarationError(property, value)
        args = split_commas(match.group(2))
        try:
            functions.extend(_function(match.group(1), args))
        except _BadTransform as exc:
            raise UnparsableDeclarationError(property, value) from exc
        position = match.end()

    if not functions:
        raise UnparsableDeclarationError(property, value)
    return {"transform": functions}
