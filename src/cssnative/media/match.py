"""Evaluate parsed media queries against a concrete environment.

The environment is a plain mapping of media feature values, e.g.::

    {"type": "screen", "width": 375, "height": 812, "orientation": "portrait"}

Lengths may be numbers (px) or strings with a unit.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from cssnative.model.media import MediaExpression, MediaQuery

__all__ = ["match_media"]

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d*\.)?\d+)\s*(px|em|rem|in|cm|mm|pt|pc)?\s*$", re.I)
_RESOLUTION_RE = re.compile(r"^\s*((?:\d*\.)?\d+)\s*(dpi|dpcm|dppx|x)?\s*$", re.I)
_RATIO_RE = re.compile(r"^\s*((?:\d*\.)?\d+)\s*(?:/\s*((?:\d*\.)?\d+))?\s*$")

_PX_PER_UNIT = {
    "px": 1.0,
    "em": 16.0,
    "rem": 16.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
}
_DPI_PER_UNIT = {"dpi": 1.0, "dpcm": 2.54, "dppx": 96.0, "x": 96.0}

_LENGTH_FEATURES = frozenset({"width", "height", "device-width", "device-height"})
_RATIO_FEATURES = frozenset({"aspect-ratio", "device-aspect-ratio", "device-pixel-ratio"})
_INTEGER_FEATURES = frozenset({"grid", "color", "color-index", "monochrome"})


def _to_px(value: Any) -> float | None:
    if isinstance(value, (int, float)):
        return float(value)
    match = _LENGTH_RE.match(str(value))
    if match is None:
        return None
    unit = (match.group(2) or "px").lower()
    return float(match.group(1)) * _PX_PER_UNIT[unit]


def _to_dpi(value: Any) -> float | None:
    if isinstance(value, (int, float)):
        return float(value)
    match = _RESOLUTION_RE.match(str(value))
    if match is None:
        return None
    unit = (match.group(2) or "dpi").lower()
    return float(match.group(1)) * _DPI_PER_UNIT[unit]


def _to_ratio(value: Any) -> float | None:
    if isinstance(value, (int, float)):
        return float(value)
    match = _RATIO_RE.match(str(value))
    if match is None:
        return None
    denominator = float(match.group(2) or 1)
    if denominator == 0:
        return None
    return float(match.group(1)) / denominator


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value) or default
    except (TypeError, ValueError):
        return default


def _compare(actual: Any, expected: Any, modifier: str | None) -> bool:
    if actual is None or expected is None:
        return False
    if modifier == "min":
        return actual >= expected
    if modifier == "max":
        return actual <= expected
    return actual == expected


def _match_expression(expression: MediaExpression, environment: Mapping[str, Any]) -> bool:
    feature = expression.feature
    actual = environment.get(feature)
    if actual is None or actual == "":
        return False
    if expression.value is None:
        # Boolean context, e.g. ``(color)``.
        return bool(actual)

    if feature in _LENGTH_FEATURES:
        return _compare(_to_px(actual), _to_px(expression.value), expression.modifier)
    if feature == "resolution":
        return _compare(_to_dpi(actual), _to_dpi(expression.value), expression.modifier)
    if feature in _RATIO_FEATURES:
        return _compare(_to_ratio(actual), _to_ratio(expression.value), expression.modifier)
    if feature in _INTEGER_FEATURES:
        return _compare(_to_int(actual, 0), _to_int(expression.value, 1), expression.modifier)
    return str(actual).lower() == expression.value.strip().lower()


def _match_query(query: MediaQuery, environment: Mapping[str, Any]) -> bool:
    type_match = query.type == "all" or environment.get("type", "all") == query.type
    matched = type_match and all(_match_expression(e, environment) for e in query.expressions)
    # ``not`` negates the whole query, type included.
    return matched != query.inverse


def match_media(queries: Iterable[MediaQuery], environment: Mapping[str, Any]) -> bool:
    """Return True if any query in the list matches *environment*."""
    return any(_match_query(q, environment) for q in queries)
