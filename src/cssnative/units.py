"""Unit patterns and the rem to px converter."""

from __future__ import annotations

import re

__all__ = [
    "LENGTH_RE",
    "PERCENT_RE",
    "UNSUPPORTED_UNIT_RE",
    "VIEWPORT_UNIT_RE",
    "is_length",
    "rem_to_px",
]

_NUMBER = r"[+-]?(?:\d*\.)?\d+(?:[eE][+-]?\d+)?"

# Bare zero, or a number followed by px, rem or nothing.
LENGTH_RE = re.compile(rf"^(?:0|{_NUMBER}(?:px|rem)?)$")
VIEWPORT_UNIT_RE = re.compile(r"^([+-]?[0-9.]+)(vh|vw|vmin|vmax)$")
PERCENT_RE = re.compile(rf"^{_NUMBER}%$")
# Recognized by CSS but not expressible by the target runtime.
UNSUPPORTED_UNIT_RE = re.compile(rf"^{_NUMBER}(ch|em|ex|cm|mm|in|pc|pt)$")

_REM_RE = re.compile(r"(?<![\w.])((?:\d*\.)?\d+(?:[eE][+-]?\d+)?)rem\b")


def _format_number(number: float) -> str:
    if number == int(number):
        return str(int(number))
    return repr(number)


def rem_to_px(value: str, rem_size: float = 16.0) -> str:
    """Rewrite every ``<n>rem`` length in *value* as ``<n * rem_size>px``.

    >>> rem_to_px("1.5rem 2rem")
    '24px 32px'
    """
    return _REM_RE.sub(
        lambda m: _format_number(float(m.group(1)) * rem_size) + "px", value
    )


def is_length(value: str | None) -> bool:
    return value is not None and LENGTH_RE.match(value) is not None
