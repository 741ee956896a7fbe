"""Stylesheet syntax tree: rules and declarations produced by the CSS parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, both as raw strings."""

    property: str
    value: str


@dataclass(frozen=True)
class StyleRule:
    """A selector list sharing one block of declarations."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class MediaRule:
    """An ``@media`` block: the raw query text and its nested rules.

    Nested at-rules are kept so they can be reported as skipped.
    """

    media: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class AtRule:
    """Any other at-rule (``@import``, ``@font-face``, ...), kept but unused."""

    name: str
    prelude: str = ""


Rule = Union[StyleRule, MediaRule, AtRule]


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)
