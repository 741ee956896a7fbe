"""Selector classification.

The target runtime has no cascade, so only selectors that name exactly one
style object are accepted:

    .name               class
    :root               root variables
    .name::part(x)      part selectors, when enabled (also bare ``::part(x)``)
    :export             value export block

Anything combining selectors (descendant, child, sibling), matching
attributes, or using other pseudo-classes is rejected rather than
approximated.
"""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["SelectorKind", "classify_selector", "selector_key"]

EXPORT_SELECTOR = ":export"
ROOT_SELECTOR = ":root"

_PART_RE = re.compile(r"^(?:\.[^:]+)?::?part\([^)]+\)$")
_FORBIDDEN_CHARS = frozenset("[~>+ \t\n")


class SelectorKind(Enum):
    EXPORT = "export"
    ROOT = "root"
    CLASS = "class"
    PART = "part"
    REJECTED = "rejected"

    @property
    def accepted(self) -> bool:
        return self in (SelectorKind.ROOT, SelectorKind.CLASS, SelectorKind.PART)


def classify_selector(selector: str, *, part_selectors: bool = False) -> SelectorKind:
    """Decide what to do with *selector* from its syntax alone."""
    if selector == EXPORT_SELECTOR:
        return SelectorKind.EXPORT
    if selector == ROOT_SELECTOR:
        return SelectorKind.ROOT
    if any(char in _FORBIDDEN_CHARS for char in selector):
        return SelectorKind.REJECTED
    if part_selectors and _PART_RE.match(selector):
        return SelectorKind.PART
    if not selector.startswith(".") or len(selector) == 1:
        return SelectorKind.REJECTED
    if ":" in selector:
        return SelectorKind.REJECTED
    return SelectorKind.CLASS


def selector_key(selector: str) -> str:
    """Result key for an accepted selector: one leading ``.`` stripped."""
    if selector.startswith("."):
        return selector[1:]
    return selector
