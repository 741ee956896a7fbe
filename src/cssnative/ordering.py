"""Deterministic rule ordering applied before translation."""

from __future__ import annotations

from cssnative.model.stylesheet import MediaRule, Rule, StyleRule
from cssnative.selectors import EXPORT_SELECTOR

__all__ = ["sort_rules"]

# Group ranks: plain style rules, then media blocks, then :export blocks.
_STYLE, _MEDIA, _EXPORT, _OTHER = 0, 1, 2, 3


def _rule_rank(rule: Rule) -> int:
    if isinstance(rule, StyleRule):
        return _EXPORT if EXPORT_SELECTOR in rule.selectors else _STYLE
    if isinstance(rule, MediaRule):
        return _MEDIA
    return _OTHER


def sort_rules(rules: tuple[Rule, ...] | list[Rule]) -> list[Rule]:
    """Return *rules* in translation order.

    Style rules come first, then media blocks, then ``:export`` blocks, so
    every class name is known before any export name is checked against it.
    ``sorted`` is stable: rules within a group keep their source order, which
    keeps later declarations for the same selector winning.
    """
    return sorted(rules, key=_rule_rank)
