"""Options controlling one ``transform`` call."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

# Camel-cased option names accepted by ``TransformOptions.from_mapping``.
_OPTION_ALIASES = {
    "parseKeyframes": "parse_keyframes",
    "parseMediaQueries": "parse_media_queries",
    "parsePartSelectors": "parse_part_selectors",
    "ignoreRule": "ignore_rule",
    "remSize": "rem_size",
}


@dataclass(frozen=True)
class TransformOptions:
    parse_keyframes: bool = False
    parse_media_queries: bool = False
    parse_part_selectors: bool = False
    ignore_rule: Callable[[str], bool] | None = None
    rem_size: float = 16.0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TransformOptions:
        """Build options from a plain mapping, camel- or snake-cased."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def ignores(self, selector: str) -> bool:
        """Return True if the caller's ``ignore_rule`` predicate drops *selector*."""
        return callable(self.ignore_rule) and self.ignore_rule(selector) is True
