"""Typed transform result and its wire-format rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from cssnative.model.media import MediaQuery

StyleMap = dict[str, Any]

EXPORT_PROPS_KEY = "__exportProps"
MEDIA_QUERIES_KEY = "__mediaQueries"
VIEWPORT_UNITS_KEY = "__viewportUnits"


class SkipReason(Enum):
    """Why a selector or rule produced no output."""

    UNSUPPORTED_SELECTOR = "unsupported selector"
    IGNORED_BY_PREDICATE = "ignored by ignore_rule"
    EXPORT_IN_MEDIA = ":export inside @media"
    UNSUPPORTED_RULE = "unsupported rule"
    MEDIA_DISABLED = "media query parsing disabled"


@dataclass(frozen=True)
class Skipped:
    """A selector (or at-rule) dropped without an error."""

    selector: str
    reason: SkipReason
    media: str | None = None

    def __str__(self) -> str:
        where = f" [{self.media}]" if self.media else ""
        return f"{self.selector}{where}: {self.reason.value}"


@dataclass
class TransformResult:
    """Everything one ``transform`` call produced.

    Attributes:
        classes: Top-level styles keyed by selector key (``foo``, ``:root``).
        media: Styles per ``"@media <query>"`` key, then per selector key.
        media_queries: Parsed structure of every accepted media rule.
        exports: Values collected from ``:export`` blocks.
        uses_viewport_units: True once any value used vh/vw/vmin/vmax.
        skipped: Selectors and rules dropped silently, in processing order.
    """

    classes: dict[str, StyleMap] = field(default_factory=dict)
    media: dict[str, dict[str, StyleMap]] = field(default_factory=dict)
    media_queries: dict[str, list[MediaQuery]] = field(default_factory=dict)
    exports: dict[str, str] = field(default_factory=dict)
    uses_viewport_units: bool = False
    skipped: list[Skipped] = field(default_factory=list)

    def styles(self, key: str) -> StyleMap:
        """Return the top-level StyleMap for *key*, creating it if needed."""
        return self.classes.setdefault(key, {})

    def media_styles(self, media: str, key: str) -> StyleMap:
        """Return the StyleMap for *key* inside *media*, creating it if needed."""
        return self.media.setdefault(media, {}).setdefault(key, {})

    def skip(self, selector: str, reason: SkipReason, media: str | None = None) -> None:
        self.skipped.append(Skipped(selector=selector, reason=reason, media=media))

    def to_dict(self) -> dict[str, Any]:
        """Render the single nested mapping consumed by native renderers.

        Exports are copied onto the top level last, so they replace any
        unrelated top-level entry with the same name.
        """
        out: dict[str, Any] = {}
        for key, styles in self.classes.items():
            out[key] = dict(styles)
        for media, blocks in self.media.items():
            out[media] = {key: dict(styles) for key, styles in blocks.items()}
        if self.media_queries:
            out[MEDIA_QUERIES_KEY] = {
                media: [q.to_dict() for q in queries]
                for media, queries in self.media_queries.items()
            }
        if self.uses_viewport_units:
            out[VIEWPORT_UNITS_KEY] = True
        out.update(self.exports)
        return out

    def styles_for(
        self, key: str, environment: Mapping[str, Any] | None = None
    ) -> StyleMap:
        """Merge *key*'s styles with every media block matching *environment*.

        Media blocks are applied in the order they were recorded; without an
        environment only the top-level styles are returned.
        """
        from cssnative.media.match import match_media

        merged: StyleMap = dict(self.classes.get(key, {}))
        if environment is None:
            return merged
        for media, blocks in self.media.items():
            if key not in blocks:
                continue
            queries = self.media_queries.get(media, [])
            if match_media(queries, environment):
                merged.update(blocks[key])
        return merged
