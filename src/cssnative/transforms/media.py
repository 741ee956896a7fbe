"""Media block transform: validate an ``@media`` rule and translate its rules."""

from __future__ import annotations

import logging

from cssnative.config import TransformOptions
from cssnative.errors import (
    UnparsableMediaExpressionError,
    UnsupportedMediaFeatureError,
    UnsupportedMediaTypeError,
)
from cssnative.media.features import (
    DIMENSION_FEATURES,
    MEDIA_QUERY_FEATURES,
    MEDIA_QUERY_TYPES,
)
from cssnative.media.parser import parse_media_query
from cssnative.model.media import MediaQuery
from cssnative.model.result import SkipReason, TransformResult
from cssnative.model.stylesheet import AtRule, MediaRule
from cssnative.selectors import SelectorKind, classify_selector, selector_key
from cssnative.transforms.declarations import transform_declarations
from cssnative.units import is_length

__all__ = ["media_key", "transform_media_rule", "validate_media_queries"]

logger = logging.getLogger(__name__)


def media_key(media: str) -> str:
    return "@media " + media


def validate_media_queries(queries: list[MediaQuery]) -> None:
    """Raise if any query uses a type, feature, or value the runtime lacks."""
    for query in queries:
        if query.type not in MEDIA_QUERY_TYPES:
            raise UnsupportedMediaTypeError(query.type)
        for expression in query.expressions:
            if expression.feature not in MEDIA_QUERY_FEATURES:
                raise UnsupportedMediaFeatureError(expression.name)
            if expression.feature in DIMENSION_FEATURES and not is_length(expression.value):
                raise UnparsableMediaExpressionError(str(expression))


def transform_media_rule(
    rule: MediaRule,
    result: TransformResult,
    keyframes: dict[str, str] | None,
    options: TransformOptions,
) -> None:
    """Record *rule*'s parsed query and translate its nested style rules.

    The query is recorded even when the block contributes no styles. Nested
    at-rules, including nested ``@media`` blocks, are recorded as skipped.
    """
    queries = parse_media_query(rule.media)
    validate_media_queries(queries)

    media = media_key(rule.media)
    result.media_queries[media] = queries
    logger.debug("Recorded %s (%d alternative(s))", media, len(queries))

    for nested in rule.rules:
        if isinstance(nested, MediaRule):
            result.skip(media_key(nested.media), SkipReason.UNSUPPORTED_RULE, media)
            continue
        if isinstance(nested, AtRule):
            result.skip(f"@{nested.name}", SkipReason.UNSUPPORTED_RULE, media)
            continue
        for selector in nested.selectors:
            kind = classify_selector(selector, part_selectors=options.parse_part_selectors)
            if kind is SelectorKind.EXPORT:
                result.skip(selector, SkipReason.EXPORT_IN_MEDIA, media)
                continue
            if not kind.accepted:
                logger.debug("Skipping unsupported selector %r in %s", selector, media)
                result.skip(selector, SkipReason.UNSUPPORTED_SELECTOR, media)
                continue
            if options.ignores(selector):
                result.skip(selector, SkipReason.IGNORED_BY_PREDICATE, media)
                continue

            styles = result.media_styles(media, selector_key(selector))
            transform_declarations(
                styles, nested.declarations, result, keyframes, rem_size=options.rem_size
            )
