"""The CSS to native style pipeline.

    source text
      -> keyframe extraction (opt-in)
      -> parse_css
      -> sort_rules
      -> per rule: selector classification, declaration transform,
         media blocks (opt-in), export collection
      -> TransformResult
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from cssnative.config import TransformOptions
from cssnative.keyframes import extract_keyframes
from cssnative.model.result import SkipReason, TransformResult
from cssnative.model.stylesheet import AtRule, MediaRule, StyleRule
from cssnative.ordering import sort_rules
from cssnative.parser import parse_css
from cssnative.selectors import SelectorKind, classify_selector, selector_key
from cssnative.transforms.declarations import transform_declarations
from cssnative.transforms.exports import collect_exports
from cssnative.transforms.media import media_key, transform_media_rule

__all__ = ["transform", "transform_to_dict"]

logger = logging.getLogger(__name__)


def _transform_style_rule(
    rule: StyleRule,
    result: TransformResult,
    keyframes: dict[str, str] | None,
    options: TransformOptions,
) -> None:
    for selector in rule.selectors:
        kind = classify_selector(selector, part_selectors=options.parse_part_selectors)
        if kind is SelectorKind.EXPORT:
            collect_exports(rule.declarations, result)
            continue
        if not kind.accepted:
            logger.debug("Skipping unsupported selector %r", selector)
            result.skip(selector, SkipReason.UNSUPPORTED_SELECTOR)
            continue
        if options.ignores(selector):
            result.skip(selector, SkipReason.IGNORED_BY_PREDICATE)
            continue

        styles = result.styles(selector_key(selector))
        transform_declarations(
            styles, rule.declarations, result, keyframes, rem_size=options.rem_size
        )


def transform(
    source: str,
    options: TransformOptions | Mapping[str, Any] | None = None,
) -> TransformResult:
    """Compile CSS *source* into a TransformResult.

    *options* may be a TransformOptions or a plain mapping of option names.
    Any error aborts the whole call; no partial result is returned.
    """
    if options is None:
        options = TransformOptions()
    elif not isinstance(options, TransformOptions):
        options = TransformOptions.from_mapping(options)

    keyframes: dict[str, str] | None = None
    if options.parse_keyframes:
        source, keyframes = extract_keyframes(source)
        if keyframes:
            logger.debug("Extracted %d keyframe block(s)", len(keyframes))

    stylesheet = parse_css(source)
    result = TransformResult()

    for rule in sort_rules(stylesheet.rules):
        if isinstance(rule, StyleRule):
            _transform_style_rule(rule, result, keyframes, options)
        elif isinstance(rule, MediaRule):
            if options.parse_media_queries:
                transform_media_rule(rule, result, keyframes, options)
            else:
                result.skip(media_key(rule.media), SkipReason.MEDIA_DISABLED)
        elif isinstance(rule, AtRule):
            result.skip(f"@{rule.name}", SkipReason.UNSUPPORTED_RULE)

    return result


def transform_to_dict(
    source: str,
    options: TransformOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Compile CSS *source* straight to the nested wire-format mapping."""
    return transform(source, options).to_dict()
