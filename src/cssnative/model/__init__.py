from cssnative.model.media import MediaExpression, MediaQuery
from cssnative.model.result import Skipped, SkipReason, StyleMap, TransformResult
from cssnative.model.stylesheet import (
    AtRule,
    Declaration,
    MediaRule,
    Rule,
    StyleRule,
    Stylesheet,
)

__all__ = [
    "AtRule",
    "Declaration",
    "MediaExpression",
    "MediaQuery",
    "MediaRule",
    "Rule",
    "Skipped",
    "SkipReason",
    "StyleMap",
    "StyleRule",
    "Stylesheet",
    "TransformResult",
]
