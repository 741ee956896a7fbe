"""Compile CSS into plain style objects for native UI renderers."""

from cssnative.config import TransformOptions
from cssnative.errors import (
    CssNativeError,
    CssParseError,
    ExportNameCollisionError,
    MediaQueryError,
    MediaQuerySyntaxError,
    UnparsableDeclarationError,
    UnparsableMediaExpressionError,
    UnsupportedMediaFeatureError,
    UnsupportedMediaTypeError,
)
from cssnative.model.result import Skipped, SkipReason, TransformResult
from cssnative.transforms import transform, transform_to_dict

__version__ = "0.1.0"

__all__ = [
    "CssNativeError",
    "CssParseError",
    "ExportNameCollisionError",
    "MediaQueryError",
    "MediaQuerySyntaxError",
    "Skipped",
    "SkipReason",
    "TransformOptions",
    "TransformResult",
    "UnparsableDeclarationError",
    "UnparsableMediaExpressionError",
    "UnsupportedMediaFeatureError",
    "UnsupportedMediaTypeError",
    "transform",
    "transform_to_dict",
]
