"""Media query types and features the native runtime can evaluate."""

from __future__ import annotations

MEDIA_QUERY_TYPES = frozenset({
    "all",
    "braille",
    "embossed",
    "handheld",
    "print",
    "projection",
    "screen",
    "speech",
    "tty",
    "tv",
    # Platform types understood by native renderers.
    "android",
    "dom",
    "ios",
    "macos",
    "web",
    "windows",
})

MEDIA_QUERY_FEATURES = frozenset({
    "aspect-ratio",
    "device-aspect-ratio",
    "device-height",
    "device-width",
    "direction",
    "height",
    "orientation",
    "platform",
    "prefers-color-scheme",
    "width",
})

# Features whose value must be a length.
DIMENSION_FEATURES = frozenset({
    "device-height",
    "device-width",
    "height",
    "width",
})
