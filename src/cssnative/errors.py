"""Error hierarchy for the CSS to native style compiler."""

from __future__ import annotations


class CssNativeError(Exception):
    """Base error for all cssnative errors."""


class CssParseError(CssNativeError):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class UnparsableDeclarationError(CssNativeError):
    """A declaration value the target runtime cannot express."""

    def __init__(self, property: str, value: str) -> None:
        self.property = property
        self.value = value
        super().__init__(f'Failed to parse declaration "{property}: {value}"')


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class MediaQueryError(CssNativeError):
    """Base error for media query problems."""


class MediaQuerySyntaxError(MediaQueryError):
    """The raw media string is not a well-formed media query list."""

    def __init__(self, media: str) -> None:
        self.media = media
        super().__init__(f'Invalid CSS media query "{media}"')


class UnsupportedMediaTypeError(MediaQueryError):
    def __init__(self, media_type: str) -> None:
        self.media_type = media_type
        super().__init__(f'Failed to parse media query type "{media_type}"')


class UnsupportedMediaFeatureError(MediaQueryError):
    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f'Failed to parse media query feature "{feature}"')


class UnparsableMediaExpressionError(MediaQueryError):
    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f'Failed to parse media query expression "{expression}"')


# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------


class ExportNameCollisionError(CssNativeError):
    """An ``:export`` name shadows a class selector from the same source."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Failed to parse :export block because a CSS class in the same "
            f'file is already using the name "{name}"'
        )
