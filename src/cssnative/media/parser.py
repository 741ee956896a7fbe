"""Media query list parser.

Grammar:
    QueryList  = Query ( ',' Query )*
    Query      = [ 'only' | 'not' ] Type ( 'and' Expression )*
               | Expression ( 'and' Expression )*
    Expression = '(' Feature [ ':' Value ] ')'
    Feature    = [ 'min-' | 'max-' ] Name

A query without a type applies to ``all`` media.
"""

from __future__ import annotations

import re

from cssnative.errors import MediaQuerySyntaxError
from cssnative.model.media import MediaExpression, MediaQuery

__all__ = ["parse_media_query"]

_QUERY_RE = re.compile(
    r"""
    ^(?:
        (?:(?P<qualifier>only|not)\s+)?(?P<type>[_a-z][_a-z0-9-]*)   # media type
      | (?P<first>\([^)]+\))                                    # or a leading expression
    )
    (?:\s*and\s*(?P<rest>.*))?$
    """,
    re.IGNORECASE | re.VERBOSE | re.DOTALL,
)

_EXPRESSION_RE = re.compile(
    r"^\(\s*(?P<feature>[_a-z-][_a-z0-9-]*)\s*(?::\s*(?P<value>[^)]+?))?\s*\)$",
    re.IGNORECASE,
)

_MODIFIERS = ("min-", "max-")

_AND_RE = re.compile(r"\s+and\s+|(?<=\))\s*and\s*(?=\()", re.IGNORECASE)


def _parse_expression(raw: str, media: str) -> MediaExpression:
    match = _EXPRESSION_RE.match(raw.strip())
    if match is None:
        raise MediaQuerySyntaxError(media)
    name = match.group("feature").lower()
    modifier = None
    if name.startswith(_MODIFIERS):
        modifier, name = name[:3], name[4:]
    return MediaExpression(
        feature=name,
        modifier=modifier,
        value=match.group("value"),
    )


def _parse_query(raw: str, media: str) -> MediaQuery:
    match = _QUERY_RE.match(raw.strip())
    if match is None:
        raise MediaQuerySyntaxError(media)

    parts: list[str] = []
    if match.group("first"):
        parts.append(match.group("first"))
    rest = match.group("rest")
    if rest is not None:
        if not rest.strip():
            raise MediaQuerySyntaxError(media)
        parts.extend(_AND_RE.split(rest.strip()))

    expressions = tuple(_parse_expression(p, media) for p in parts)
    return MediaQuery(
        type=(match.group("type") or "all").lower(),
        expressions=expressions,
        inverse=(match.group("qualifier") or "").lower() == "not",
    )


def parse_media_query(media: str) -> list[MediaQuery]:
    """Parse a raw media query list (the text after ``@media``).

    Raises MediaQuerySyntaxError when any alternative is malformed.
    """
    if not media.strip():
        raise MediaQuerySyntaxError(media)
    return [_parse_query(alternative, media) for alternative in media.split(",")]
