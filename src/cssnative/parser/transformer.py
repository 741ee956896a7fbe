"""Lark Transformer that converts a CSS parse tree into a Stylesheet model."""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssnative.errors import CssParseError
from cssnative.model.stylesheet import (
    AtRule,
    Declaration,
    MediaRule,
    StyleRule,
    Stylesheet,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def strip_comments(source: str) -> str:
    """Remove ``/* ... */`` comments, keeping their newlines so line numbers hold."""
    return _COMMENT_RE.sub(lambda m: "\n" * m.group(0).count("\n"), source)


def split_selectors(prelude: str) -> tuple[str, ...]:
    """Split a selector list on top-level commas.

    Commas inside parentheses or brackets (``:is(.a, .b)``) do not split.
    Whitespace runs collapse to a single space.
    """
    selectors: list[str] = []
    depth = 0
    current: list[str] = []
    for char in prelude:
        if char in "([":
            depth += 1
        elif char in ")]" and depth > 0:
            depth -= 1
        if char == "," and depth == 0:
            selectors.append("".join(current))
            current = []
        else:
            current.append(char)
    selectors.append("".join(current))
    cleaned = (_WHITESPACE_RE.sub(" ", s).strip() for s in selectors)
    return tuple(s for s in cleaned if s)


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into stylesheet dataclasses."""

    def declaration(self, items: list[Token]) -> Declaration:
        name = str(items[0]).strip()
        if not name.startswith("--"):
            name = name.lower()
        return Declaration(property=name, value=str(items[1]).strip())

    def style_rule(self, items: list[object]) -> StyleRule:
        selectors = split_selectors(str(items[0]))
        declarations = tuple(d for d in items[1:] if isinstance(d, Declaration))
        return StyleRule(selectors=selectors, declarations=declarations)

    def media_rule(self, items: list[object]) -> MediaRule:
        # Items are: MEDIA_KEYWORD, AT_PRELUDE, nested rules...
        media = _WHITESPACE_RE.sub(" ", str(items[1])).strip()
        rules = tuple(r for r in items[2:] if isinstance(r, (StyleRule, MediaRule, AtRule)))
        return MediaRule(media=media, rules=rules)

    def at_rule(self, items: list[object]) -> AtRule:
        name = str(items[0])[1:].lower()
        prelude = ""
        for item in items[1:]:
            if isinstance(item, Token) and item.type == "AT_PRELUDE":
                prelude = _WHITESPACE_RE.sub(" ", str(item)).strip()
        return AtRule(name=name, prelude=prelude)

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(rules=tuple(items))  # type: ignore[arg-type]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet model."""
    try:
        tree = _parser().parse(strip_comments(source))
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise CssParseError(str(e), line=line, column=column) from e
    return CssTransformer().transform(tree)
