"""Pre-parse extraction of ``@keyframes`` blocks from raw CSS text.

Keyframe bodies nest braces (``0% { ... }``), so each block is found by
counting brace depth from its opening brace rather than with a single
pattern. Extracted blocks are removed from the text handed to the parser.
"""

from __future__ import annotations

import logging
import re

__all__ = ["extract_keyframes"]

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"@keyframes\s+([^\s{]+)\s*\{")


def _matching_brace(css: str, start: int) -> int | None:
    """Return the index just past the brace closing the block opened before *start*."""
    depth = 1
    index = start
    while index < len(css):
        char = css[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    return None


def extract_keyframes(css: str) -> tuple[str, dict[str, str]]:
    """Split *css* into (text without keyframes, name -> keyframe body).

    The body is the block interior with surrounding whitespace stripped. A
    repeated name replaces the earlier body. An unterminated block stops the
    scan and is left in the text for the parser to report.
    """
    keyframes: dict[str, str] = {}
    pieces: list[str] = []
    index = 0
    while True:
        match = _HEADER_RE.search(css, index)
        if match is None:
            break
        end = _matching_brace(css, match.end())
        if end is None:
            break
        name = match.group(1)
        keyframes[name] = css[match.end() : end - 1].strip()
        pieces.append(css[index : match.start()])
        index = end
        logger.debug("Extracted @keyframes %s", name)
    pieces.append(css[index:])
    return "".join(pieces), keyframes
