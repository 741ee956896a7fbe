from cssnative.errors import CssParseError
from cssnative.parser.transformer import parse_css, split_selectors, strip_comments

__all__ = ["CssParseError", "parse_css", "split_selectors", "strip_comments"]
