"""Parsing flags shared by the compile and inspect commands."""

from __future__ import annotations

import fnmatch
import logging
from typing import Any, Callable

import click

from cssnative.config import TransformOptions


def transform_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate *command* with the flags that build a TransformOptions."""
    decorators = [
        click.option("--keyframes", is_flag=True, help="Bind @keyframes to animations"),
        click.option("--media-queries", is_flag=True, help="Translate @media blocks"),
        click.option("--part-selectors", is_flag=True, help="Accept ::part() selectors"),
        click.option(
            "--ignore",
            "ignore_patterns",
            multiple=True,
            metavar="PATTERN",
            help="Skip selectors matching this glob pattern (repeatable)",
        ),
        click.option("--rem-size", default=16.0, show_default=True, help="Pixels per rem"),
        click.option("-v", "--verbose", is_flag=True, help="Log pipeline details to stderr"),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def build_options(
    keyframes: bool,
    media_queries: bool,
    part_selectors: bool,
    ignore_patterns: tuple[str, ...],
    rem_size: float,
) -> TransformOptions:
    ignore_rule = None
    if ignore_patterns:
        patterns = tuple(ignore_patterns)

        def ignore_rule(selector: str) -> bool:
            return any(fnmatch.fnmatchcase(selector, p) for p in patterns)

    return TransformOptions(
        parse_keyframes=keyframes,
        parse_media_queries=media_queries,
        parse_part_selectors=part_selectors,
        ignore_rule=ignore_rule,
        rem_size=rem_size,
    )


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
