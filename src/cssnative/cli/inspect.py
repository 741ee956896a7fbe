"""CLI command: cssnative inspect -- summarize what a CSS file compiles to."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssnative.cli.options import build_options, configure_logging, transform_options
from cssnative.errors import CssNativeError
from cssnative.transforms import transform


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@transform_options
def inspect(
    cssfile: str,
    keyframes: bool,
    media_queries: bool,
    part_selectors: bool,
    ignore_patterns: tuple[str, ...],
    rem_size: float,
    verbose: bool,
) -> None:
    """Compile a CSS file and display a summary of the result.

    Shows selectors, media queries, exports, and everything skipped.
    """
    configure_logging(verbose)
    options = build_options(keyframes, media_queries, part_selectors, ignore_patterns, rem_size)

    try:
        source = Path(cssfile).read_text(encoding="utf-8")
        result = transform(source, options)
    except CssNativeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Selectors: {len(result.classes)}")
    for key, styles in result.classes.items():
        click.echo(f"  {key}  ({len(styles)} propert{'y' if len(styles) == 1 else 'ies'})")
    click.echo()

    click.echo(f"Media queries: {len(result.media_queries)}")
    for media, queries in result.media_queries.items():
        selectors = ", ".join(result.media.get(media, {})) or "-"
        click.echo(f"  {media}  [{len(queries)} alternative(s)]  {selectors}")
    click.echo()

    click.echo(f"Exports: {len(result.exports)}")
    for name, value in result.exports.items():
        click.echo(f"  {name} = {value}")
    click.echo()

    click.echo(f"Viewport units: {'yes' if result.uses_viewport_units else 'no'}")
    click.echo(f"Skipped: {len(result.skipped)}")
    for skipped in result.skipped:
        click.echo(f"  {skipped}")
