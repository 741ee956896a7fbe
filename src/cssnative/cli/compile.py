"""CLI command: cssnative compile -- translate a CSS file to JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssnative.cli.options import build_options, configure_logging, transform_options
from cssnative.errors import CssNativeError
from cssnative.transforms import transform_to_dict


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@transform_options
@click.option("--indent", default=2, show_default=True, help="JSON indentation")
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write JSON here"
)
def compile(
    cssfile: str,
    keyframes: bool,
    media_queries: bool,
    part_selectors: bool,
    ignore_patterns: tuple[str, ...],
    rem_size: float,
    verbose: bool,
    indent: int,
    output: str | None,
) -> None:
    """Compile a CSS file into a JSON style object.

    Exits with code 1 if the CSS cannot be parsed or translated.
    """
    configure_logging(verbose)
    options = build_options(keyframes, media_queries, part_selectors, ignore_patterns, rem_size)

    try:
        source = Path(cssfile).read_text(encoding="utf-8")
        styles = transform_to_dict(source, options)
    except CssNativeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rendered = json.dumps(styles, indent=indent)
    if output:
        Path(output).write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(rendered)
