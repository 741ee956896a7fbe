"""cssnative CLI entry point: Click group with subcommands."""

import click

from cssnative import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssnative")
def cli() -> None:
    """cssnative - compile CSS into style objects for native renderers."""


# Import and register subcommands
from cssnative.cli.compile import compile  # noqa: E402
from cssnative.cli.inspect import inspect  # noqa: E402

cli.add_command(compile)
cli.add_command(inspect)
