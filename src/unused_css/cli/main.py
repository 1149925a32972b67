"""unused-css CLI entry point: Click group with subcommands."""

import click

from unused_css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="unused-css")
def cli() -> None:
    """unused-css - report CSS classes that no markup file uses."""


# Import and register subcommands
from unused_css.cli.check import check  # noqa: E402
from unused_css.cli.used import used  # noqa: E402

cli.add_command(check)
cli.add_command(used)
