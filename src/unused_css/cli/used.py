"""CLI command: unused-css used -- list the classes markup files reference."""

from __future__ import annotations

import sys

import click

from unused_css.cli.options import angular_option, build_bus, files_option
from unused_css.config import CheckOptions
from unused_css.errors import MarkupSourceError
from unused_css.session import CheckSession


@click.command()
@files_option
@angular_option
@click.option("--verbose", "-v", is_flag=True, help="Report collection progress.")
def used(files: tuple[str, ...], angular: bool, verbose: bool) -> None:
    """Print every class used by the markup selected with --files, sorted."""
    options = CheckOptions(files=files, angular=angular)
    with CheckSession(options, bus=build_bus(verbose)) as session:
        try:
            classes = session.wait_ready()
        except MarkupSourceError as exc:
            click.echo(f"Markup error: {exc}", err=True)
            sys.exit(1)
    for name in sorted(classes):
        click.echo(name)
