"""CLI command: unused-css check -- fail on stylesheets with unused classes."""

from __future__ import annotations

import re
import sys

import click

from unused_css.cli.options import angular_option, build_bus, compile_patterns, files_option
from unused_css.config import CheckOptions
from unused_css.errors import (
    ConfigurationError,
    CSSParseError,
    MarkupSourceError,
    UnusedClassesError,
)
from unused_css.pipeline import CssDocument, check_unused_css


@click.command()
@click.argument(
    "stylesheets", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@files_option
@click.option("--ignore", "ignore", multiple=True, help="Class name never reported (repeatable).")
@click.option(
    "--ignore-pattern",
    "ignore_patterns",
    multiple=True,
    callback=compile_patterns,
    help="Regular expression; matching classes are never reported (repeatable).",
)
@angular_option
@click.option("--end", is_flag=True, help="Stop quietly at the first stylesheet with unused classes.")
@click.option("--verbose", "-v", is_flag=True, help="Report collection and analysis progress.")
def check(
    stylesheets: tuple[str, ...],
    files: tuple[str, ...],
    ignore: tuple[str, ...],
    ignore_patterns: tuple[re.Pattern[str], ...],
    angular: bool,
    end: bool,
    verbose: bool,
) -> None:
    """Check STYLESHEETS for classes unused by the markup selected with --files.

    Prints OK for each stylesheet whose classes are all used or ignored.
    Exits with code 1 at the first stylesheet declaring unused classes or
    failing to parse, unless --end is given.
    """
    try:
        options = CheckOptions(
            files=files,
            angular=angular,
            ignore=(*ignore, *ignore_patterns),
            end=end,
        )
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc

    documents = (CssDocument.from_path(path) for path in stylesheets)
    try:
        for document in check_unused_css(documents, options, bus=build_bus(verbose)):
            click.echo(f"OK: {document.path}")
    except UnusedClassesError as exc:
        click.echo(
            f"{click.style('Unused CSS classes', fg='cyan')} "
            f"{click.style(exc.path, fg='red')} {' '.join(exc.unused)}",
            err=True,
        )
        sys.exit(1)
    except CSSParseError as exc:
        location = f":{exc.line}" if exc.line else ""
        click.echo(f"Parse error: {exc.path}{location}: {exc}", err=True)
        sys.exit(1)
    except MarkupSourceError as exc:
        click.echo(f"Markup error: {exc}", err=True)
        sys.exit(1)
