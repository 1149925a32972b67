"""Shared click options and event echoing for the CLI commands."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

import click

from unused_css.events import (
    CollectionCompleted,
    CollectionFailed,
    DocumentFailed,
    DocumentQueued,
    DocumentResolved,
    EventBus,
    SourceParsed,
)


def files_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--files",
        "-f",
        "files",
        multiple=True,
        required=True,
        help="Glob pattern selecting markup files (repeatable, ** recurses).",
    )(func)


def angular_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--angular/--no-angular",
        default=True,
        show_default=True,
        help="Also collect classes from Angular class bindings (ng-class, [ngClass]).",
    )(func)


def compile_patterns(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> tuple[re.Pattern[str], ...]:
    """Click callback compiling --ignore-pattern values."""
    compiled: list[re.Pattern[str]] = []
    for raw in value:
        try:
            compiled.append(re.compile(raw))
        except re.error as exc:
            raise click.BadParameter(f"{raw!r}: {exc}", ctx=ctx, param=param) from exc
    return tuple(compiled)


def describe_event(event: object) -> str | None:
    """One-line description of a session event, or None to stay quiet."""
    if isinstance(event, SourceParsed):
        return f"Parsed {event.path} (+{event.class_count} classes)"
    if isinstance(event, CollectionCompleted):
        return f"Collected {event.used_count} used classes from {event.source_count} file(s)"
    if isinstance(event, CollectionFailed):
        return f"Collection failed: {event.error}"
    if isinstance(event, DocumentQueued):
        return f"Waiting for markup: {event.path}"
    if isinstance(event, DocumentResolved):
        return f"Checked {event.path}: {len(event.unused)} unused"
    if isinstance(event, DocumentFailed):
        return f"Parse failed {event.path}: {event.error}"
    return None


def build_bus(verbose: bool) -> EventBus:
    """Create the session bus; with *verbose*, echo events and log at INFO."""
    bus = EventBus()
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

        def _echo(event: object) -> None:
            line = describe_event(event)
            if line:
                click.echo(line, err=True)

        bus.on_all(_echo)
    return bus
