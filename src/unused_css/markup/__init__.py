"""Markup side of the check: parsing, attribute collectors, and sources."""

from unused_css.markup.collectors import (
    AngularClassCollector,
    ClassAttributeCollector,
    ClassCollector,
    build_collectors,
    classes_from_expression,
)
from unused_css.markup.parser import parse_markup
from unused_css.markup.sources import MarkupSource, discover_sources, read_sources

__all__ = [
    "AngularClassCollector",
    "ClassAttributeCollector",
    "ClassCollector",
    "MarkupSource",
    "build_collectors",
    "classes_from_expression",
    "discover_sources",
    "parse_markup",
    "read_sources",
]
