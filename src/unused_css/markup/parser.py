"""Markup parsing: report every open tag with its attribute map."""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup

__all__ = ["OpenTagHandler", "parse_markup"]

OpenTagHandler = Callable[[str, dict[str, str]], None]


def parse_markup(source: str, on_open_tag: OpenTagHandler) -> int:
    """Parse *source* and call *on_open_tag* for each element in document order.

    Attribute values are plain strings (``class`` is not split) and valueless
    attributes map to ``""``. Returns the number of tags seen.
    """
    soup = BeautifulSoup(source, "html.parser", multi_valued_attributes=None)
    count = 0
    for tag in soup.find_all(True):
        attributes = {
            str(name): "" if value is None else str(value)
            for name, value in tag.attrs.items()
        }
        on_open_tag(tag.name, attributes)
        count += 1
    return count
