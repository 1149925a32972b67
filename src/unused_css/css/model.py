"""Stylesheet model: Declaration, StyleRule, AtRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule block."""

    property: str
    value: str


@dataclass(frozen=True)
class StyleRule:
    """A rule pairing a selector list with its declarations.

    ``rules`` holds nested blocks (CSS nesting); they are parsed but carry no
    meaning for class extraction.
    """

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...] = ()
    rules: tuple[Rule, ...] = ()
    line: int | None = None

    @property
    def kind(self) -> str:
        return "rule"


@dataclass(frozen=True)
class AtRule:
    """An at-rule such as ``@media``, ``@import`` or ``@font-face``."""

    name: str  # "media", "import", "font-face", ...
    prelude: str
    rules: tuple[Rule, ...] = ()
    declarations: tuple[Declaration, ...] = ()
    line: int | None = None

    @property
    def kind(self) -> str:
        return "at-rule"


Rule = Union[StyleRule, AtRule]


@dataclass(frozen=True)
class Stylesheet:
    """The top-level rules of a parsed CSS document, in source order."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)
