"""Attribute collectors: turn an open tag's attributes into class names.

Each collector reads a different markup convention. Collectors are static:
directive expressions are tokenised, never evaluated, so every class name
written in a binding counts as used whether or not its condition holds.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

__all__ = [
    "ClassCollector",
    "ClassAttributeCollector",
    "AngularClassCollector",
    "build_collectors",
    "classes_from_expression",
]


class ClassCollector(Protocol):
    """Extracts class names from the attribute map of one open tag."""

    name: str

    def collect(self, attributes: Mapping[str, str]) -> list[str]: ...

    def collect_source(self, markup: str) -> list[str]: ...


class ClassAttributeCollector:
    """Reads the whitespace-separated ``class`` attribute."""

    name = "class"

    def collect(self, attributes: Mapping[str, str]) -> list[str]:
        value = attributes.get("class")
        if not value:
            return []
        return value.split()

    def collect_source(self, markup: str) -> list[str]:
        return []


# Angular 1.x directives and Angular 2+ property bindings whose value is a
# class expression. Names are compared lowercase since HTML parsers fold case.
_ANGULAR_EXPRESSION_ATTRS = frozenset(
    {
        "ng-class",
        "data-ng-class",
        "x-ng-class",
        "ng:class",
        "ng-class-odd",
        "ng-class-even",
        "[ngclass]",
        "[class]",
    }
)

_CLASS_BINDING_RE = re.compile(r"^\[class\.([^\]\s]+)\]$", re.IGNORECASE)

# HTML parsers lowercase attribute names, so [class.NAME] bindings are also
# read from the raw markup to keep NAME as written.
_RAW_CLASS_BINDING_RE = re.compile(
    r"(?<=[\s'\"/])\[class\.([^\]\s'\"=<>/]+)\]\s*=", re.IGNORECASE
)

_TOKEN_RE = re.compile(
    r"""
    (?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
  | (?P<ident>[A-Za-z_$][\w$]*)
  | (?P<open>[{\[(])
  | (?P<close>[}\])])
  | (?P<colon>:)
  | (?P<comma>,)
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unquote(literal: str) -> str:
    return _ESCAPE_RE.sub(r"\1", literal[1:-1])


def classes_from_expression(expression: str) -> list[str]:
    """Return every class name written in an Angular class expression.

    Object-literal keys (quoted or bare) are class names; their values are
    conditions and are skipped. String literals anywhere else (array items,
    ternary branches, call arguments, a bare string) are class lists.
    Malformed input yields whatever could be recovered.
    """
    found: list[str] = []
    # One frame per open bracket: [bracket, expecting_key]
    stack: list[list] = []
    for match in _TOKEN_RE.finditer(expression):
        kind = match.lastgroup
        frame = stack[-1] if stack else None
        in_object = frame is not None and frame[0] == "{"

        if kind == "open":
            stack.append([match.group(), True])
        elif kind == "close":
            if stack:
                stack.pop()
        elif kind == "comma":
            if in_object:
                frame[1] = True  # type: ignore[index]
        elif kind == "colon":
            if in_object:
                frame[1] = False  # type: ignore[index]
        elif kind == "string":
            if not in_object or frame[1]:  # type: ignore[index]
                found.extend(_unquote(match.group()).split())
        elif kind == "ident":
            if in_object and frame[1]:  # type: ignore[index]
                found.append(match.group())
    return found


class AngularClassCollector:
    """Reads Angular class-binding directives such as ``ng-class``."""

    name = "angular"

    def collect(self, attributes: Mapping[str, str]) -> list[str]:
        found: list[str] = []
        for raw_name, value in attributes.items():
            attr = raw_name.lower()
            if attr in _ANGULAR_EXPRESSION_ATTRS:
                if value:
                    found.extend(classes_from_expression(value))
                continue
            binding = _CLASS_BINDING_RE.match(raw_name)
            if binding:
                found.append(binding.group(1))
        return found

    def collect_source(self, markup: str) -> list[str]:
        """Return ``[class.NAME]`` binding names with their source spelling."""
        return _RAW_CLASS_BINDING_RE.findall(markup)


def build_collectors(angular: bool = True) -> tuple[ClassCollector, ...]:
    """Return the enabled collectors, plain ``class`` first."""
    collectors: list[ClassCollector] = [ClassAttributeCollector()]
    if angular:
        collectors.append(AngularClassCollector())
    return tuple(collectors)
