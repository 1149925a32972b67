"""Ignore rules: literal class names and regular-expression patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable

from unused_css.config import IgnoreRule
from unused_css.errors import ConfigurationError


class IgnoreMatcher:
    """Decides whether a declared class is exempt from the unused report.

    A ``str`` rule matches its exact class name; a compiled pattern matches
    any class it finds a match in (``re.search``). With no rules nothing is
    ignored.
    """

    def __init__(self, rules: Iterable[IgnoreRule] = ()) -> None:
        literals: set[str] = set()
        patterns: list[re.Pattern[str]] = []
        for rule in rules:
            if isinstance(rule, str):
                literals.add(rule)
            elif isinstance(rule, re.Pattern):
                patterns.append(rule)
            else:
                raise ConfigurationError(f"Unsupported ignore rule {rule!r}")
        self._literals = frozenset(literals)
        self._patterns = tuple(patterns)

    def __bool__(self) -> bool:
        return bool(self._literals or self._patterns)

    def should_ignore(self, class_name: str) -> bool:
        if class_name in self._literals:
            return True
        return any(p.search(class_name) for p in self._patterns)

    __call__ = should_ignore

    def __repr__(self) -> str:
        return f"IgnoreMatcher(literals={sorted(self._literals)}, patterns={len(self._patterns)})"
