"""Usage accumulation: the set of classes referenced across all markup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from unused_css.markup.collectors import ClassCollector
from unused_css.markup.parser import parse_markup


class UsageAccumulator:
    """Collects used class names from open-tag events until frozen.

    Classes are only ever added. After :meth:`freeze` the accumulator is
    read-only and further events raise ``RuntimeError``.
    """

    def __init__(self, collectors: Iterable[ClassCollector]) -> None:
        self._collectors = tuple(collectors)
        self._used: set[str] = set()
        self._frozen: frozenset[str] | None = None

    @property
    def frozen(self) -> bool:
        return self._frozen is not None

    def _check_open(self) -> None:
        if self._frozen is not None:
            raise RuntimeError("used classes are frozen; collection is complete")

    def on_open_tag(self, name: str, attributes: Mapping[str, str]) -> None:
        """Add every class any enabled collector finds on this tag."""
        self._check_open()
        for collector in self._collectors:
            self._used.update(c for c in collector.collect(attributes) if c)

    def feed(self, markup: str) -> int:
        """Parse one markup source, returning how many new classes it added."""
        self._check_open()
        before = len(self._used)
        parse_markup(markup, self.on_open_tag)
        for collector in self._collectors:
            self._used.update(c for c in collector.collect_source(markup) if c)
        return len(self._used) - before

    def freeze(self) -> frozenset[str]:
        """Finish collection and return the final used-class set."""
        if self._frozen is None:
            self._frozen = frozenset(self._used)
        return self._frozen

    def __len__(self) -> int:
        return len(self._used)

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._used
