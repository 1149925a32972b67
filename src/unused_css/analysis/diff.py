"""Per-document diff of declared classes against used classes."""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass

from unused_css.analysis.extractor import extract_declared_classes
from unused_css.css.model import Stylesheet


@dataclass(frozen=True)
class UnusedReport:
    """Outcome of checking one stylesheet.

    Attributes:
        declared: Declared class names without the leading dot, in scan order.
        unused: Declared classes neither used nor ignored, in scan order.
    """

    declared: tuple[str, ...]
    unused: tuple[str, ...]

    @property
    def clean(self) -> bool:
        """True when nothing is declared or everything declared is covered."""
        return not self.declared or not self.unused

    @property
    def nothing_declared(self) -> bool:
        return not self.declared


def find_unused(
    stylesheet: Stylesheet,
    used: Collection[str],
    should_ignore: Callable[[str], bool] | None = None,
) -> UnusedReport:
    """Compute the unused-class report for one stylesheet.

    The declared set is rebuilt from scratch on every call, so reports for
    different documents never share state.
    """
    declared = [c[1:] for c in extract_declared_classes(stylesheet)]
    unused = [
        c
        for c in declared
        if not (should_ignore is not None and should_ignore(c)) and c not in used
    ]
    return UnusedReport(declared=tuple(declared), unused=tuple(unused))
