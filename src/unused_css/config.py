"""Check options: markup sources, directive collection, ignore rules."""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from unused_css.errors import ConfigurationError

IgnoreRule = Union[str, re.Pattern]


@dataclass(frozen=True)
class CheckOptions:
    """Configuration for one check session.

    Attributes:
        files: Glob pattern, or sequence of patterns, selecting markup sources.
        angular: Also collect classes from Angular class-binding directives.
        ignore: Literal class names and compiled patterns exempt from reporting.
        end: Soft-stop the stream on unused classes instead of raising.
        max_workers: Upper bound on concurrent markup file reads.
    """

    files: str | tuple[str, ...]
    angular: bool = True
    ignore: tuple[IgnoreRule, ...] = ()
    end: bool = False
    max_workers: int = 8

    def __post_init__(self) -> None:
        if not self.patterns:
            raise ConfigurationError("No HTML files specified")
        for rule in self.ignore:
            if not isinstance(rule, (str, re.Pattern)):
                raise ConfigurationError(
                    f"Unsupported ignore rule {rule!r}: expected a string or a compiled pattern"
                )
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")

    @property
    def patterns(self) -> tuple[str, ...]:
        """The markup source patterns as a tuple, skipping blanks."""
        if isinstance(self.files, str):
            raw: tuple[str, ...] = (self.files,)
        else:
            raw = tuple(self.files)
        return tuple(p for p in raw if p)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any] | None) -> CheckOptions:
        """Build options from a plain mapping using the plugin option names.

        ``files`` is required; ``angular`` defaults to true, ``ignore`` to no
        rules, and ``end`` to false. Unknown keys are rejected.
        """
        options = dict(options or {})
        known = {"files", "angular", "ignore", "end", "max_workers"}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

        files = options.get("files")
        if not files:
            raise ConfigurationError("No HTML files specified")
        if not isinstance(files, str):
            files = tuple(files)

        ignore = options.get("ignore") or ()
        if isinstance(ignore, (str, re.Pattern)):
            ignore = (ignore,)

        kwargs: dict[str, Any] = {
            "files": files,
            "angular": options.get("angular", True) is not False,
            "ignore": tuple(ignore),
            "end": bool(options.get("end", False)),
        }
        if "max_workers" in options:
            kwargs["max_workers"] = int(options["max_workers"])
        return cls(**kwargs)
