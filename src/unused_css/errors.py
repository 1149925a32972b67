"""Error hierarchy for unused CSS class checking."""
from __future__ import annotations

from collections.abc import Sequence


class UnusedCSSError(Exception):
    """Base error for all unused_css errors."""

    def __init__(
        self, message: str, *, path: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class ConfigurationError(UnusedCSSError):
    """Options are missing or malformed. Raised before any document is read."""


class CSSParseError(UnusedCSSError):
    """Raised when a stylesheet cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        path: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, path=path, cause=cause)
        self.line = line
        self.column = column

    def with_path(self, path: str) -> CSSParseError:
        """Return a copy of this error attributed to *path*."""
        return CSSParseError(
            str(self), line=self.line, column=self.column, path=path, cause=self.cause
        )


class MarkupSourceError(UnusedCSSError):
    """A markup source matched by the file patterns could not be read."""


class UnsupportedInputError(UnusedCSSError):
    """A document was delivered as a stream instead of buffered contents."""


class UnusedClassesError(UnusedCSSError):
    """A stylesheet declares classes that no markup source uses."""

    def __init__(self, unused: Sequence[str], *, path: str = "") -> None:
        self.unused = list(unused)
        super().__init__(f"Unused CSS Classes: {' '.join(self.unused)}", path=path)
