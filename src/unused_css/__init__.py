"""unused_css: report CSS classes that no markup source references."""
from __future__ import annotations

__version__ = "0.1.0"

from unused_css.analysis import IgnoreMatcher, UnusedReport, find_unused  # noqa: E402
from unused_css.config import CheckOptions  # noqa: E402
from unused_css.errors import (  # noqa: E402
    ConfigurationError,
    CSSParseError,
    MarkupSourceError,
    UnsupportedInputError,
    UnusedClassesError,
    UnusedCSSError,
)
from unused_css.pipeline import CssDocument, check_unused_css  # noqa: E402
from unused_css.session import (  # noqa: E402
    CheckSession,
    DocumentResult,
    DocumentState,
    SessionState,
)

__all__ = [
    "__version__",
    "CheckOptions",
    "CheckSession",
    "ConfigurationError",
    "CssDocument",
    "CSSParseError",
    "DocumentResult",
    "DocumentState",
    "IgnoreMatcher",
    "MarkupSourceError",
    "SessionState",
    "UnsupportedInputError",
    "UnusedClassesError",
    "UnusedCSSError",
    "UnusedReport",
    "check_unused_css",
    "find_unused",
]
