"""Class-selector extraction from parsed stylesheets."""

from __future__ import annotations

import re

from unused_css.css.model import Stylesheet

# A dot, a letter, then any run of digits, letters, underscores and hyphens.
CLASS_SELECTOR_RE = re.compile(r"\.[a-zA-Z][0-9A-Za-z_-]*")


def extract_declared_classes(stylesheet: Stylesheet) -> list[str]:
    """Return the class selectors of the top-level style rules.

    Entries keep their leading dot and appear once each, in order of first
    occurrence. At-rules and their contents are skipped.
    """
    declared: dict[str, None] = {}
    for rule in stylesheet.rules:
        if rule.kind != "rule":
            continue
        for selector in getattr(rule, "selectors", ()):
            for match in CLASS_SELECTOR_RE.findall(selector):
                declared.setdefault(match, None)
    return list(declared)
