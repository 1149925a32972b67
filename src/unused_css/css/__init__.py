from unused_css.css.parser import parse_css, split_selectors
from unused_css.css.model import AtRule, Declaration, Rule, StyleRule, Stylesheet

__all__ = [
    "parse_css",
    "split_selectors",
    "AtRule",
    "Declaration",
    "Rule",
    "StyleRule",
    "Stylesheet",
]
