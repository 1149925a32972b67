"""Lark-based parser turning CSS text into a Stylesheet model.

Only block structure is understood: selector lists, at-rule preludes, and
``property: value`` declarations. Values are kept verbatim.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from unused_css.css.model import AtRule, Declaration, Rule, StyleRule, Stylesheet
from unused_css.errors import CSSParseError

__all__ = ["parse_css", "split_selectors"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Strings are matched first so a "/*" inside quotes is left alone.
_COMMENT_RE = re.compile(
    r"""(?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')|(?P<comment>/\*.*?\*/)|(?P<open>/\*)""",
    re.DOTALL,
)
_AT_NAME_RE = re.compile(r"@([\w-]+)")


class _Text:
    """A raw statement or trailing declaration, with its source token."""

    def __init__(self, token: Token) -> None:
        self.text = str(token).strip()
        self.line: int | None = token.line


class _Block:
    """A prelude followed by a braced list of items."""

    def __init__(self, token: Token, items: list[_Text | _Block]) -> None:
        self.prelude = str(token).strip()
        self.line: int | None = token.line
        self.items = items


class _CSSTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into intermediate _Text/_Block objects."""

    def statement(self, items: list[Token]) -> _Text:
        return _Text(items[0])

    def tail(self, items: list[Token]) -> _Text:
        return _Text(items[0])

    def block(self, items: list[object]) -> _Block:
        return _Block(items[0], [i for i in items[1:] if isinstance(i, (_Text, _Block))])  # type: ignore[arg-type]

    def start(self, items: list[object]) -> list[_Text | _Block]:
        return [i for i in items if isinstance(i, (_Text, _Block))]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _strip_comments(source: str) -> str:
    """Remove comments outside quoted strings, keeping the newlines they spanned."""

    def _blank(match: re.Match[str]) -> str:
        if match.lastgroup == "string":
            return match.group()
        if match.lastgroup == "open":
            line = source.count("\n", 0, match.start()) + 1
            raise CSSParseError("End of comment missing", line=line)
        newlines = match.group().count("\n")
        return "\n" * newlines if newlines else " "

    return _COMMENT_RE.sub(_blank, source)


def split_selectors(prelude: str) -> tuple[str, ...]:
    """Split a selector list on commas that are not nested or quoted."""
    selectors: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    escaped = False
    for ch in prelude:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            selectors.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    selectors.append("".join(current).strip())
    return tuple(s for s in selectors if s)


def _declaration(item: _Text) -> Declaration:
    prop, sep, value = item.text.partition(":")
    if not sep or not prop.strip():
        raise CSSParseError(f"property missing ':' near {item.text!r}", line=item.line)
    return Declaration(property=prop.strip(), value=value.strip())


def _build_block(block: _Block) -> Rule:
    declarations: list[Declaration] = []
    nested: list[Rule] = []
    for item in block.items:
        if isinstance(item, _Block):
            nested.append(_build_block(item))
        else:
            declarations.append(_declaration(item))

    if block.prelude.startswith("@"):
        match = _AT_NAME_RE.match(block.prelude)
        if match is None:
            raise CSSParseError("at-rule missing a name", line=block.line)
        return AtRule(
            name=match.group(1).lower(),
            prelude=block.prelude[match.end():].strip(),
            rules=tuple(nested),
            declarations=tuple(declarations),
            line=block.line,
        )

    selectors = split_selectors(block.prelude)
    if not selectors:
        raise CSSParseError("selector missing", line=block.line)
    return StyleRule(
        selectors=selectors,
        declarations=tuple(declarations),
        rules=tuple(nested),
        line=block.line,
    )


def _build_statement(item: _Text) -> Rule:
    match = _AT_NAME_RE.match(item.text)
    if match is None:
        raise CSSParseError(f"missing '{{' after {item.text!r}", line=item.line)
    return AtRule(
        name=match.group(1).lower(),
        prelude=item.text[match.end():].strip(),
        line=item.line,
    )


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet of top-level rules.

    Raises CSSParseError for unbalanced braces, selectors without a block,
    and declarations without a colon.
    """
    text = _strip_comments(source)
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise CSSParseError(
            str(e),
            line=line if isinstance(line, int) and line > 0 else None,
            column=column if isinstance(column, int) and column > 0 else None,
            cause=e,
        ) from e
    items = _CSSTransformer().transform(tree)

    rules: list[Rule] = []
    for item in items:
        if isinstance(item, _Block):
            rules.append(_build_block(item))
        else:
            rules.append(_build_statement(item))
    return Stylesheet(rules=tuple(rules))
