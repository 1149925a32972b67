"""Markup source discovery: expand glob patterns and read files concurrently."""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from unused_css.errors import MarkupSourceError

logger = logging.getLogger("unused_css")


@dataclass(frozen=True)
class MarkupSource:
    """A markup file and its text; undecodable bytes become U+FFFD."""

    path: Path
    text: str


def discover_sources(patterns: Iterable[str]) -> list[Path]:
    """Expand glob patterns into markup file paths.

    Patterns are expanded in the order given (``**`` recurses), matches of
    one pattern are sorted, directories are dropped, and a path matched by
    several patterns is kept once.
    """
    seen: set[Path] = set()
    paths: list[Path] = []
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match)
            if not path.is_file() or path in seen:
                continue
            seen.add(path)
            paths.append(path)
    return paths


def _read(path: Path) -> MarkupSource:
    try:
        return MarkupSource(path=path, text=path.read_text(encoding="utf-8", errors="replace"))
    except OSError as exc:
        raise MarkupSourceError(
            f"Cannot read markup source {path}: {exc}", path=str(path), cause=exc
        ) from exc


def read_sources(paths: Iterable[Path], max_workers: int = 8) -> list[MarkupSource]:
    """Read every path concurrently; results keep the order of *paths*."""
    paths = list(paths)
    if not paths:
        return []
    with ThreadPoolExecutor(
        max_workers=min(max_workers, len(paths)), thread_name_prefix="unused-css-read"
    ) as pool:
        return list(pool.map(_read, paths))


def load_sources(patterns: Iterable[str], max_workers: int = 8) -> list[MarkupSource]:
    """Discover and read every markup source selected by *patterns*."""
    patterns = list(patterns)
    paths = discover_sources(patterns)
    if not paths:
        logger.warning("No markup sources matched %s", ", ".join(patterns))
    return read_sources(paths, max_workers=max_workers)
