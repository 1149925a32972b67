"""Event types emitted during a check session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CollectionStarted:
    patterns: tuple[str, ...]


@dataclass(frozen=True)
class SourceParsed:
    path: str
    class_count: int  # classes first seen in this source


@dataclass(frozen=True)
class CollectionCompleted:
    source_count: int
    used_count: int


@dataclass(frozen=True)
class CollectionFailed:
    error: str


@dataclass(frozen=True)
class DocumentQueued:
    path: str


@dataclass(frozen=True)
class DocumentAnalyzing:
    path: str


@dataclass(frozen=True)
class DocumentResolved:
    path: str
    unused: tuple[str, ...]


@dataclass(frozen=True)
class DocumentFailed:
    path: str
    error: str
