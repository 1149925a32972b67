"""Event system: bus and event types for the check session lifecycle."""

from unused_css.events.bus import EventBus
from unused_css.events.types import (
    CollectionCompleted,
    CollectionFailed,
    CollectionStarted,
    DocumentAnalyzing,
    DocumentFailed,
    DocumentQueued,
    DocumentResolved,
    SourceParsed,
)

__all__ = [
    "EventBus",
    "CollectionCompleted",
    "CollectionFailed",
    "CollectionStarted",
    "DocumentAnalyzing",
    "DocumentFailed",
    "DocumentQueued",
    "DocumentResolved",
    "SourceParsed",
]
