"""Event bus for check session lifecycle events."""

from __future__ import annotations

import threading
from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus shared by the session worker and its caller.

    Collection events are emitted from the session's worker thread, document
    events from whichever thread analyzes the document. Listeners run
    synchronously on the emitting thread: catch-all listeners first, then
    listeners for the exact event type, each group in registration order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Register a callback for one event type."""
        with self._lock:
            self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        with self._lock:
            self._global_listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        """Remove *callback* wherever it is registered."""
        with self._lock:
            self._global_listeners = [cb for cb in self._global_listeners if cb != callback]
            for event_type, callbacks in list(self._listeners.items()):
                self._listeners[event_type] = [cb for cb in callbacks if cb != callback]

    def emit(self, event: Any) -> None:
        """Dispatch *event*; listeners added during dispatch see the next event."""
        with self._lock:
            targets = list(self._global_listeners)
            targets.extend(self._listeners.get(type(event), ()))
        for cb in targets:
            cb(event)
