"""Check session: collect used classes once, then analyze stylesheets.

A session moves from COLLECTING to READY (or FAILED) exactly once. Markup
sources are read and parsed on a worker thread while stylesheets may already
be arriving; those stylesheets are queued and analyzed in arrival order only
after the used-class set is final, so every verdict sees every markup source.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from unused_css.analysis.diff import UnusedReport, find_unused
from unused_css.analysis.ignore import IgnoreMatcher
from unused_css.analysis.usage import UsageAccumulator
from unused_css.config import CheckOptions
from unused_css.css.parser import parse_css
from unused_css.errors import CSSParseError
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
from unused_css.markup.collectors import build_collectors
from unused_css.markup.sources import MarkupSource, load_sources

logger = logging.getLogger("unused_css")

SourceLoader = Callable[[tuple[str, ...], int], Iterable[MarkupSource]]


class SessionState(Enum):
    COLLECTING = "collecting"
    READY = "ready"
    FAILED = "failed"


class DocumentState(Enum):
    QUEUED = "queued"
    ANALYZING = "analyzing"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True)
class DocumentResult:
    """Verdict for one stylesheet: a report, or the parse error that stopped it."""

    path: str
    state: DocumentState
    report: UnusedReport | None = None
    error: CSSParseError | None = None

    @property
    def clean(self) -> bool:
        return self.report is not None and self.report.clean

    @property
    def unused(self) -> tuple[str, ...]:
        return self.report.unused if self.report is not None else ()


class CheckSession:
    """Owns the used-class set and the queue of stylesheets awaiting it.

    Usage::

        with CheckSession(CheckOptions(files="src/**/*.html")) as session:
            result = session.check("main.css", css_text)
    """

    def __init__(
        self,
        options: CheckOptions,
        *,
        bus: EventBus | None = None,
        loader: SourceLoader | None = None,
    ) -> None:
        self.options = options
        self.bus = bus or EventBus()
        self._loader = loader or load_sources
        self._matcher = IgnoreMatcher(options.ignore)
        self._accumulator = UsageAccumulator(build_collectors(options.angular))

        self._lock = threading.Lock()
        self._state = SessionState.COLLECTING
        self._draining = False
        self._pending: deque[tuple[str, str, Future[DocumentResult]]] = deque()
        self._collected: Future[frozenset[str]] = Future()
        self._executor: ThreadPoolExecutor | None = None

    # --- lifecycle ------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    def start(self) -> CheckSession:
        """Begin markup collection in the background. Calling again is a no-op."""
        with self._lock:
            if self._executor is not None:
                return self
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="unused-css-session"
            )
        self.bus.emit(CollectionStarted(patterns=self.options.patterns))
        self._executor.submit(self._collect)
        return self

    def wait_ready(self, timeout: float | None = None) -> frozenset[str]:
        """Block until collection finishes and return the used-class set.

        Raises the collection error if markup could not be loaded.
        """
        self.start()
        return self._collected.result(timeout)

    @property
    def used_classes(self) -> frozenset[str]:
        return self.wait_ready()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> CheckSession:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- collection -----------------------------------------------------------

    def _collect(self) -> None:
        try:
            count = 0
            for source in self._loader(self.options.patterns, self.options.max_workers):
                added = self._accumulator.feed(source.text)
                count += 1
                logger.debug("Parsed markup %s (%d new classes)", source.path, added)
                self.bus.emit(SourceParsed(path=str(source.path), class_count=added))
            used = self._accumulator.freeze()
        except Exception as exc:
            self._fail(exc)
            return

        logger.info("Collected %d used classes from %d markup sources", len(used), count)
        with self._lock:
            self._state = SessionState.READY
            self._draining = True
        self._collected.set_result(used)
        self.bus.emit(CollectionCompleted(source_count=count, used_count=len(used)))

        # Documents submitted while draining join the back of the queue, so
        # arrival order holds across the READY transition.
        while True:
            with self._lock:
                if not self._pending:
                    self._draining = False
                    return
                path, css, future = self._pending.popleft()
            self._analyze(path, css, future, used)

    def _fail(self, exc: Exception) -> None:
        logger.error("Markup collection failed: %s", exc)
        with self._lock:
            self._state = SessionState.FAILED
            pending = list(self._pending)
            self._pending.clear()
        self._collected.set_exception(exc)
        self.bus.emit(CollectionFailed(error=str(exc)))
        for _path, _css, future in pending:
            if future.set_running_or_notify_cancel():
                future.set_exception(exc)

    # --- analysis -------------------------------------------------------------

    def submit(self, path: str, css: str) -> Future[DocumentResult]:
        """Queue a stylesheet for analysis once collection is complete."""
        self.start()
        future: Future[DocumentResult] = Future()
        with self._lock:
            state = self._state
            queue = state is SessionState.COLLECTING or self._draining
            if queue:
                self._pending.append((path, css, future))
        if queue:
            logger.debug("Queued %s until markup collection completes", path)
            self.bus.emit(DocumentQueued(path=path))
            return future
        if state is SessionState.FAILED:
            future.set_running_or_notify_cancel()
            future.set_exception(self._collected.exception())  # type: ignore[arg-type]
            return future
        self._analyze(path, css, future, self._collected.result())
        return future

    def check(self, path: str, css: str, timeout: float | None = None) -> DocumentResult:
        """Analyze one stylesheet, waiting for collection if needed."""
        return self.submit(path, css).result(timeout)

    def _analyze(
        self, path: str, css: str, future: Future[DocumentResult], used: frozenset[str]
    ) -> None:
        if not future.set_running_or_notify_cancel():
            return
        self.bus.emit(DocumentAnalyzing(path=path))
        try:
            result = self._diff(path, css, used)
        except Exception as exc:
            future.set_exception(exc)
            return
        future.set_result(result)

    def _diff(self, path: str, css: str, used: frozenset[str]) -> DocumentResult:
        try:
            stylesheet = parse_css(css)
        except CSSParseError as exc:
            error = exc.with_path(path)
            logger.info("Cannot parse %s: %s", path, error)
            self.bus.emit(DocumentFailed(path=path, error=str(error)))
            return DocumentResult(path=path, state=DocumentState.FAILED, error=error)

        report = find_unused(stylesheet, used, self._matcher.should_ignore)
        self.bus.emit(DocumentResolved(path=path, unused=report.unused))
        return DocumentResult(path=path, state=DocumentState.RESOLVED, report=report)
