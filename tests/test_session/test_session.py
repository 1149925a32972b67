"""Tests for the check session: collection, queueing, and analysis."""

import re
import threading
from pathlib import Path

import pytest

from unused_css.config import CheckOptions
from unused_css.errors import MarkupSourceError
from unused_css.events import (
    CollectionCompleted,
    DocumentAnalyzing,
    DocumentQueued,
    EventBus,
)
from unused_css.markup.sources import MarkupSource
from unused_css.session import CheckSession, DocumentState, SessionState

TIMEOUT = 5


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _loader(*markup: str):
    def load(patterns, max_workers):
        return [MarkupSource(path=Path(f"page{i}.html"), text=m) for i, m in enumerate(markup)]

    return load


def _gated_loader(gate: threading.Event, *markup: str):
    inner = _loader(*markup)

    def load(patterns, max_workers):
        assert gate.wait(TIMEOUT)
        return inner(patterns, max_workers)

    return load


def _options(**kwargs) -> CheckOptions:
    kwargs.setdefault("files", "*.html")
    return CheckOptions(**kwargs)


# ---------------------------------------------------------------------------
# Verdicts
# ---------------------------------------------------------------------------


class TestVerdicts:
    def test_unused_class_reported(self):
        with CheckSession(_options(), loader=_loader('<p class="a"></p>')) as session:
            result = session.check("main.css", ".a{} .b{}", timeout=TIMEOUT)
        assert result.state is DocumentState.RESOLVED
        assert result.unused == ("b",)
        assert not result.clean

    def test_all_used_is_clean(self):
        with CheckSession(_options(), loader=_loader('<p class="a b"></p>')) as session:
            result = session.check("main.css", ".a{} .b{}", timeout=TIMEOUT)
        assert result.clean
        assert result.unused == ()

    def test_ignore_rules_applied(self):
        opts = _options(ignore=(re.compile(r"^nav-"),))
        with CheckSession(opts, loader=_loader("")) as session:
            result = session.check("nav.css", ".nav-item{}", timeout=TIMEOUT)
        assert result.clean

    def test_directive_usage_ignored_when_disabled(self):
        markup = '<p ng-class="{\'highlight\': on}"></p>'
        with CheckSession(_options(angular=False), loader=_loader(markup)) as session:
            result = session.check("hl.css", ".highlight{}", timeout=TIMEOUT)
        assert result.unused == ("highlight",)

    def test_directive_usage_counted_by_default(self):
        markup = '<p ng-class="{\'highlight\': on}"></p>'
        with CheckSession(_options(), loader=_loader(markup)) as session:
            result = session.check("hl.css", ".highlight{}", timeout=TIMEOUT)
        assert result.clean

    def test_parse_failure(self):
        with CheckSession(_options(), loader=_loader("")) as session:
            result = session.check("bad.css", ".a {", timeout=TIMEOUT)
        assert result.state is DocumentState.FAILED
        assert result.error is not None
        assert result.error.path == "bad.css"
        assert not result.clean

    def test_parse_failure_does_not_affect_next_document(self):
        with CheckSession(_options(), loader=_loader('<p class="ok"></p>')) as session:
            session.check("bad.css", ".a {", timeout=TIMEOUT)
            result = session.check("good.css", ".ok {}", timeout=TIMEOUT)
        assert result.clean

    def test_repeat_check_is_identical(self):
        with CheckSession(_options(), loader=_loader('<p class="b"></p>')) as session:
            first = session.check("x.css", ".c{} .a{} .b{}", timeout=TIMEOUT)
            second = session.check("x.css", ".c{} .a{} .b{}", timeout=TIMEOUT)
        assert first == second
        assert first.unused == ("c", "a")

    def test_declared_classes_do_not_leak_between_documents(self):
        with CheckSession(_options(), loader=_loader("")) as session:
            session.check("one.css", ".only-one {}", timeout=TIMEOUT)
            result = session.check("two.css", ".two {}", timeout=TIMEOUT)
        assert result.report is not None
        assert result.report.declared == ("two",)


# ---------------------------------------------------------------------------
# Ordering: no analysis before collection completes
# ---------------------------------------------------------------------------


class TestCollectionOrdering:
    def test_document_waits_for_late_markup(self):
        gate = threading.Event()
        loader = _gated_loader(gate, '<p class="late"></p>')
        with CheckSession(_options(), loader=loader) as session:
            future = session.submit("early.css", ".late {}")
            assert session.state is SessionState.COLLECTING
            assert not future.done()
            gate.set()
            result = future.result(TIMEOUT)
        assert result.clean
        assert session.state is SessionState.READY

    def test_queued_documents_analyzed_in_arrival_order(self):
        gate = threading.Event()
        bus = EventBus()
        analyzed: list[str] = []
        bus.subscribe(DocumentAnalyzing, lambda e: analyzed.append(e.path))
        with CheckSession(_options(), bus=bus, loader=_gated_loader(gate, "")) as session:
            futures = [session.submit(name, ".x {}") for name in ("one", "two", "three")]
            gate.set()
            results = [f.result(TIMEOUT) for f in futures]
        assert analyzed == ["one", "two", "three"]
        assert [r.path for r in results] == ["one", "two", "three"]

    def test_queued_event_precedes_completion(self):
        gate = threading.Event()
        bus = EventBus()
        seen: list[object] = []
        bus.on_all(seen.append)
        with CheckSession(_options(), bus=bus, loader=_gated_loader(gate, "")) as session:
            future = session.submit("early.css", ".a {}")
            gate.set()
            future.result(TIMEOUT)
        kinds = [type(e) for e in seen]
        assert kinds.index(DocumentQueued) < kinds.index(CollectionCompleted)
        assert kinds.index(CollectionCompleted) < kinds.index(DocumentAnalyzing)

    def test_used_classes_final(self):
        loader = _loader('<p class="a"></p>', '<p class="b"></p>')
        with CheckSession(_options(), loader=loader) as session:
            assert session.wait_ready(TIMEOUT) == frozenset({"a", "b"})
            assert session.used_classes == frozenset({"a", "b"})

    def test_start_is_idempotent(self):
        calls: list[int] = []

        def loader(patterns, max_workers):
            calls.append(1)
            return []

        with CheckSession(_options(), loader=loader) as session:
            session.start()
            session.wait_ready(TIMEOUT)
        assert calls == [1]


# ---------------------------------------------------------------------------
# Collection failure
# ---------------------------------------------------------------------------


class TestCollectionFailure:
    def _failing(self, gate: threading.Event | None = None):
        def loader(patterns, max_workers):
            if gate is not None:
                assert gate.wait(TIMEOUT)
            raise MarkupSourceError("Cannot read markup source x.html", path="x.html")

        return loader

    def test_queued_document_fails(self):
        gate = threading.Event()
        with CheckSession(_options(), loader=self._failing(gate)) as session:
            future = session.submit("a.css", ".a {}")
            gate.set()
            with pytest.raises(MarkupSourceError):
                future.result(TIMEOUT)
        assert session.state is SessionState.FAILED

    def test_later_document_fails(self):
        with CheckSession(_options(), loader=self._failing()) as session:
            with pytest.raises(MarkupSourceError):
                session.wait_ready(TIMEOUT)
            with pytest.raises(MarkupSourceError):
                session.check("a.css", ".a {}", timeout=TIMEOUT)


# ---------------------------------------------------------------------------
# Real files
# ---------------------------------------------------------------------------


class TestFilesOnDisk:
    def test_glob_collection(self, tmp_path: Path):
        (tmp_path / "a.html").write_text('<div class="card"></div>', encoding="utf-8")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.html").write_text('<div class="title"></div>', encoding="utf-8")
        opts = CheckOptions(files=str(tmp_path / "**" / "*.html"))
        with CheckSession(opts) as session:
            result = session.check("site.css", ".card .title {} .footer {}", timeout=TIMEOUT)
        assert result.unused == ("footer",)
