"""Stream adapter: pass stylesheets through, or stop on unused classes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Union

from unused_css.config import CheckOptions
from unused_css.errors import UnsupportedInputError, UnusedClassesError
from unused_css.events.bus import EventBus
from unused_css.session import CheckSession, DocumentState, SourceLoader

logger = logging.getLogger("unused_css")

Contents = Union[bytes, str, IO[bytes], IO[str], None]


@dataclass
class CssDocument:
    """A stylesheet travelling through the pipeline.

    ``contents`` is ``None`` for an empty placeholder, buffered ``bytes`` or
    ``str``, or a readable stream (which this check does not accept). Bytes are
    decoded as UTF-8 with undecodable bytes replaced.
    """

    path: str
    contents: Contents = None

    @classmethod
    def from_path(cls, path: str | Path) -> CssDocument:
        return cls(path=str(path), contents=Path(path).read_bytes())

    @property
    def is_null(self) -> bool:
        return self.contents is None

    @property
    def is_stream(self) -> bool:
        return not isinstance(self.contents, (bytes, str)) and hasattr(self.contents, "read")

    @property
    def text(self) -> str:
        if isinstance(self.contents, bytes):
            return self.contents.decode("utf-8", errors="replace")
        if isinstance(self.contents, str):
            return self.contents
        return ""


def check_unused_css(
    documents: Iterable[CssDocument],
    options: CheckOptions | Mapping[str, Any],
    *,
    bus: EventBus | None = None,
    loader: SourceLoader | None = None,
) -> Iterator[CssDocument]:
    """Check each stylesheet against the markup selected by ``options``.

    Options are validated and markup collection starts at call time, so a
    missing ``files`` option raises ConfigurationError before any document is
    read. The returned iterator yields every document that passes.

    For a document with unused classes, the classes are logged and
    UnusedClassesError is raised; with ``end`` set the stream stops instead
    and the document is not yielded. A document that fails to parse raises
    CSSParseError, or with ``end`` set is yielded untouched.
    """
    if not isinstance(options, CheckOptions):
        options = CheckOptions.from_dict(options)
    session = CheckSession(options, bus=bus, loader=loader).start()
    return _check_stream(documents, session)


def _check_stream(documents: Iterable[CssDocument], session: CheckSession) -> Iterator[CssDocument]:
    end_mode = session.options.end
    try:
        for document in documents:
            if document.is_null:
                yield document
                continue
            if document.is_stream:
                raise UnsupportedInputError("Streaming not supported", path=document.path)

            result = session.check(document.path, document.text)

            if result.state is DocumentState.FAILED:
                if end_mode:
                    yield document
                    continue
                raise result.error  # type: ignore[misc]

            if result.clean:
                yield document
                continue

            class_string = " ".join(result.unused)
            logger.warning("Unused CSS classes %s %s", document.path, class_string)
            if end_mode:
                return
            raise UnusedClassesError(result.unused, path=document.path)
    finally:
        session.close()
