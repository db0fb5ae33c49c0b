from __future__ import annotations

import logging
from enum import Enum

from .config import DEFAULT_WINDOW, ContextWindow
from .errors import StreamStateError
from .extract import Extractor
from .handler import SourceHandler
from .ingest import LineSplitter
from .lines import LineTable
from .registry import PositionRegistry
from .spans import Position


logger = logging.getLogger(__name__)


class StreamState(str, Enum):
    NEW = "new"
    INGESTING = "ingesting"
    DONE = "done"


class SourceCode:
    """Line index and error excerpts for one document.

    Drive it as a character handler: start(), characters() any number of
    times, end(). The upstream parser may checkpoint with
    add_locator_location() while the stream flows. Once end() has run,
    exact_error(), range_end_error() and line_error() render excerpts to a
    SourceHandler. start() may be called again to index another document.
    """

    def __init__(self, *, window: ContextWindow = DEFAULT_WINDOW) -> None:
        self.lines = LineTable()
        self.registry = PositionRegistry(self.lines)
        self._splitter = LineSplitter(self.lines)
        self._extractor = Extractor(self.lines, self.registry, window=window)
        self.state = StreamState.NEW

    @property
    def window(self) -> ContextWindow:
        return self._extractor.window

    # character stream

    def start(self) -> None:
        self.registry.clear()
        self._splitter.begin()
        self.state = StreamState.INGESTING

    def characters(self, chunk: str) -> None:
        self._require(StreamState.INGESTING, "characters()")
        self._splitter.feed(chunk)

    def end(self) -> None:
        self._require(StreamState.INGESTING, "end()")
        count = self._splitter.finish()
        self.state = StreamState.DONE
        logger.debug("indexed %d lines", count)

    def add_locator_location(self, one_based_line: int, one_based_column: int) -> Position:
        if self.state is StreamState.NEW:
            raise StreamStateError(
                "add_locator_location() before start()",
                hint="call start() before reporting parser positions",
            )
        return self.registry.record(one_based_line, one_based_column)

    # queries

    def exact_error(self, one_based_line: int, one_based_column: int, handler: SourceHandler) -> None:
        self._require(StreamState.DONE, "exact_error()")
        self._extractor.exact_error(one_based_line, one_based_column, handler)

    def range_end_error(self, one_based_line: int, one_based_column: int, handler: SourceHandler) -> None:
        self._require(StreamState.DONE, "range_end_error()")
        self._extractor.range_end_error(one_based_line, one_based_column, handler)

    def line_error(self, one_based_line: int, handler: SourceHandler) -> None:
        self._require(StreamState.DONE, "line_error()")
        self._extractor.line_error(one_based_line, handler)

    @property
    def exact_errors(self) -> tuple[Position, ...]:
        return self.registry.exact_errors

    @property
    def range_ends(self) -> tuple[Position, ...]:
        return self.registry.range_ends

    @property
    def number_of_lines(self) -> int:
        return len(self.lines)

    def line_text(self, one_based_line: int) -> str:
        if not 1 <= one_based_line <= len(self.lines):
            raise IndexError(f"line {one_based_line} out of range")
        return self.lines.text_of(one_based_line - 1)

    def _require(self, state: StreamState, what: str) -> None:
        if self.state is state:
            return
        if state is StreamState.DONE:
            hint = "finish the character stream with end() before querying"
        elif self.state is StreamState.NEW:
            hint = "call start() first"
        else:
            hint = "call start() to index a new document"
        raise StreamStateError(f"{what} not allowed in state {self.state.value!r}", hint=hint)
