from __future__ import annotations

import logging

from .config import DEFAULT_WINDOW, ContextWindow
from .handler import SourceHandler
from .lines import LineTable
from .registry import PositionRegistry
from .spans import Position


logger = logging.getLogger(__name__)


class Extractor:
    """Builds error excerpts from a finished LineTable.

    Queries take 1-based positions. A query about text that was never ingested
    produces no events at all.
    """

    def __init__(
        self,
        table: LineTable,
        registry: PositionRegistry,
        *,
        window: ContextWindow = DEFAULT_WINDOW,
    ) -> None:
        self.table = table
        self.registry = registry
        self.window = window

    def emit_content(self, start: Position, until: Position, handler: SourceHandler) -> None:
        """Emit the text in [start, until).

        Line breaks go out as new_line(). A break is always emitted together
        with the last character of its line, there is no position for it alone.
        """
        if start >= until:
            return
        table = self.table
        line = table[start.line]
        if start.line == until.line:
            handler.characters(line.slice(start.column, until.column))
            return
        # first line
        if start.column < line.length:
            handler.characters(line.slice(start.column, line.length))
        handler.new_line()
        # lines in between
        for i in range(start.line + 1, until.line):
            handler.characters(table[i].text())
            handler.new_line()
        # last line
        if until.column > 0:
            handler.characters(table[until.line].slice(0, until.column))

    def emit_character(self, pos: Position, handler: SourceHandler) -> None:
        handler.characters(self.table[pos.line].slice(pos.column, pos.column + 1))

    def exact_error(self, one_based_line: int, one_based_column: int, handler: SourceHandler) -> None:
        location = self.table.position(one_based_line - 1, one_based_column - 1)
        self.registry.add_exact_error(location)
        if not self.table.contains_char(location):
            logger.debug("exact error at %s is outside the known source", location.format())
            return
        start = location.shifted(-self.window.point_before)
        end = location.shifted(self.window.point_after)
        try:
            handler.start()
            self.emit_content(start, location, handler)
            handler.start_char_hilite(one_based_line, one_based_column)
            self.emit_character(location, handler)
            handler.end_char_hilite()
            if location.column + 1 == self.table.length_of(location.line):
                handler.new_line()
            self.emit_content(location.advanced(), end, handler)
        finally:
            handler.end()

    def range_end_error(self, one_based_line: int, one_based_column: int, handler: SourceHandler) -> None:
        location = self.table.position(one_based_line - 1, one_based_column - 1)
        # The start is looked up before the end itself joins the seen positions.
        start_range = self.registry.nearest_preceding(location)
        self.registry.add_range_end(location)
        if not 0 <= location.line < len(self.table) or location.column < 0:
            logger.debug("range end at %s is outside the known source", location.format())
            return
        location = self.table.clamp(location)
        start_range = self.table.clamp(start_range)
        end_range = location.advanced()
        start = start_range.shifted(-self.window.range_before)
        end = end_range.shifted(self.window.range_after)
        try:
            handler.start()
            self.emit_content(start, start_range, handler)
            handler.start_range(one_based_line, one_based_column)
            self.emit_content(start_range, end_range, handler)
            handler.end_range()
            self.emit_content(end_range, end, handler)
        finally:
            handler.end()

    def line_error(self, one_based_line: int, handler: SourceHandler) -> None:
        if not 1 <= one_based_line <= len(self.table):
            logger.debug("line %d is outside the known source", one_based_line)
            return
        line = self.table[one_based_line - 1]
        try:
            handler.start()
            handler.characters(line.text())
        finally:
            handler.end()
