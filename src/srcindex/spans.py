from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lines import LineTable


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A character position inside one ingested document.

    line/column are 0-based; the query API takes 1-based values and converts.
    Ordering compares (line, column) only, so positions of different documents
    must not be mixed (use compare() to have that checked).

    The column may equal the length of its line: that slot stands for the
    line break after the last character.
    """

    line: int
    column: int
    owner: LineTable = field(compare=False, repr=False)

    def compare(self, other: Position) -> int:
        if other.owner is not self.owner:
            raise ValueError("cannot compare positions of different documents")
        a = (self.line, self.column)
        b = (other.line, other.column)
        return (a > b) - (a < b)

    def shifted(self, delta: int) -> Position:
        """Move `delta` slots, crossing line breaks, clamped to the document."""
        lines = self.owner
        count = len(lines)
        if count == 0:
            return lines.document_end()
        line = min(self.line, count - 1)
        column = self.column + delta
        while column < 0:
            if line == 0:
                return Position(0, 0, lines)
            line -= 1
            # +1 for the line break slot of the line we step back into
            column += lines.length_of(line) + 1
        while line < count - 1 and column > lines.length_of(line):
            column -= lines.length_of(line) + 1
            line += 1
        if column > lines.length_of(line):
            return lines.document_end()
        return Position(line, column, lines)

    def advanced(self) -> Position:
        """Position of the next character.

        Past the last character of a line this is the start of the next line;
        the line break in between is not a stop. On the last line it stops at
        the document end.
        """
        lines = self.owner
        if self.column + 1 < lines.length_of(self.line):
            return Position(self.line, self.column + 1, lines)
        if self.line + 1 < len(lines):
            return Position(self.line + 1, 0, lines)
        return lines.document_end()

    def one_based(self) -> tuple[int, int]:
        return self.line + 1, self.column + 1

    def format(self) -> str:
        line, column = self.one_based()
        return f"{line}:{column}"
