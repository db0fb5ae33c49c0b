from __future__ import annotations

from dataclasses import dataclass

from .spans import Position


class CharBuffer:
    """Append-only character arena shared by all lines of one document.

    Appends never move existing content, so every (offset, length) view handed
    out earlier stays valid. Pending appends are joined on the first read.
    """

    __slots__ = ("_text", "_pending", "_size")

    def __init__(self) -> None:
        self._text = ""
        self._pending: list[str] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def append(self, chars: str) -> None:
        if chars:
            self._pending.append(chars)
            self._size += len(chars)

    def read(self, offset: int, length: int) -> str:
        if self._pending:
            self._text += "".join(self._pending)
            self._pending.clear()
        return self._text[offset : offset + length]


@dataclass(slots=True)
class Line:
    """One logical line: a view into the shared buffer, terminator excluded."""

    buffer: CharBuffer
    offset: int
    length: int = 0

    def characters(self, chars: str) -> None:
        # Only the current (last) line is ever appended to, which keeps the
        # views of all lines contiguous.
        if self.offset + self.length != len(self.buffer):
            raise RuntimeError("only the last line of a buffer can grow")
        self.buffer.append(chars)
        self.length += len(chars)

    def text(self) -> str:
        return self.buffer.read(self.offset, self.length)

    def slice(self, start: int, stop: int) -> str:
        start = max(start, 0)
        stop = min(stop, self.length)
        if start >= stop:
            return ""
        return self.buffer.read(self.offset + start, stop - start)


class LineTable:
    """Ordered logical lines of one document, in document order."""

    def __init__(self) -> None:
        self._lines: list[Line] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    def __iter__(self):
        return iter(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def new_line(self) -> Line:
        if self._lines:
            prev = self._lines[-1]
            buffer = prev.buffer
            offset = prev.offset + prev.length
        else:
            buffer = CharBuffer()
            offset = 0
        line = Line(buffer=buffer, offset=offset)
        self._lines.append(line)
        return line

    def drop_empty_last(self) -> bool:
        if self._lines and self._lines[-1].length == 0:
            self._lines.pop()
            return True
        return False

    def length_of(self, index: int) -> int:
        return self._lines[index].length

    def text_of(self, index: int) -> str:
        return self._lines[index].text()

    def position(self, line: int, column: int) -> Position:
        return Position(line, column, self)

    def contains_char(self, pos: Position) -> bool:
        """True when `pos` points at a character (not a line break) of a known line."""
        if pos.line < 0 or pos.column < 0 or pos.line >= len(self._lines):
            return False
        return pos.column < self._lines[pos.line].length

    def clamp(self, pos: Position) -> Position:
        """Pull `pos` onto the document; a column past the end of its line
        lands on the line break slot."""
        if not self._lines or pos.line < 0:
            return Position(0, 0, self)
        line = min(pos.line, len(self._lines) - 1)
        column = min(max(pos.column, 0), self._lines[line].length)
        if (line, column) == (pos.line, pos.column):
            return pos
        return Position(line, column, self)

    def document_end(self) -> Position:
        if not self._lines:
            return Position(0, 0, self)
        last = len(self._lines) - 1
        return Position(last, self._lines[last].length, self)
