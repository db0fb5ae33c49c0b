from __future__ import annotations

import re

from .lines import Line, LineTable


_TERMINATOR_RE = re.compile(r"[\r\n]")


class LineSplitter:
    """Streaming line splitter that fills a LineTable chunk by chunk.

    CR, LF and CRLF each end exactly one line, also when the CRLF pair is
    split across two feed() calls. Terminators are not stored.
    """

    def __init__(self, table: LineTable) -> None:
        self.table = table
        self._current: Line | None = None
        self._prev_was_cr = False

    def begin(self) -> None:
        self.table.clear()
        self._current = self.table.new_line()
        self._prev_was_cr = False

    def feed(self, chunk: str) -> None:
        cur = self._current
        if cur is None:
            raise RuntimeError("feed() called before begin()")
        s = 0
        for m in _TERMINATOR_RE.finditer(chunk):
            i = m.start()
            if chunk[i] == "\r":
                if s < i:
                    cur.characters(chunk[s:i])
                cur = self.table.new_line()
                self._prev_was_cr = True
            else:
                # LF right after CR (maybe at the end of the previous chunk)
                # completes the CRLF terminator already counted.
                if not (self._prev_was_cr and i == s):
                    if s < i:
                        cur.characters(chunk[s:i])
                    cur = self.table.new_line()
                self._prev_was_cr = False
            s = i + 1
        if s < len(chunk):
            cur.characters(chunk[s:])
            self._prev_was_cr = False
        self._current = cur

    def finish(self) -> int:
        if self._current is None:
            raise RuntimeError("finish() called before begin()")
        # A trailing terminator must not leave a phantom empty line behind.
        self.table.drop_empty_last()
        self._current = None
        self._prev_was_cr = False
        return len(self.table)
