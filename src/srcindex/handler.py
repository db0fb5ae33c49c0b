from __future__ import annotations

from typing import Protocol


class SourceHandler(Protocol):
    """Receives the excerpt of one query as a stream of events.

    Every non-empty query is bracketed by start() and end(). Line breaks of the
    document arrive as new_line(), never as raw characters. Highlight events
    carry the 1-based position the query was made with.
    """

    def start(self) -> None: ...

    def end(self) -> None: ...

    def characters(self, text: str) -> None: ...

    def new_line(self) -> None: ...

    def start_char_hilite(self, one_based_line: int, one_based_column: int) -> None: ...

    def end_char_hilite(self) -> None: ...

    def start_range(self, one_based_line: int, one_based_column: int) -> None: ...

    def end_range(self) -> None: ...


class TextRenderer:
    """Plain-text renderer: one string per query in `excerpts`.

    The highlighted character is wrapped in `char_marks`, a highlighted range
    in `range_marks`.
    """

    def __init__(
        self,
        *,
        char_marks: tuple[str, str] = ("[", "]"),
        range_marks: tuple[str, str] = ("«", "»"),
        newline: str = "\n",
    ) -> None:
        self.char_marks = char_marks
        self.range_marks = range_marks
        self.newline = newline
        self.excerpts: list[str] = []
        self._out: list[str] | None = None

    def _emit(self, s: str) -> None:
        if self._out is None:
            raise RuntimeError("renderer event outside start()/end()")
        self._out.append(s)

    def start(self) -> None:
        self._out = []

    def end(self) -> None:
        if self._out is not None:
            self.excerpts.append("".join(self._out))
        self._out = None

    def characters(self, text: str) -> None:
        self._emit(text)

    def new_line(self) -> None:
        self._emit(self.newline)

    def start_char_hilite(self, one_based_line: int, one_based_column: int) -> None:
        self._emit(self.char_marks[0])

    def end_char_hilite(self) -> None:
        self._emit(self.char_marks[1])

    def start_range(self, one_based_line: int, one_based_column: int) -> None:
        self._emit(self.range_marks[0])

    def end_range(self) -> None:
        self._emit(self.range_marks[1])


class EventRecorder:
    """Keeps every event as a tuple, e.g. ("characters", "ab") or ("new_line",)."""

    def __init__(self) -> None:
        self.events: list[tuple[object, ...]] = []

    def start(self) -> None:
        self.events.append(("start",))

    def end(self) -> None:
        self.events.append(("end",))

    def characters(self, text: str) -> None:
        self.events.append(("characters", text))

    def new_line(self) -> None:
        self.events.append(("new_line",))

    def start_char_hilite(self, one_based_line: int, one_based_column: int) -> None:
        self.events.append(("start_char_hilite", one_based_line, one_based_column))

    def end_char_hilite(self) -> None:
        self.events.append(("end_char_hilite",))

    def start_range(self, one_based_line: int, one_based_column: int) -> None:
        self.events.append(("start_range", one_based_line, one_based_column))

    def end_range(self) -> None:
        self.events.append(("end_range",))

    def text(self) -> str:
        """Emitted characters with line breaks as "\\n", highlights dropped."""
        out: list[str] = []
        for ev in self.events:
            if ev[0] == "characters":
                out.append(str(ev[1]))
            elif ev[0] == "new_line":
                out.append("\n")
        return "".join(out)
