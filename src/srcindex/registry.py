from __future__ import annotations

import bisect

from .lines import LineTable
from .spans import Position


def _insert(seq: list[Position], pos: Position) -> bool:
    i = bisect.bisect_left(seq, pos)
    if i < len(seq) and seq[i] == pos:
        return False
    seq.insert(i, pos)
    return True


class PositionRegistry:
    """Positions reported for one document.

    `seen` holds every checkpoint and range end in sorted order, which is what
    the predecessor lookup used to infer range starts runs on. Exact errors and
    range ends are kept for collaborators that overlay errors on the whole
    document.
    """

    def __init__(self, table: LineTable) -> None:
        self.table = table
        self._seen: list[Position] = []
        self._exact_errors: list[Position] = []
        self._range_ends: list[Position] = []

    def clear(self) -> None:
        self._seen.clear()
        self._exact_errors.clear()
        self._range_ends.clear()

    def record(self, one_based_line: int, one_based_column: int) -> Position:
        pos = self.table.position(one_based_line - 1, one_based_column - 1)
        _insert(self._seen, pos)
        return pos

    def nearest_preceding(self, pos: Position) -> Position:
        i = bisect.bisect_left(self._seen, pos)
        if i == 0:
            return self.table.position(0, 0)
        return self._seen[i - 1]

    def add_exact_error(self, pos: Position) -> None:
        _insert(self._exact_errors, pos)

    def add_range_end(self, pos: Position) -> None:
        _insert(self._seen, pos)
        _insert(self._range_ends, pos)

    @property
    def seen(self) -> tuple[Position, ...]:
        return tuple(self._seen)

    @property
    def exact_errors(self) -> tuple[Position, ...]:
        return tuple(self._exact_errors)

    @property
    def range_ends(self) -> tuple[Position, ...]:
        return tuple(self._range_ends)
