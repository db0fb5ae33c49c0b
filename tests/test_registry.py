from __future__ import annotations

from srcindex import load_source
from srcindex.registry import PositionRegistry


def _registry() -> PositionRegistry:
    return PositionRegistry(load_source("abc\ndef\nghi").lines)


def test_nearest_preceding_defaults_to_origin() -> None:
    reg = _registry()
    assert reg.nearest_preceding(reg.table.position(2, 1)) == reg.table.position(0, 0)


def test_nearest_preceding_is_strictly_less() -> None:
    reg = _registry()
    t = reg.table
    assert reg.record(1, 1) == t.position(0, 0)
    reg.record(3, 1)
    reg.record(2, 3)
    assert reg.nearest_preceding(t.position(1, 2)) == t.position(0, 0)
    assert reg.nearest_preceding(t.position(1, 3)) == t.position(1, 2)
    assert reg.nearest_preceding(t.position(5, 0)) == t.position(2, 0)
    assert reg.nearest_preceding(t.position(0, 0)) == t.position(0, 0)


def test_seen_is_sorted_without_duplicates() -> None:
    reg = _registry()
    t = reg.table
    for line, column in [(2, 2), (1, 3), (2, 2), (1, 1)]:
        reg.record(line, column)
    assert reg.seen == (t.position(0, 0), t.position(0, 2), t.position(1, 1))


def test_range_ends_also_count_as_seen() -> None:
    reg = _registry()
    t = reg.table
    reg.add_range_end(t.position(1, 1))
    assert reg.range_ends == (t.position(1, 1),)
    assert reg.nearest_preceding(t.position(2, 0)) == t.position(1, 1)


def test_exact_errors_do_not_count_as_seen() -> None:
    reg = _registry()
    t = reg.table
    reg.add_exact_error(t.position(1, 1))
    reg.add_exact_error(t.position(0, 1))
    assert reg.exact_errors == (t.position(0, 1), t.position(1, 1))
    assert reg.seen == ()


def test_clear() -> None:
    reg = _registry()
    reg.record(1, 1)
    reg.add_exact_error(reg.table.position(0, 0))
    reg.add_range_end(reg.table.position(0, 1))
    reg.clear()
    assert reg.seen == reg.exact_errors == reg.range_ends == ()
