from __future__ import annotations

import pytest

from srcindex import load_source


def _table(text: str = "ab\ncd\nef"):
    return load_source(text).lines


def test_shift_backwards_crosses_line_breaks() -> None:
    t = _table()
    p = t.position(1, 0)
    assert p.shifted(-1) == t.position(0, 2)  # line break slot of line 0
    assert p.shifted(-3) == t.position(0, 0)
    assert p.shifted(-15) == t.position(0, 0)


def test_shift_forwards_crosses_line_breaks() -> None:
    t = _table()
    p = t.position(1, 0)
    assert p.shifted(2) == t.position(1, 2)
    assert p.shifted(3) == t.position(2, 0)
    assert p.shifted(6) == t.position(2, 2)  # clamped at the document end
    assert t.position(0, 0).shifted(0) == t.position(0, 0)


def test_shift_over_blank_line() -> None:
    t = _table("ab\n\ncd")
    assert t.position(2, 0).shifted(-1) == t.position(1, 0)
    assert t.position(2, 0).shifted(-2) == t.position(0, 2)
    assert t.position(0, 2).shifted(1) == t.position(1, 0)
    assert t.position(0, 2).shifted(2) == t.position(2, 0)


def test_shift_is_pure() -> None:
    t = _table()
    p = t.position(1, 1)
    p.shifted(-4)
    p.advanced()
    assert (p.line, p.column) == (1, 1)


def test_shift_on_empty_document() -> None:
    t = _table("")
    assert t.position(0, 0).shifted(5) == t.position(0, 0)
    assert t.position(0, 0).shifted(-5) == t.position(0, 0)


def test_advanced_skips_line_break_slot() -> None:
    t = _table()
    assert t.position(0, 0).advanced() == t.position(0, 1)
    assert t.position(0, 1).advanced() == t.position(1, 0)
    assert t.position(0, 2).advanced() == t.position(1, 0)
    assert t.position(2, 1).advanced() == t.position(2, 2)
    assert t.position(2, 2).advanced() == t.position(2, 2)


def test_ordering_and_compare() -> None:
    t = _table()
    a, b, c = t.position(0, 5), t.position(1, 0), t.position(1, 1)
    assert sorted([c, a, b]) == [a, b, c]
    assert a < b < c
    assert b.compare(c) == -1
    assert c.compare(b) == 1
    assert b.compare(t.position(1, 0)) == 0
    assert hash(b) == hash(t.position(1, 0))


def test_compare_across_documents_is_rejected() -> None:
    with pytest.raises(ValueError):
        _table().position(0, 0).compare(_table().position(0, 0))


def test_one_based_format() -> None:
    p = _table().position(1, 0)
    assert p.one_based() == (2, 1)
    assert p.format() == "2:1"


def test_clamping_lands_on_document_end() -> None:
    t = _table()
    assert t.document_end() == t.position(2, 2)
    assert t.position(0, 1).shifted(100) == t.document_end()
    assert t.position(2, 1).advanced() == t.document_end()
    assert _table("").position(0, 0).shifted(3) == _table("").document_end()
