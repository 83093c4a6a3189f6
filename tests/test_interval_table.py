import pytest

from termwidth.interval_table import (
    Interval,
    TableError,
    UNICODE_VERSION,
    WIDE_TABLE,
    ZERO_WIDTH_TABLE,
    table_contains,
    validate_table,
    validate_tables,
)
from termwidth.wcwidth import bisearch

TABLES = [("zero-width", ZERO_WIDTH_TABLE), ("wide", WIDE_TABLE)]


@pytest.mark.parametrize("name,table", TABLES)
def test_table_is_sorted_and_disjoint(name, table):
    assert len(table) > 0
    for interval in table:
        assert interval.first <= interval.last
    for current, following in zip(table, table[1:]):
        assert current.last < following.first, (name, current, following)


def test_builtin_tables_validate():
    validate_tables()
    assert validate_table(ZERO_WIDTH_TABLE) == len(ZERO_WIDTH_TABLE)
    assert validate_table(WIDE_TABLE) == len(WIDE_TABLE)


def test_tables_are_immutable_tuples():
    assert isinstance(ZERO_WIDTH_TABLE, tuple)
    assert isinstance(WIDE_TABLE, tuple)
    assert all(isinstance(i, Interval) for i in ZERO_WIDTH_TABLE + WIDE_TABLE)


def test_table_snapshot():
    assert UNICODE_VERSION == "8.0.0"
    assert ZERO_WIDTH_TABLE[0] == Interval(0x00AD, 0x00AD)
    assert ZERO_WIDTH_TABLE[-1] == Interval(0xE0100, 0xE01EF)
    assert WIDE_TABLE[0] == Interval(0x1100, 0x115F)
    assert WIDE_TABLE[-1] == Interval(0x30000, 0x3FFFD)
    assert Interval(0x0300, 0x036F) in ZERO_WIDTH_TABLE
    assert Interval(0x200B, 0x200F) in ZERO_WIDTH_TABLE
    assert Interval(0x4E00, 0xA48C) in WIDE_TABLE
    assert Interval(0xAC00, 0xD7A3) in WIDE_TABLE


def test_validate_rejects_empty():
    with pytest.raises(TableError):
        validate_table(())


def test_validate_rejects_reversed_interval():
    with pytest.raises(TableError, match="first"):
        validate_table((Interval(5, 3),))


@pytest.mark.parametrize("table", [
    (Interval(1, 5), Interval(5, 9)),
    (Interval(1, 5), Interval(3, 9)),
    (Interval(10, 20), Interval(1, 5)),
])
def test_validate_rejects_unordered_or_overlapping(table):
    with pytest.raises(TableError):
        validate_table(table, "broken")


def test_validate_accepts_touching_intervals():
    assert validate_table((Interval(1, 4), Interval(5, 9))) == 2


def test_table_error_is_value_error():
    assert issubclass(TableError, ValueError)


@pytest.mark.parametrize("name,table", TABLES)
def test_bisearch_agrees_with_linear_scan_at_boundaries(name, table):
    for first, last in table:
        for ucs in (first - 1, first, (first + last) // 2, last, last + 1):
            assert bisearch(ucs, table) == table_contains(table, ucs), (name, hex(ucs))


def test_bisearch_fast_rejection():
    table = (Interval(0x100, 0x1FF), Interval(0x300, 0x3FF))
    assert not bisearch(0, table)
    assert not bisearch(0xFF, table)
    assert not bisearch(0x400, table)
    assert not bisearch(0x250, table)
    assert bisearch(0x100, table)
    assert bisearch(0x3FF, table)


def test_bisearch_single_interval():
    table = (Interval(0x41, 0x41),)
    assert bisearch(0x41, table)
    assert not bisearch(0x40, table)
    assert not bisearch(0x42, table)
