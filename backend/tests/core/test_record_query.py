"""Tests for record filtering and sorting — pure functions over merged lists."""

import math
from datetime import date

import pytest

from freight_ledger.core.errors import RecordValidationError
from freight_ledger.core.record_query import (
    filter_records, months_before, parse_sort, sort_records,
)


def _records():
    return [
        {"id": 1, "date": "2025-01-15", "totalProfit": 100.0},
        {"id": 2, "date": "2025-03-01", "totalProfit": math.nan},
        {"id": 3, "date": "2024-11-30", "totalProfit": 300.0},
        {"id": 4, "date": "2025-02-20", "totalProfit": -50.0},
    ]


def test_parse_sort_maps_profit_to_total_profit():
    assert parse_sort("profit-asc") == ("totalProfit", False)
    assert parse_sort("date-desc") == ("date", True)


@pytest.mark.parametrize("sort", ["weight-asc", "date", "date-up", ""])
def test_parse_sort_rejects_unknown(sort):
    with pytest.raises(RecordValidationError):
        parse_sort(sort)


def test_sort_by_date_both_directions():
    assert [r["id"] for r in sort_records(_records(), "date-desc")] == [2, 4, 1, 3]
    assert [r["id"] for r in sort_records(_records(), "date-asc")] == [3, 1, 4, 2]


def test_sort_by_profit_puts_nan_last():
    assert [r["id"] for r in sort_records(_records(), "profit-desc")] == [3, 1, 4, 2]
    assert [r["id"] for r in sort_records(_records(), "profit-asc")] == [4, 1, 3, 2]


def test_sort_does_not_mutate_input():
    records = _records()
    sort_records(records, "date-asc")
    assert [r["id"] for r in records] == [1, 2, 3, 4]


def test_filter_inclusive_bounds():
    result = filter_records(_records(), start_date="2025-01-15", end_date="2025-02-20")
    assert [r["id"] for r in result] == [1, 4]


def test_filter_months_window_ends_today():
    today = date(2025, 3, 1)
    result = filter_records(_records(), months=2, today=today)
    assert [r["id"] for r in result] == [1, 2, 4]


def test_months_before_clamps_day():
    assert months_before(date(2025, 3, 31), 1) == date(2025, 2, 28)
    assert months_before(date(2025, 1, 10), 2) == date(2024, 11, 10)
