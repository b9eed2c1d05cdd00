"""Tests for compute_record_stats — dashboard totals, no IO."""

import math

from freight_ledger.core.record_stats import compute_record_stats


def test_empty_list_returns_zero_totals():
    stats = compute_record_stats([])
    assert stats == {
        "totalProfit": 0.0,
        "totalInvestment": 0.0,
        "totalExtraSpend": 0.0,
        "totalLoads": 0,
        "monthly": [],
    }


def test_totals_skip_missing_and_nan():
    records = [
        {"date": "2025-03-10", "totalProfit": 500.0, "amountSpend": 900.0, "extraSpend": 50.0},
        {"date": "2025-03-12", "totalProfit": math.nan, "amountSpend": 100.0},
        {"date": "2025-04-01", "totalProfit": 250.0, "amountSpend": None, "extraSpend": 10.0},
    ]
    stats = compute_record_stats(records)
    assert stats["totalProfit"] == 750.0
    assert stats["totalInvestment"] == 1000.0
    assert stats["totalExtraSpend"] == 60.0
    assert stats["totalLoads"] == 3


def test_monthly_breakdown_sorted_oldest_first():
    records = [
        {"date": "2025-04-01", "totalProfit": 10.0},
        {"date": "2025-03-10", "totalProfit": 5.0},
        {"date": "2025-03-20", "totalProfit": 7.0},
    ]
    monthly = compute_record_stats(records)["monthly"]
    assert monthly == [
        {"month": "2025-03", "loads": 2, "profit": 12.0},
        {"month": "2025-04", "loads": 1, "profit": 10.0},
    ]
