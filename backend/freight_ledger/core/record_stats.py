"""Record Stats — pure dashboard summary totals computed from a record list.

Invariants:
    - No IO; input is the already-filtered record list
    - Missing or NaN values contribute 0 to every sum
    - monthly buckets are keyed "YYYY-MM" and returned oldest first

Design Decisions:
    - Pure function, not a store method: every backend reuses it unchanged
"""

import math


def _value(record: dict, key: str) -> float:
    value = record.get(key)
    if value is None or math.isnan(value):
        return 0.0
    return float(value)


def compute_record_stats(records: list[dict]) -> dict:
    """Totals plus per-month load counts and profit."""
    monthly: dict[str, dict] = {}
    for record in records:
        month = (record.get("date") or "")[:7]
        if not month:
            continue
        entry = monthly.setdefault(month, {"month": month, "loads": 0, "profit": 0.0})
        entry["loads"] += 1
        entry["profit"] += _value(record, "totalProfit")

    return {
        "totalProfit": sum(_value(r, "totalProfit") for r in records),
        "totalInvestment": sum(_value(r, "amountSpend") for r in records),
        "totalExtraSpend": sum(_value(r, "extraSpend") for r in records),
        "totalLoads": len(records),
        "monthly": [monthly[m] for m in sorted(monthly)],
    }
