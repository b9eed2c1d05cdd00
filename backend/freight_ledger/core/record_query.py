"""Record Query — pure filtering and sorting over a merged record list.

Invariants:
    - Inputs are never mutated; every function returns a new list
    - Date bounds are inclusive and compared as ISO strings (YYYY-MM-DD)
    - Records with missing/NaN profit sort last in both directions
"""

import calendar
import math
from datetime import date

from freight_ledger.core.errors import RecordValidationError

SORT_FIELDS = {"date": "date", "profit": "totalProfit"}
SORT_DIRECTIONS = ("asc", "desc")


def parse_sort(sort: str) -> tuple[str, bool]:
    """Split 'field-direction' into (record key, descending)."""
    field, _, direction = sort.partition("-")
    if field not in SORT_FIELDS or direction not in SORT_DIRECTIONS:
        raise RecordValidationError(f"Unsupported sort order: {sort}", "sort")
    return SORT_FIELDS[field], direction == "desc"


def months_before(today: date, months: int) -> date:
    """Same day-of-month `months` earlier, clamped to the month's last day."""
    index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(index, 12)
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(today.day, last_day))


def filter_records(
    records: list[dict],
    start_date: str | None = None,
    end_date: str | None = None,
    months: int | None = None,
    today: date | None = None,
) -> list[dict]:
    """Keep records dated inside the requested window."""
    if months is not None:
        today = today or date.today()
        window_start = months_before(today, months).isoformat()
        start_date = max(start_date, window_start) if start_date else window_start
        end_date = min(end_date, today.isoformat()) if end_date else today.isoformat()

    result = []
    for record in records:
        day = record.get("date") or ""
        if start_date and day < start_date:
            continue
        if end_date and day[:10] > end_date:
            continue
        result.append(record)
    return result


def _is_blank_number(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def sort_records(records: list[dict], sort: str) -> list[dict]:
    """Sort by 'date-asc', 'date-desc', 'profit-asc' or 'profit-desc'."""
    key, descending = parse_sort(sort)
    if key == "date":
        return sorted(records, key=lambda r: r.get("date") or "", reverse=descending)

    present = [r for r in records if not _is_blank_number(r.get(key))]
    blank = [r for r in records if _is_blank_number(r.get(key))]
    return sorted(present, key=lambda r: r[key], reverse=descending) + blank
