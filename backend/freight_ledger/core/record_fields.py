"""Record Fields — canonical field set and value coercion for freight records.

Invariants:
    - CSV_HEADER order is the on-disk column order and never changes
    - to_number() never raises: unparseable input becomes NaN
    - normalize_record() returns every business field (missing strings → None)

Design Decisions:
    - parseFloat-style coercion: leading numeric prefix wins ("12kg" → 12.0, "1_000" → 1.0),
      matching what dashboard clients already send
    - Python-only spellings ("inf", "nan", "1_000") are not numbers here
    - NaN is a legal stored value; rejection is left to callers that care
"""

import math
import re
from typing import Any

STRING_FIELDS = ("date", "vehicleNumber", "city", "destination")
NUMERIC_FIELDS = (
    "weightInTons", "ratePerTon", "amountSpend",
    "rateWeFixed", "extraSpend", "totalProfit",
)
RECORD_FIELDS = STRING_FIELDS + NUMERIC_FIELDS
CSV_HEADER = ("id",) + RECORD_FIELDS

_NUMERIC_PREFIX = re.compile(
    r"^[+-]?(Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)"
)


def to_number(value: Any) -> float:
    """Coerce a client-supplied value to float the way parseFloat would."""
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMERIC_PREFIX.match(str(value).strip())
    return float(match.group(0)) if match else math.nan


def format_number(value: float | None) -> str:
    """Render a number for CSV: whole numbers without '.0', NaN as 'NaN'."""
    if value is None or math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def normalize_record(payload: dict[str, Any]) -> dict[str, Any]:
    """Project a raw payload onto the record fields with numeric coercion."""
    record: dict[str, Any] = {}
    for name in STRING_FIELDS:
        value = payload.get(name)
        record[name] = None if value is None else str(value)
    for name in NUMERIC_FIELDS:
        record[name] = to_number(payload.get(name))
    return record


def is_missing(value: Any) -> bool:
    """True for absent or blank values (NaN counts as present)."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
