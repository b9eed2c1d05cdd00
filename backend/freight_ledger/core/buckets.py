"""Month Buckets — naming rules for the collection-per-month Mongo layout.

Invariants:
    - Bucket name is records_<YYYY>_<MM>, month zero-padded
    - Only names matching BUCKET_PATTERN are treated as record buckets
    - Pure functions, no driver imports
"""

import re
from datetime import date

from freight_ledger.core.errors import RecordValidationError

BUCKET_PREFIX = "records"
BUCKET_PATTERN = re.compile(r"^records_\d{4}_\d{2}$")


def parse_record_date(value: str | None) -> date:
    """Parse the calendar date of a record (time part, if any, is ignored)."""
    if not value:
        raise RecordValidationError("Record date is required", "date")
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise RecordValidationError(f"Invalid record date: {value}", "date")


def bucket_for_date(value: str | None) -> str:
    """Bucket (collection) name holding records dated `value`."""
    day = parse_record_date(value)
    return f"{BUCKET_PREFIX}_{day.year:04d}_{day.month:02d}"


def is_bucket(name: str) -> bool:
    return BUCKET_PATTERN.match(name) is not None


def bucket_names(names: list[str]) -> list[str]:
    """Filter collection names down to record buckets, oldest month first."""
    return sorted(n for n in names if is_bucket(n))
