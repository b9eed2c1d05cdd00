"""CSV Record Store — flat-file persistence with integer auto-increment ids.

Invariants:
    - Every mutation is a whole-file read-modify-write under one asyncio.Lock
    - Rewrites go to a sibling temp file, then os.replace() (readers never see half a file)
    - New id = max(existing ids) + 1, or 1 for an empty file
    - A missing file reads as an empty record list
    - A row whose id is not an integer is kept on rewrite but never matched or
      counted towards the next id
    - OSError / malformed rows → StorageError (generic message, detail in logs)

Design Decisions:
    - Blocking file IO runs in asyncio.to_thread: event loop stays responsive
    - Lock is per store instance: the app holds exactly one store per process
"""

import asyncio
import csv
import logging
import os
import re
import tempfile
from pathlib import Path

from freight_ledger.core.domain_types import RecordId
from freight_ledger.core.errors import RecordNotFoundError, StorageError
from freight_ledger.core.record_fields import (
    CSV_HEADER, NUMERIC_FIELDS, STRING_FIELDS, format_number, normalize_record,
    to_number,
)

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES = {
    "list": "Failed to read records",
    "create": "Failed to add record",
    "update": "Failed to update record",
    "delete": "Failed to delete record",
}


_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def _parse_id(record_id: RecordId) -> int | None:
    """Leading integer of an id, like parseInt; None when there is none."""
    if isinstance(record_id, int):
        return record_id
    match = _LEADING_INT.match(str(record_id or ""))
    return int(match.group(1)) if match else None


def _row_to_record(row: dict) -> dict:
    record = {"id": _parse_id(row.get("id"))}
    for name in STRING_FIELDS:
        record[name] = row.get(name) or ""
    for name in NUMERIC_FIELDS:
        record[name] = to_number(row.get(name))
    return record


def _record_to_row(record: dict) -> dict:
    row = {"id": "" if record["id"] is None else str(record["id"])}
    for name in STRING_FIELDS:
        row[name] = record.get(name) or ""
    for name in NUMERIC_FIELDS:
        row[name] = format_number(record.get(name))
    return row


class CsvRecordStore:
    """Records stored as rows of a single CSV file."""

    backend = "csv"

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    # ─── File IO (runs in worker thread) ─────────────────────────

    def _read_file(self) -> list[dict]:
        if not self.path.exists():
            return []
        with self.path.open("r", newline="", encoding="utf-8") as f:
            records = [_row_to_record(row) for row in csv.DictReader(f)]
        for index, record in enumerate(records, start=1):
            if record["id"] is None:
                logger.warning(
                    f"CSV row {index} has no usable id; kept but not addressable",
                    extra={"backend": self.backend},
                )
        return records

    def _write_file(self, records: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=CSV_HEADER)
                writer.writeheader()
                writer.writerows(_record_to_row(r) for r in records)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def _read(self, operation: str) -> list[dict]:
        try:
            return await asyncio.to_thread(self._read_file)
        except (OSError, csv.Error, KeyError, TypeError, ValueError) as e:
            logger.error(
                f"CSV read failed: {e}",
                extra={"backend": self.backend, "operation": operation},
            )
            raise StorageError(_FAILURE_MESSAGES[operation], operation)

    async def _write(self, records: list[dict], operation: str) -> None:
        try:
            await asyncio.to_thread(self._write_file, records)
        except (OSError, csv.Error) as e:
            logger.error(
                f"CSV write failed: {e}",
                extra={"backend": self.backend, "operation": operation},
            )
            raise StorageError(_FAILURE_MESSAGES[operation], operation)

    # ─── RecordStore ─────────────────────────────────────────────

    async def list_records(self) -> list[dict]:
        async with self._lock:
            return await self._read("list")

    async def create(self, record: dict) -> dict:
        async with self._lock:
            records = await self._read("create")
            new_id = max(
                (r["id"] for r in records if r["id"] is not None), default=0,
            ) + 1
            new_record = {"id": new_id, **normalize_record(record)}
            records.append(new_record)
            await self._write(records, "create")
        logger.info("Record created", extra={"record_id": new_id, "backend": self.backend})
        return _record_to_output(new_record)

    async def update(self, record_id: RecordId, record: dict) -> dict:
        target = _parse_id(record_id)
        if target is None:
            raise RecordNotFoundError(record_id)
        async with self._lock:
            records = await self._read("update")
            index = next(
                (i for i, r in enumerate(records) if r["id"] == target), None,
            )
            if index is None:
                raise RecordNotFoundError(record_id)
            records[index] = {"id": target, **normalize_record(record)}
            await self._write(records, "update")
        logger.info("Record updated", extra={"record_id": target, "backend": self.backend})
        return _record_to_output(records[index])

    async def delete(self, record_id: RecordId) -> None:
        target = _parse_id(record_id)
        if target is None:
            raise RecordNotFoundError(record_id)
        async with self._lock:
            records = await self._read("delete")
            remaining = [r for r in records if r["id"] != target]
            if len(remaining) == len(records):
                raise RecordNotFoundError(record_id)
            await self._write(remaining, "delete")
        logger.info("Record deleted", extra={"record_id": target, "backend": self.backend})

    async def health_check(self) -> bool:
        directory = self.path.parent
        return directory.is_dir() and os.access(directory, os.W_OK)

    async def close(self) -> None:
        return None


def _record_to_output(record: dict) -> dict:
    """Stored record as returned to callers (missing strings as empty)."""
    return {
        name: ("" if value is None and name in STRING_FIELDS else value)
        for name, value in record.items()
    }

