"""Record Routes — CRUD and summary endpoints over the configured record store.

Invariants:
    - Every route requires a valid bearer token (require_operator)
    - Routes never touch files or drivers directly: all IO goes through RecordStore
    - Filtering/sorting/summary use pure core functions on the store's merged list
    - Unknown ids surface as 404 via RecordNotFoundError (global handler)

Design Decisions:
    - Path id is a plain string: each backend parses its own id format
    - Without `sort`, records keep the backend's native order
"""

import logging

from fastapi import APIRouter, Depends, Query

from freight_ledger.api.auth_guard import require_operator
from freight_ledger.core.record_query import filter_records, sort_records
from freight_ledger.core.record_stats import compute_record_stats
from freight_ledger.core.repository_protocols import RecordStore
from freight_ledger.infrastructure.store_factory import get_store
from freight_ledger.schemas.record import (
    DeleteResponse, RecordOut, RecordPayload, RecordSummary,
)

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/records", tags=["records"],
    dependencies=[Depends(require_operator)],
)

_SORT_PATTERN = r"^(date|profit)-(asc|desc)$"
_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


async def _query_records(
    store: RecordStore,
    start_date: str | None,
    end_date: str | None,
    months: int | None,
) -> list[dict]:
    records = await store.list_records()
    if start_date or end_date or months is not None:
        records = filter_records(records, start_date, end_date, months)
    return records


@router.get("", response_model=list[RecordOut])
async def list_records(
    sort: str | None = Query(None, pattern=_SORT_PATTERN),
    start_date: str | None = Query(None, pattern=_DATE_PATTERN),
    end_date: str | None = Query(None, pattern=_DATE_PATTERN),
    months: int | None = Query(None, ge=1, le=600),
    store: RecordStore = Depends(get_store),
):
    """All records across the store, optionally windowed and sorted."""
    records = await _query_records(store, start_date, end_date, months)
    if sort:
        records = sort_records(records, sort)
    return records


@router.get("/summary", response_model=RecordSummary)
async def summarize_records(
    start_date: str | None = Query(None, pattern=_DATE_PATTERN),
    end_date: str | None = Query(None, pattern=_DATE_PATTERN),
    months: int | None = Query(None, ge=1, le=600),
    store: RecordStore = Depends(get_store),
):
    """Totals and month-by-month loads/profit for the dashboard cards."""
    records = await _query_records(store, start_date, end_date, months)
    return compute_record_stats(records)


@router.post("", response_model=RecordOut)
async def create_record(
    body: RecordPayload, store: RecordStore = Depends(get_store),
):
    return await store.create(body.model_dump())


@router.put("/{record_id}", response_model=RecordOut)
async def update_record(
    record_id: str,
    body: RecordPayload,
    store: RecordStore = Depends(get_store),
):
    """Full replace of one record."""
    return await store.update(record_id, body.model_dump())


@router.delete("/{record_id}", response_model=DeleteResponse)
async def delete_record(
    record_id: str, store: RecordStore = Depends(get_store),
):
    await store.delete(record_id)
    return DeleteResponse()
