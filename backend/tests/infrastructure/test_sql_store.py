"""SQL Record Store — single table keyed by identity, month grouping by query.

Invariants:
    - update() keeps the id even when the date moves to another month
    - update()/delete() of an unknown id raise RecordNotFoundError
    - NaN numbers come back as None
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from freight_ledger.core.errors import RecordNotFoundError
from freight_ledger.infrastructure.database import DatabaseSessionManager
from freight_ledger.infrastructure.sql_store import SqlRecordStore


@pytest.fixture
async def store(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    store = SqlRecordStore(DatabaseSessionManager.from_engine(engine))
    await store.create_schema()
    yield store
    await store.close()


async def test_create_assigns_identity(store, sample_record):
    first = await store.create(sample_record)
    second = await store.create(sample_record)
    assert second["id"] > first["id"]
    assert first["vehicleNumber"] == "TN01"
    assert first["extraSpend"] == 50.0
    assert first["createdAt"] is not None
    assert first["updatedAt"] is not None


async def test_list_orders_newest_date_first(store, sample_record):
    await store.create({**sample_record, "date": "2025-01-01"})
    await store.create({**sample_record, "date": "2025-06-01"})
    await store.create({**sample_record, "date": "2025-03-01"})
    assert [r["date"] for r in await store.list_records()] == [
        "2025-06-01", "2025-03-01", "2025-01-01",
    ]


async def test_update_across_months_moves_record_in_place(store, sample_record):
    created = await store.create(sample_record)
    moved = await store.update(created["id"], {**sample_record, "date": "2025-04-02"})
    assert moved["id"] == created["id"]
    records = await store.list_records()
    assert len(records) == 1
    assert records[0]["date"] == "2025-04-02"


async def test_list_month_groups_by_query(store, sample_record):
    await store.create({**sample_record, "date": "2025-03-01"})
    await store.create({**sample_record, "date": "2025-03-31"})
    await store.create({**sample_record, "date": "2025-04-01"})
    march = await store.list_month(2025, 3)
    assert [r["date"] for r in march] == ["2025-03-31", "2025-03-01"]


async def test_nan_is_read_back_as_none(store, sample_record):
    created = await store.create({**sample_record, "totalProfit": "n/a"})
    assert created["totalProfit"] is None


async def test_unknown_ids_are_not_found(store, sample_record):
    await store.create(sample_record)
    with pytest.raises(RecordNotFoundError):
        await store.update(999, sample_record)
    with pytest.raises(RecordNotFoundError):
        await store.delete("abc")
    assert len(await store.list_records()) == 1


async def test_delete_removes_row(store, sample_record):
    created = await store.create(sample_record)
    await store.delete(str(created["id"]))
    assert await store.list_records() == []


async def test_health_check_pings_database(store):
    assert await store.health_check()
