"""SQL Record Store — single-table persistence keyed by database identity.

Invariants:
    - One row per record; id assigned by the database and never reused for moves
    - update() mutates the row in place whatever the new date (no cross-month orphans)
    - list_records() is ordered by date descending, then id descending
    - Month grouping is a query (date prefix match), not a physical partition
    - NaN numbers are stored as NULL and read back as None

Design Decisions:
    - Built on DatabaseSessionManager: rollback and error mapping live in one place
    - create_schema() for dev/test; production schema comes from alembic migrations
"""

import logging
import math

from sqlalchemy import select

from freight_ledger.core.domain_types import RecordId
from freight_ledger.core.errors import RecordNotFoundError
from freight_ledger.core.record_fields import normalize_record
from freight_ledger.db.base import Base
from freight_ledger.infrastructure.database import DatabaseSessionManager
from freight_ledger.models.record import Record

logger = logging.getLogger(__name__)


def _sql_values(record: dict) -> dict:
    fields = normalize_record(record)
    return {
        name: (None if isinstance(value, float) and math.isnan(value) else value)
        for name, value in fields.items()
    }


def _parse_id(record_id: RecordId) -> int | None:
    try:
        return int(record_id)
    except (TypeError, ValueError):
        return None


class SqlRecordStore:
    """Records stored in one relational table."""

    backend = "sql"

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager

    async def create_schema(self) -> None:
        async with self.manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def _get_or_404(self, db, record_id: RecordId) -> Record:
        target = _parse_id(record_id)
        row = await db.get(Record, target) if target is not None else None
        if row is None:
            raise RecordNotFoundError(record_id)
        return row

    # ─── RecordStore ─────────────────────────────────────────────

    async def list_records(self) -> list[dict]:
        async with self.manager.session() as db:
            result = await db.execute(
                select(Record).order_by(Record.date.desc(), Record.id.desc()),
            )
            return [row.to_dict() for row in result.scalars().all()]

    async def list_month(self, year: int, month: int) -> list[dict]:
        """Records dated in one calendar month, newest first."""
        prefix = f"{year:04d}-{month:02d}"
        async with self.manager.session() as db:
            result = await db.execute(
                select(Record)
                .where(Record.date.like(f"{prefix}%"))
                .order_by(Record.date.desc(), Record.id.desc()),
            )
            return [row.to_dict() for row in result.scalars().all()]

    async def create(self, record: dict) -> dict:
        async with self.manager.session() as db:
            row = Record()
            row.apply(_sql_values(record))
            db.add(row)
            await db.commit()
            await db.refresh(row)
            logger.info("Record created", extra={"record_id": row.id, "backend": self.backend})
            return row.to_dict()

    async def update(self, record_id: RecordId, record: dict) -> dict:
        async with self.manager.session() as db:
            row = await self._get_or_404(db, record_id)
            row.apply(_sql_values(record))
            await db.commit()
            await db.refresh(row)
            logger.info("Record updated", extra={"record_id": row.id, "backend": self.backend})
            return row.to_dict()

    async def delete(self, record_id: RecordId) -> None:
        async with self.manager.session() as db:
            row = await self._get_or_404(db, record_id)
            await db.delete(row)
            await db.commit()
            logger.info("Record deleted", extra={"record_id": row.id, "backend": self.backend})

    async def health_check(self) -> bool:
        return await self.manager.health_check()

    async def close(self) -> None:
        await self.manager.dispose()
