"""Store Factory — builds the configured RecordStore and exposes it as a dependency.

Invariants:
    - Exactly one store per process, created in the FastAPI lifespan (init_store)
    - get_store() raises if called before init_store (misconfigured app)
    - close_store() releases driver resources and clears the singleton

Design Decisions:
    - Singleton record_store initialized on startup: no import-time connections
    - Driver imports (motor) happen inside build_store so CSV deployments never need them
"""

import logging

from freight_ledger.config import Settings
from freight_ledger.core.domain_types import StorageBackend
from freight_ledger.core.repository_protocols import RecordStore

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> RecordStore:
    """Instantiate the backend named by settings.storage_backend."""
    backend = StorageBackend(settings.storage_backend)

    if backend is StorageBackend.CSV:
        from freight_ledger.infrastructure.csv_store import CsvRecordStore
        return CsvRecordStore(settings.csv_path)

    if backend is StorageBackend.MONGO:
        from motor.motor_asyncio import AsyncIOMotorClient
        from freight_ledger.infrastructure.mongo_store import MongoRecordStore
        client = AsyncIOMotorClient(settings.mongodb_uri)
        return MongoRecordStore(client[settings.mongodb_database], client=client)

    from freight_ledger.infrastructure.database import DatabaseSessionManager
    from freight_ledger.infrastructure.sql_store import SqlRecordStore
    store = SqlRecordStore(DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    ))
    if settings.database_url.startswith("sqlite"):
        await store.create_schema()
    return store


# Singleton (initialized on startup)
record_store: RecordStore | None = None


async def init_store(settings: Settings) -> RecordStore:
    global record_store
    record_store = await build_store(settings)
    logger.info(
        f"Record store ready ({record_store.backend})",
        extra={"backend": record_store.backend},
    )
    return record_store


async def close_store() -> None:
    global record_store
    if record_store is not None:
        await record_store.close()
        record_store = None


def get_store() -> RecordStore:
    """FastAPI dependency for the record store."""
    if record_store is None:
        raise RuntimeError("Record store not initialized")
    return record_store
