"""Mongo Record Store — records sharded into one collection per calendar month.

Invariants:
    - A record lives in bucket records_<YYYY>_<MM> derived from its date at write time
    - list_records() fans out over every bucket and returns the merge sorted by date desc
    - update() targets the bucket of the NEW date; an id found only in another bucket
      is re-inserted there under a new ObjectId and the old copy stays put
    - delete() walks buckets oldest-first and stops at the first successful delete
    - Invalid ObjectId strings are "not found", never a driver error
    - PyMongoError → StorageError (generic message, detail in logs)

Design Decisions:
    - Store receives a motor database handle: tests inject mongomock-motor
    - No cross-collection transaction: each bucket call is independent
    - Month-crossing update keeps the legacy copy-and-orphan behaviour so data written
      by earlier deployments reads back identically; use the SQL backend to avoid it
"""

import logging
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from freight_ledger.core.buckets import bucket_for_date, bucket_names
from freight_ledger.core.domain_types import RecordId
from freight_ledger.core.errors import (
    RecordNotFoundError, RecordValidationError, StorageError,
)
from freight_ledger.core.record_fields import is_missing, normalize_record

logger = logging.getLogger(__name__)

# Fields kept in Mongo documents; city and extraSpend are not part of the schema.
MONGO_FIELDS = (
    "date", "vehicleNumber", "destination", "weightInTons",
    "ratePerTon", "amountSpend", "rateWeFixed", "totalProfit",
)


def _parse_object_id(record_id: RecordId) -> ObjectId | None:
    try:
        return ObjectId(str(record_id))
    except (InvalidId, TypeError):
        return None


def _to_document(record: dict) -> dict:
    """Validate required fields and project onto the Mongo schema."""
    normalized = normalize_record(record)
    for name in MONGO_FIELDS:
        if is_missing(record.get(name)):
            raise RecordValidationError(f"Path `{name}` is required.", name)
    return {name: normalized[name] for name in MONGO_FIELDS}


def _to_record(document: dict) -> dict:
    record = {"id": str(document["_id"])}
    for name in MONGO_FIELDS:
        record[name] = document.get(name)
    record["createdAt"] = document.get("createdAt")
    record["updatedAt"] = document.get("updatedAt")
    return record


class MongoRecordStore:
    """Records spread across month-scoped Mongo collections."""

    backend = "mongo"

    def __init__(self, database, client=None):
        self.database = database
        self._client = client

    async def _buckets(self) -> list[str]:
        return bucket_names(await self.database.list_collection_names())

    async def _find_bucket_of(self, oid: ObjectId) -> str | None:
        for name in await self._buckets():
            if await self.database[name].find_one({"_id": oid}, {"_id": 1}):
                return name
        return None

    # ─── RecordStore ─────────────────────────────────────────────

    async def list_records(self) -> list[dict]:
        try:
            records = []
            for name in await self._buckets():
                async for document in self.database[name].find({}):
                    records.append(_to_record(document))
        except PyMongoError as e:
            logger.error(f"Mongo list failed: {e}", extra={"backend": self.backend})
            raise StorageError("Failed to read records", "list")
        records.sort(key=lambda r: r.get("date") or "", reverse=True)
        return records

    async def create(self, record: dict) -> dict:
        document = _to_document(record)
        bucket = bucket_for_date(document["date"])
        now = datetime.now(timezone.utc)
        document.update(createdAt=now, updatedAt=now)
        try:
            result = await self.database[bucket].insert_one(document)
        except PyMongoError as e:
            logger.error(f"Mongo insert failed: {e}", extra={"bucket": bucket})
            raise StorageError("Failed to add record", "create")
        document["_id"] = result.inserted_id
        logger.info(
            "Record created",
            extra={"record_id": str(result.inserted_id), "bucket": bucket},
        )
        return _to_record(document)

    async def update(self, record_id: RecordId, record: dict) -> dict:
        oid = _parse_object_id(record_id)
        if oid is None:
            raise RecordNotFoundError(record_id)
        document = _to_document(record)
        bucket = bucket_for_date(document["date"])
        now = datetime.now(timezone.utc)
        try:
            collection = self.database[bucket]
            result = await collection.update_one(
                {"_id": oid}, {"$set": {**document, "updatedAt": now}},
            )
            if result.matched_count:
                stored = await collection.find_one({"_id": oid})
                logger.info(
                    "Record updated", extra={"record_id": str(oid), "bucket": bucket},
                )
                return _to_record(stored)

            previous = await self._find_bucket_of(oid)
            if previous is None:
                raise RecordNotFoundError(record_id)

            document.update(createdAt=now, updatedAt=now)
            inserted = await collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Mongo update failed: {e}", extra={"bucket": bucket})
            raise StorageError("Failed to update record", "update")

        document["_id"] = inserted.inserted_id
        logger.warning(
            f"Record {oid} moved from {previous} by copy; original left in place",
            extra={"record_id": str(inserted.inserted_id), "bucket": bucket},
        )
        return _to_record(document)

    async def delete(self, record_id: RecordId) -> None:
        oid = _parse_object_id(record_id)
        if oid is None:
            raise RecordNotFoundError(record_id)
        try:
            for name in await self._buckets():
                result = await self.database[name].delete_one({"_id": oid})
                if result.deleted_count:
                    logger.info(
                        "Record deleted", extra={"record_id": str(oid), "bucket": name},
                    )
                    return
        except PyMongoError as e:
            logger.error(f"Mongo delete failed: {e}", extra={"backend": self.backend})
            raise StorageError("Failed to delete record", "delete")
        raise RecordNotFoundError(record_id)

    async def health_check(self) -> bool:
        try:
            await self.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Mongo health check failed: {e}")
            return False

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
