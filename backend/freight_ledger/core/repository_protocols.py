"""Boundary Protocols — contracts between the record core and storage backends.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Records cross the boundary as plain dicts keyed by the API field names
    - Every mutating method raises RecordNotFoundError instead of returning None

Design Decisions:
    - Protocol over ABC: structural subtyping, the three backends share no base class
    - Async methods: implementations do file, socket or database IO
"""

from typing import Protocol

from freight_ledger.core.domain_types import Operator, RecordId


class RecordStore(Protocol):
    """Contract for record persistence — implemented by CSV, Mongo and SQL stores."""
    backend: str

    async def list_records(self) -> list[dict]: ...
    async def create(self, record: dict) -> dict: ...
    async def update(self, record_id: RecordId, record: dict) -> dict: ...
    async def delete(self, record_id: RecordId) -> None: ...
    async def health_check(self) -> bool: ...
    async def close(self) -> None: ...


class OperatorRegistry(Protocol):
    """Contract for the trusted-operator key store used by login."""
    def get(self, username: str) -> Operator | None: ...

