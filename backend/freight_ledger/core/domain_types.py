"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId is int for CSV/SQL stores and an ObjectId hex string for Mongo
    - All valid backend names encoded as an Enum — no raw string matching
    - Operator is immutable; password_hash is a bcrypt hash, never plaintext

Design Decisions:
    - Ids are not unified across backends: no migration path exists between them
    - str Enums: serialize to JSON and env vars without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

RecordId = Union[int, str]


class StorageBackend(str, Enum):
    """Record persistence backends selectable via STORAGE_BACKEND."""
    CSV = "csv"
    MONGO = "mongo"
    SQL = "sql"


@dataclass(frozen=True)
class Operator:
    """A trusted operator allowed to log in to the dashboard."""
    username: str
    name: str
    password_hash: str

    def claims(self) -> dict:
        """Public identity carried inside issued tokens."""
        return {"username": self.username, "name": self.name}
