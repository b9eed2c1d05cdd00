"""Operator Registry — small key-store of trusted operators allowed to log in.

Invariants:
    - Lookup is by exact username (the operator's email)
    - Registry is read-only at runtime: no sign-up, no revocation

Design Decisions:
    - Injected through get_operator_registry(): tests and multi-operator deployments
      override the dependency instead of patching environment globals
"""

from freight_ledger.config import Settings
from freight_ledger.core.domain_types import Operator


class StaticOperatorRegistry:
    """Operators held in memory, keyed by username."""

    def __init__(self, operators: list[Operator] | None = None):
        self._operators = {op.username: op for op in operators or []}

    def get(self, username: str) -> Operator | None:
        return self._operators.get(username)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticOperatorRegistry":
        """Single admin operator from ADMIN_EMAIL / ADMIN_PASSWORD_HASH / ADMIN_NAME."""
        return cls([
            Operator(
                username=settings.admin_email,
                name=settings.admin_name,
                password_hash=settings.admin_password_hash,
            ),
        ])
