"""Error Hierarchy — typed, categorized exceptions for all ledger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message, "code": code}
    - StorageError never leaks driver details in its message

Design Decisions:
    - Single hierarchy with LedgerError base: FastAPI global handler catches all
    - Flat "error" string in the envelope: the dashboard client reads body.error directly
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context surfaced in logs, never in responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: str | None = None


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message, "code": self.code}


# ─── Auth Errors (401/403) ──────────────────────────────────────

class AuthenticationError(LedgerError):
    """Protected route called without a bearer token."""
    def __init__(self, message: str = "Access token required", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTH_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(LedgerError):
    """Bearer token failed signature or expiry checks."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid or expired token", "INVALID_TOKEN",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 403,
        )


class InvalidCredentialsError(LedgerError):
    """Unknown operator or wrong password on login."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )

    def to_response(self) -> dict:
        return {"success": False, **super().to_response()}


# ─── Record Errors (400/404) ────────────────────────────────────

class RecordNotFoundError(LedgerError):
    """No record with the given id exists in the store."""
    def __init__(self, record_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_id = str(record_id)
        super().__init__(
            "Record not found", "RECORD_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, ctx, 404,
        )
        self.record_id = record_id


class RecordValidationError(LedgerError):
    """Record payload is missing data the backend cannot store without."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500) ────────────────────────────────

class StorageError(LedgerError):
    """File or database IO failed. Message is generic; detail goes to logs."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
