"""Error Hierarchy - typed, categorized exceptions for every resource failure mode.

Invariants:
    - Every error has a type tag (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the client envelope {"type", "message"} and nothing else
      except validation details; store diagnostics are never included
    - Client errors (4xx) are expected outcomes; only 5xx errors are server faults

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
    - Type tags keep the names clients already match on (EntityNotFoundException)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error; never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    operation: str | None = None
    record_key: str | None = None
    caller: str | None = None

    def as_log_extra(self) -> dict[str, Any]:
        return {
            "resource": self.resource,
            "operation": self.operation,
            "record_key": self.record_key,
            "caller": self.caller,
        }


class CatalogError(Exception):
    """Base exception for all resource catalog errors."""

    def __init__(
        self,
        message: str,
        error_type: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the client-facing error envelope."""
        return {"type": self.error_type, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class AuthorizationError(CatalogError):
    """Caller lacks the tier required by the operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AccessDeniedException", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class EntityNotFoundError(CatalogError):
    """No record stored under the requested key."""
    def __init__(
        self, resource_name: str, key: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_name} with id {key} not found",
            "EntityNotFoundException", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_name = resource_name
        self.key = key


class RecordValidationError(CatalogError):
    """A supplied key or field value is malformed or missing."""
    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "ValidationException", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["details"] = self.details
        return response


class PersistenceConflictError(CatalogError):
    """The store rejected a write on a constraint (duplicate key, etc.)."""
    def __init__(self, resource_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_name} could not be saved: conflicting record exists",
            "PersistenceConflictException", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.resource_name = resource_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DatabaseException", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
