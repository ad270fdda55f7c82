"""Error Hierarchy — typed, categorized exceptions for all Jobly failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Callers pattern-match on the class, never on the message text
    - Domain errors (400-level) are raised before the store is touched,
      except not-found and constraint failures which need a round-trip
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with JoblyError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Store constraint errors live here too: repositories translate them into
      domain errors without importing SQLAlchemy
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    identifier: str | None = None
    username: str | None = None
    debug_info: dict[str, Any] | None = None


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

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
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "identifier": self.context.identifier,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(JoblyError):
    """Malformed or empty input to a builder or repository call."""
    def __init__(
        self, message: str, field: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(JoblyError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.identifier = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(JoblyError):
    """Create rejected because the identifier is already taken."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.identifier = resource_id
        super().__init__(
            f"Duplicate {resource_type.lower()}: {resource_id}",
            "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthorizationError(JoblyError):
    """A gate rejected the caller."""
    def __init__(self, message: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialError(JoblyError):
    """Bearer credential failed signature/expiry checks.

    Never reaches a client: authentication degrades it to an anonymous caller.
    """
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_CREDENTIAL", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.INFO, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JoblyError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StoreConstraintError(DatabaseError):
    """Store rejected a statement because of a declared constraint."""
    def __init__(self, message: str, constraint: str | None = None):
        super().__init__(message, "execute")
        self.constraint = constraint


class UniqueViolationError(StoreConstraintError):
    """Primary key or unique index already holds the value."""


class ForeignKeyViolationError(StoreConstraintError):
    """Referenced row does not exist."""


class CheckViolationError(StoreConstraintError):
    """Column CHECK constraint rejected the value."""
