"""Error Hierarchy - typed, categorized exceptions for every Object Service failure mode.

Invariants:
    - Every error has a message (str), code (str), category, severity and http_status
    - to_response() produces the wire envelope {"error": "<message>"} and nothing else
    - Not-found errors are 404, every other served error is 5xx unless configured

Design Decisions:
    - Single hierarchy with ObjectServiceError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - StoreError keeps the raw driver detail separate from the message so routes can
      re-phrase it per operation
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    object_id: str | None = None


class ObjectServiceError(Exception):
    """Base exception for all Object Service errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Request Errors ─────────────────────────────────────────────

class ObjectNotFoundError(ObjectServiceError):
    """No stored object carries the requested id."""
    def __init__(
        self, message: str = "object not found", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "OBJECT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class PayloadDecodeError(ObjectServiceError):
    """Request body is not a valid Object payload.

    Served as 500 unless the deployment configures another status.
    """
    def __init__(
        self, message: str, http_status: int = 500, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "PAYLOAD_DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, http_status,
        )


class OperationFailedError(ObjectServiceError):
    """A handler could not complete its operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "OPERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreError(ObjectServiceError):
    """Document store operation failed."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"{operation} failed: {detail}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation


class ConfigurationError(ObjectServiceError):
    """Configuration file is missing, unreadable or malformed. Always fatal."""
    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, None, 500,
        )
        self.path = path
