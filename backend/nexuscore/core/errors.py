"""Error Hierarchy: typed, categorized exceptions for every Nexuscore failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to (http_status)
    - to_response() always produces an envelope with a top-level "error" message

Design Decisions:
    - Single hierarchy with NexuscoreError base: one registered handler maps
      every subclass to its status (api/error_handlers.py)
    - DatabaseError.message is the driver's message, verbatim
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
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    video_id: str | None = None


class NexuscoreError(Exception):
    """Base exception for all Nexuscore errors."""

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
        """Convert to the REST error envelope."""
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class VideoValidationError(NexuscoreError):
    """Video payload failed presence checks."""
    def __init__(self, message: str, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields

    def to_response(self) -> dict:
        response = super().to_response()
        response["details"] = [
            {"field": name, "message": "Field required", "type": "missing"}
            for name in self.fields
        ]
        return response


class ResourceNotFoundError(NexuscoreError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.video_id = resource_id
        super().__init__(
            f"{resource_type} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(NexuscoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class DatabaseConnectionError(DatabaseError):
    """Initial connection to the database could not be established."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "connect", context)
        self.code = "DATABASE_UNAVAILABLE"


class DocumentValidationError(DatabaseError):
    """Document update broke the stored schema's required-field rule."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        reasons = ", ".join(f"{name}: Path `{name}` is required." for name in fields)
        super().__init__(f"Validation failed: {reasons}", "validate", context)
        self.code = "DOCUMENT_VALIDATION_ERROR"
        self.fields = fields
