"""Error Hierarchy — typed, categorized exceptions raised by infrastructure adapters.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the same envelope shape as every other endpoint
    - No internal details leaked in user-facing messages (user_message is the
      only text that reaches the client)

Design Decisions:
    - Exceptions live at the IO edge only: handlers catch them and convert to
      Failure values (core/outcome.py), the dispatcher never sees them
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    operation: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class UserServiceError(Exception):
    """Base exception for all Users API errors."""

    summary = "An unexpected error occurred"

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
        """Convert to the standard response envelope."""
        return {
            "success": False,
            "message": self.summary,
            "data": None,
            "errors": [self.context.user_message or self.summary],
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(UserServiceError):
    """Caller identity missing, expired or unreadable."""

    summary = "Unauthorized"

    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Authentication required"
        super().__init__(
            f"Authentication failed: {reason}",
            "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, ctx, 401,
        )
        self.reason = reason


class RecordNotFoundError(UserServiceError):
    """Requested record does not exist."""

    summary = "Resource not found"

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or f"{resource_type} '{resource_id}' not found"
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserServiceError):
    """Database operation failed."""

    def __init__(
        self,
        message: str,
        operation: str,
        category: ErrorCategory = ErrorCategory.DATABASE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", category,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    @property
    def is_conflict(self) -> bool:
        return self.category == ErrorCategory.CONFLICT
