"""Error Hierarchy — typed, categorized exceptions for all FirmBox failure modes.

Invariants:
    - Every error has a code (ErrorStatus), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidArgumentError (400) is raised before any provider call
    - InternalError (500) carries a fixed user-facing message, never the cause
    - ModelProviderError is infrastructure-only: it never reaches a caller unconverted
    - to_response() produces the callable error envelope

Design Decisions:
    - Single hierarchy with FirmboxError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from firmbox.core.domain_types import ErrorStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    endpoint: str | None = None
    debug_info: dict[str, Any] | None = None


class FirmboxError(Exception):
    """Base exception for all FirmBox errors."""

    def __init__(
        self,
        message: str,
        code: ErrorStatus,
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
        """Convert to the callable error envelope."""
        return {
            "error": {
                "status": self.code.canonical,
                "code": self.code.value,
                "message": self.message,
            }
        }


# ─── User-visible errors ────────────────────────────────────────

class InvalidArgumentError(FirmboxError):
    """A mandatory request field is missing or empty."""
    def __init__(
        self,
        message: str,
        missing_fields: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, ErrorStatus.INVALID_ARGUMENT, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing_fields = missing_fields or []


class InternalError(FirmboxError):
    """Handling failed; message is fixed per endpoint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, ErrorStatus.INTERNAL, ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Infrastructure errors ──────────────────────────────────────

class ModelProviderError(FirmboxError):
    """Model provider call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Model provider error ({api_error_type}): {message}",
            ErrorStatus.INTERNAL, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.api_error_type = api_error_type
