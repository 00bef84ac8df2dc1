"""Error Hierarchy — typed, categorized exceptions for all Bazinga failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All current errors are 400-level: the algorithm itself is total over str
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BazingaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field, replace
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class BazingaError(Exception):
    """Base exception for all Bazinga errors."""

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
                    "path": self.context.path,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidWordError(BazingaError):
    """Word is absent or not a string."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        ctx = replace(context) if context else ErrorContext()
        ctx.field = ctx.field or "word"
        super().__init__(
            f"Expected a string word, got {type(value).__name__}",
            "INVALID_WORD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.value_type = type(value).__name__


class WordTooLongError(BazingaError):
    """Word exceeds the configured maximum length."""
    def __init__(self, length: int, max_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Word length {length} exceeds maximum of {max_length} characters",
            "WORD_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 413,
        )
        self.length = length
        self.max_length = max_length


class BatchTooLargeError(BazingaError):
    """Batch holds more words than the configured maximum."""
    def __init__(self, size: int, max_size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Batch of {size} words exceeds maximum of {max_size}",
            "BATCH_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 413,
        )
        self.size = size
        self.max_size = max_size
