"""Error Hierarchy — typed, categorized exceptions for all leapyear failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All current failures are misuse of the pure API (400-level)
    - to_response() produces the REST envelope
    - Combinators never catch: errors raised inside composed functions propagate unchanged

Design Decisions:
    - Single hierarchy with LeapYearError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Validation happens at factory/entry time, not per predicate call
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
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
    value: Any = None
    debug_info: dict[str, Any] | None = None


class LeapYearError(Exception):
    """Base exception for all leapyear errors."""

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
                    "value": jsonable(self.context.value),
                    "debug_info": self.context.debug_info,
                },
            }
        }


def jsonable(value: Any) -> Any:
    """Offending values may be arbitrary objects — repr anything JSON cannot carry."""
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


# ─── Validation Errors (400-level) ──────────────────────────────

class InvalidYearError(LeapYearError):
    """Year is not an integer."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.value = value
        super().__init__(
            f"Year must be an integer, got {type(value).__name__}: {value!r}",
            "INVALID_YEAR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class InvalidDivisorError(LeapYearError):
    """Divisor is not a non-zero integer."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.value = value
        super().__init__(
            f"Divisor must be a non-zero integer, got {value!r}",
            "INVALID_DIVISOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class InvalidRangeError(LeapYearError):
    """Range end precedes its start."""
    def __init__(self, start: int, end: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"start": start, "end": end}
        super().__init__(
            f"Range end ({end}) must not precede start ({start})",
            "INVALID_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.start = start
        self.end = end


class RangeTooLargeError(LeapYearError):
    """Range spans more years than allowed."""
    def __init__(self, span: int, max_span: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"span": span, "max_span": max_span}
        super().__init__(
            f"Range spans {span} years, maximum is {max_span}",
            "RANGE_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.span = span
        self.max_span = max_span
