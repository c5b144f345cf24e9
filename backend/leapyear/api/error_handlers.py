"""Error Handlers — map every failure to the LeapYearError envelope shape.

Invariants:
    - LeapYearError → its own to_response() with its http_status
    - RequestValidationError → 400 VALIDATION_ERROR, one detail per rejected parameter,
      carrying the raw input (JSON-safe) so "2000.0" is visible to the caller
    - Exception (catch-all) → 500 INTERNAL_ERROR, message never includes exception text
    - Domain and validation failures log at WARNING with the offending value; only the catch-all logs ERROR

Design Decisions:
    - Plain coroutines registered via add_exception_handler: handlers stay importable and testable
    - All non-domain bodies built by _envelope so every error body has the same keys
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from leapyear.core.errors import (
    ErrorCategory, ErrorSeverity, LeapYearError, jsonable,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(LeapYearError, handle_leap_year_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_leap_year_error(request: Request, exc: LeapYearError):
    logger.warning(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "value": jsonable(exc.context.value),
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [_detail(e) for e in exc.errors()]
    logger.warning(
        f"Rejected {len(details)} parameter(s) on {request.url.path}",
        extra={
            "error_code": "VALIDATION_ERROR",
            "path": request.url.path,
            "value": [d["input"] for d in details],
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _detail(error: dict) -> dict:
    return {
        "field": ".".join(str(loc) for loc in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
        "input": jsonable(error.get("input")),
    }


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
