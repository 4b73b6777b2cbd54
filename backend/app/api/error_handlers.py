"""Error Handlers — map every failure to the {"error": {...}} envelope.

Invariants:
    - SuperheroesError → its own http_status and to_response() body
    - RequestValidationError (bad body, bad path id) → 400 VALIDATION_ERROR, same envelope
      plus a "details" list naming each offending field by its JSON (camelCase) name
    - Anything else → 500 INTERNAL_ERROR with a fixed message; the cause is only logged

Design Decisions:
    - Validation and catch-all responses are built from SuperheroesError subclasses so
      clients parse one shape for every status
    - Client errors logged at WARNING, server errors at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidInputError, SuperheroesError,
)

logger = logging.getLogger(__name__)

# Request sections FastAPI prefixes onto validation error locations
_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "cookie"})


class UnexpectedError(SuperheroesError):
    """Wraps an unhandled exception for the response; never carries its text."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, http_status=500,
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(SuperheroesError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_domain_error(request: Request, exc: SuperheroesError):
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": field_name(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    first = details[0]["field"] if details else ""
    error = InvalidInputError(_summarize(details), first)
    logger.warning(
        f"Validation failed on {request.method} {request.url.path}: "
        f"{[d['field'] for d in details]}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    body = error.to_response()
    body["error"]["details"] = details
    return JSONResponse(status_code=error.http_status, content=body)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=UnexpectedError().to_response())


def field_name(loc: tuple | list) -> str:
    """Dotted field path without the request-section prefix.

    ("body", "powerLevel") → "powerLevel"; ("path", "hero_id") → "id";
    ("body", "powers", 1) → "powers.1".
    """
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    if parts == ["hero_id"]:
        return "id"
    return ".".join(parts) or "body"


def _summarize(details: list[dict]) -> str:
    if len(details) == 1:
        d = details[0]
        return f"{d['field']}: {d['message']}"
    return f"Invalid request data ({len(details)} errors)"
