"""
Exception Handlers.

Every failure leaves the API as an ErrorResponse envelope:

    ApplicationError        its own status_code and code
    RequestValidationError  400 VAL_REQUEST_INVALID, one entry per field
    anything else           500 SYS_INTERNAL_ERROR, details only in the log

Usage:
    app = FastAPI()
    register_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from voicenotes.backend.core.exceptions import ApplicationError
from voicenotes.backend.core.logging import get_logger
from voicenotes.backend.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

# Leading location segments that only say where the value came from
LOCATION_SOURCES = frozenset({"body", "path", "query"})


def request_id_of(request: Request) -> str | None:
    """The id the middleware assigned, else the caller's X-Request-ID, else None."""
    request_id = getattr(request.state, "request_id", None)
    return request_id or request.headers.get("x-request-id")


def field_name(loc: Sequence[Any]) -> str:
    """("body", "note", 0, "title") -> "note.0.title"."""
    parts = [str(part) for part in loc]
    if parts[:1] and parts[0] in LOCATION_SOURCES:
        del parts[0]
    return ".".join(parts)


def _envelope(request: Request, status_code: int, error: ErrorDetail) -> JSONResponse:
    body = ErrorResponse(error=error, metadata=ResponseMetadata(request_id=request_id_of(request)))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code = exc.status_code
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request rejected",
        code=exc.code,
        status=status_code,
        message=exc.message,
    )
    return _envelope(
        request,
        status_code,
        ErrorDetail(code=exc.code, message=exc.message, details=exc.details or None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed bodies, ids and query values as a 400.

    The message lists each failing field so a client can show it as is;
    details.validation_errors carries the same data in structured form.
    """
    field_errors = [
        {
            "field": field_name(err.get("loc", ())),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]
    logger.warning("Request validation failed", error_count=len(field_errors))

    summary = "; ".join(
        f"{item['message']} at \"{item['field']}\"" if item["field"] else item["message"]
        for item in field_errors
    )
    return _envelope(
        request,
        400,
        ErrorDetail(
            code="VAL_REQUEST_INVALID",
            message=f"Validation error: {summary}" if summary else "Request validation failed",
            details={"validation_errors": field_errors},
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", exception_type=type(exc).__name__)
    return _envelope(
        request,
        500,
        ErrorDetail(code="SYS_INTERNAL_ERROR", message="An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
