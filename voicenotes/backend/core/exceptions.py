"""
Application Exceptions.

Repositories and services raise these; the exception handlers turn them
into ErrorResponse bodies using each class's `code` and `status_code`,
and the API client raises them again from those bodies.
"""

from typing import Any


class ApplicationError(Exception):
    """Base class. Subclasses override the default code, status and message."""

    code = "SYS_INTERNAL_ERROR"
    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """No note (or user) with the requested id."""

    code = "RES_NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class ValidationError(ApplicationError):
    """Input rejected: empty fields, bad id, unknown recipient."""

    code = "VAL_VALIDATION_ERROR"
    status_code = 400
    default_message = "Validation failed"


class ConflictError(ApplicationError):
    """The write clashes with stored state, e.g. a taken username."""

    code = "RES_CONFLICT"
    status_code = 409
    default_message = "Resource conflict"


class ExternalServiceError(ApplicationError):
    code = "SYS_EXTERNAL_SERVICE_ERROR"
    status_code = 502
    default_message = "External service error"


class InternalError(ApplicationError):
    pass
