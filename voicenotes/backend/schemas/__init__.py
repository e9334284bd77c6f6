# Pydantic schemas package
from voicenotes.backend.schemas.base import (
    ErrorDetail,
    ErrorResponse,
    ResponseMetadata,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "ResponseMetadata",
]
