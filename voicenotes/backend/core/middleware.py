"""
Request Context Middleware.

Each request gets a request id (the caller's X-Request-ID or a fresh
uuid4) and a frontend label from X-Frontend-ID. Both are stored on
request.state, bound into structlog contextvars for the duration of the
request, and the id is echoed back with an X-Response-Time header.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from voicenotes.backend.core.logging import VALID_SOURCES, get_logger
from voicenotes.backend.core.utils import utc_now

logger = get_logger(__name__)


def frontend_of(request: Request) -> str:
    """Lower-cased X-Frontend-ID, or "unknown" when absent or not a known source."""
    frontend = request.headers.get("X-Frontend-ID", "").lower()
    return frontend if frontend in VALID_SOURCES else "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Attach request_id, frontend and start_time to request.state.

    Contextvars are cleared on entry and on exit so nothing bound by one
    request shows up in the logs of the next.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        frontend = frontend_of(request)

        request.state.request_id = request_id
        request.state.frontend = frontend
        request.state.start_time = utc_now()
        started = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            frontend=frontend,
            method=request.method,
            path=request.url.path,
        )
        logger.debug("Request started", client_host=request.client.host if request.client else None)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request raised",
                error_type=type(exc).__name__,
                duration_ms=_elapsed_ms(started),
            )
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            logger.debug("Request completed", status_code=response.status_code, duration_ms=duration_ms)
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
