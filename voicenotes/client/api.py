"""
HTTP client for the notes API.

APIClient is a thin httpx wrapper that tags every request with
X-Frontend-ID. NotesAPIClient speaks the notes routes and turns error
envelopes back into the same ApplicationError subclasses the repository
raises, so callers handle one error taxonomy for local and remote stores.
"""

from typing import Any

import httpx

from voicenotes.backend.core.config import get_app_config, get_server_base_url
from voicenotes.backend.core.exceptions import (
    ApplicationError,
    ConflictError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from voicenotes.backend.core.logging import get_logger, log_with_source
from voicenotes.backend.models.note import Note
from voicenotes.backend.schemas.note import NoteResponse

logger = get_logger(__name__)

# Statuses the API answers with, mapped back to the exception that produced them
ERRORS_BY_STATUS: dict[int, type[ApplicationError]] = {
    exc.status_code: exc for exc in (ValidationError, NotFoundError, ConflictError)
}


class APIClient:
    """
    Lazily opened httpx.AsyncClient bound to one backend.

    Usage:
        client = APIClient(frontend="cli")
        response = await client.get("/health")
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        frontend: str = "client",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            base_url: Server URL; application.yaml server host and port by default
            timeout: Seconds per request; application.yaml timeouts.external_api by default
            frontend: Sent as X-Frontend-ID and used as the log source
            transport: Replacement httpx transport, e.g. ASGITransport in tests
        """
        if base_url is None or timeout is None:
            configured_url, configured_timeout = get_server_base_url()
            base_url = base_url or configured_url
            timeout = configured_timeout if timeout is None else timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.frontend = frontend
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    def _session(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": self.frontend},
                transport=self._transport,
            )
        return self._http

    async def close(self) -> None:
        if self._http is not None and not self._http.is_closed:
            await self._http.aclose()
        self._http = None

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request and return the response whatever its status.

        Raises:
            httpx.HTTPError: When the server cannot be reached
        """
        try:
            response = await self._session().request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(logger, self.frontend, "error", "API unreachable", method=method, path=path, error=str(e))
            raise
        log_with_source(
            logger, self.frontend, "debug", "API call", method=method, path=path, status_code=response.status_code,
        )
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)


def raise_for_error(response: httpx.Response) -> None:
    """
    Re-raise an error envelope as an application exception.

    400, 404 and 409 map to ValidationError, NotFoundError and ConflictError;
    any other error status becomes InternalError. Bodies that are not
    envelopes fall back to "HTTP <status>" as the message.
    """
    if response.status_code < 400:
        return

    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        error = {}

    message = error.get("message") or f"HTTP {response.status_code}"
    exc_class = ERRORS_BY_STATUS.get(response.status_code, InternalError)
    raise exc_class(message, details=error.get("details"))


def _to_note(payload: dict[str, Any]) -> Note:
    data = NoteResponse.model_validate(payload)
    return Note(
        id=data.id,
        title=data.title,
        content=data.content,
        created_at=data.created_at,
    )


class NotesAPIClient:
    """
    Typed operations on the notes REST surface.

    Usage:
        notes = NotesAPIClient(APIClient())
        note = await notes.create_note("Groceries", "milk eggs bread")
    """

    def __init__(self, client: APIClient | None = None, api_prefix: str | None = None) -> None:
        self.client = client or APIClient()
        if api_prefix is None:
            api_prefix = get_app_config().application.api_prefix
        self.api_prefix = api_prefix.rstrip("/")

    async def _call(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(method, f"{self.api_prefix}{path}", **kwargs)
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Could not reach notes API: {e}") from e
        raise_for_error(response)
        return response

    async def list_notes(self) -> list[Note]:
        response = await self._call("GET", "/notes")
        return [_to_note(item) for item in response.json()]

    async def get_note(self, note_id: int) -> Note:
        response = await self._call("GET", f"/notes/{note_id}")
        return _to_note(response.json())

    async def create_note(self, title: str, content: str) -> Note:
        response = await self._call("POST", "/notes", json={"title": title, "content": content})
        return _to_note(response.json())

    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        payload = {
            name: value
            for name, value in (("title", title), ("content", content))
            if value is not None
        }
        response = await self._call("PATCH", f"/notes/{note_id}", json=payload)
        return _to_note(response.json())

    async def delete_note(self, note_id: int) -> None:
        await self._call("DELETE", f"/notes/{note_id}")

    async def send_message(
        self,
        recipient: str,
        content: str,
        message_type: str = "text",
        voice_type: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "recipient": recipient,
            "content": content,
            "messageType": message_type,
        }
        if message_type == "voice" and voice_type:
            payload["voiceType"] = voice_type
        response = await self._call("POST", "/send-message", json=payload)
        return response.json()

    async def close(self) -> None:
        await self.client.close()
