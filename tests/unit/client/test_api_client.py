"""Unit tests for the notes HTTP client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from voicenotes.backend.core.exceptions import (
    ConflictError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from voicenotes.client.api import APIClient, NotesAPIClient, raise_for_error


def _error_response(status_code: int, message: str, details: dict | None = None) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={
            "success": False,
            "data": None,
            "error": {"code": "X", "message": message, "details": details},
            "metadata": {"timestamp": "2024-05-01T12:00:00", "request_id": None},
        },
    )


class TestAPIClient:
    """Tests for APIClient class."""

    @pytest.fixture
    def client(self) -> APIClient:
        return APIClient(base_url="http://test:8000", frontend="cli")

    def test_reads_timeout_from_config(self, client: APIClient) -> None:
        assert client.base_url == "http://test:8000"
        assert client.timeout == 30.0

    def test_defaults_from_config(self) -> None:
        client = APIClient()
        assert client.base_url == "http://127.0.0.1:8000"

    def test_strips_trailing_slash(self) -> None:
        assert APIClient(base_url="http://test:8000/", timeout=5).base_url == "http://test:8000"

    async def test_includes_frontend_header(self, client: APIClient) -> None:
        internal_client = client._session()
        assert internal_client.headers.get("X-Frontend-ID") == "cli"
        await client.close()

    async def test_close_client(self, client: APIClient) -> None:
        client._session()
        assert client._http is not None

        await client.close()

        assert client._http is None

    async def test_get_request(self, client: APIClient) -> None:
        with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = httpx.Response(200, json={"status": "healthy"})

            response = await client.get("/health")

        assert response.status_code == 200
        mock_request.assert_awaited_once_with("GET", "/health")
        await client.close()

    async def test_transport_error_propagates(self, client: APIClient) -> None:
        with patch.object(
            httpx.AsyncClient,
            "request",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("refused"),
        ):
            with pytest.raises(httpx.ConnectError):
                await client.get("/health")
        await client.close()


class TestRaiseForError:
    """Tests for mapping error responses back to exceptions."""

    def test_success_passes(self) -> None:
        raise_for_error(httpx.Response(200, json=[]))

    def test_400_is_validation_error_with_details(self) -> None:
        response = _error_response(400, "Title and content cannot be empty", {"missing_fields": ["title"]})

        with pytest.raises(ValidationError) as exc_info:
            raise_for_error(response)

        assert exc_info.value.message == "Title and content cannot be empty"
        assert exc_info.value.details == {"missing_fields": ["title"]}

    @pytest.mark.parametrize(
        ("status", "exc_class"),
        [(404, NotFoundError), (409, ConflictError), (500, InternalError), (502, InternalError)],
    )
    def test_status_maps_to_exception(self, status, exc_class) -> None:
        with pytest.raises(exc_class, match="boom"):
            raise_for_error(_error_response(status, "boom"))

    def test_non_json_body_uses_status_text(self) -> None:
        with pytest.raises(InternalError, match="HTTP 503"):
            raise_for_error(httpx.Response(503, text="Service Unavailable"))


class TestNotesAPIClient:
    """Tests for the typed notes client over a mocked transport."""

    @pytest.fixture
    def notes_client(self) -> NotesAPIClient:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/notes/7":
                return httpx.Response(
                    200,
                    json={"id": 7, "title": "t", "content": "c", "createdAt": "2024-05-01T12:00:00"},
                )
            return _error_response(404, "Note not found")

        client = APIClient(
            base_url="http://test",
            timeout=5,
            transport=httpx.MockTransport(handler),
        )
        return NotesAPIClient(client)

    async def test_get_note_parses_camel_case(self, notes_client) -> None:
        note = await notes_client.get_note(7)

        assert note.id == 7
        assert note.created_at.year == 2024
        await notes_client.close()

    async def test_not_found_raises(self, notes_client) -> None:
        with pytest.raises(NotFoundError, match="Note not found"):
            await notes_client.get_note(8)
        await notes_client.close()

    async def test_unreachable_server_is_external_service_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = APIClient(base_url="http://test", timeout=5, transport=httpx.MockTransport(handler))
        notes_client = NotesAPIClient(client, api_prefix="/api")

        with pytest.raises(ExternalServiceError, match="Could not reach notes API"):
            await notes_client.list_notes()
        await notes_client.close()
