"""
Integration test fixtures.

The real application runs in-process behind httpx.ASGITransport, wired to
the per-test repository and an instant messaging stub from tests/conftest.py.
"""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from voicenotes.backend.main import create_app
from voicenotes.backend.repositories.note import InMemoryNoteRepository
from voicenotes.backend.services.messaging import MessagingService


@pytest.fixture
def app(note_repository: InMemoryNoteRepository, messaging_service: MessagingService) -> FastAPI:
    return create_app(note_repository=note_repository, messaging_service=messaging_service)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


class ApiAssertions:
    """Status and envelope checks shared by the API tests."""

    @staticmethod
    def _status(response: httpx.Response, expected: int) -> None:
        assert response.status_code == expected, (
            f"{response.request.method} {response.request.url.path}: "
            f"expected {expected}, got {response.status_code} {response.text}"
        )

    def assert_success(self, response: httpx.Response, expected_status: int = 200) -> Any:
        """Check the status and return the decoded body."""
        self._status(response, expected_status)
        return response.json()

    def assert_error(
        self,
        response: httpx.Response,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """Check for an ErrorResponse envelope, optionally with a given error code."""
        self._status(response, expected_status)
        body = response.json()
        assert body["success"] is False and body["data"] is None, body
        assert body["error"]["message"], body
        if expected_code is not None:
            assert body["error"]["code"] == expected_code, body["error"]
        return body

    def assert_validation_error(self, response: httpx.Response, field: str | None = None) -> dict[str, Any]:
        """A 400 VAL_REQUEST_INVALID, reported against `field` when one is given."""
        body = self.assert_error(response, 400, "VAL_REQUEST_INVALID")
        if field is not None:
            fields = [item["field"] for item in body["error"]["details"]["validation_errors"]]
            assert any(field in name for name in fields), f"no error for {field!r} in {fields}"
        return body


@pytest.fixture
def api() -> ApiAssertions:
    return ApiAssertions()
