"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test gets fresh in-memory repositories; nothing is shared between
tests, so ordering never matters.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from voicenotes.backend.models.note import Note
from voicenotes.backend.repositories.note import InMemoryNoteRepository
from voicenotes.backend.repositories.user import InMemoryUserRepository
from voicenotes.backend.services.messaging import MessagingService


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def note_repository() -> InMemoryNoteRepository:
    """Provide an empty note repository."""
    return InMemoryNoteRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Provide an empty user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def messaging_service() -> MessagingService:
    """Messaging stub that answers immediately."""
    return MessagingService(delay_seconds=0)


# =============================================================================
# Note Factory
# =============================================================================


BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """
    Build Note records without a repository.

    Usage:
        def test_sorting(make_note):
            older = make_note(1, "Groceries", minutes=0)
            newer = make_note(2, "Ideas", minutes=5)
    """

    def factory(
        note_id: int,
        title: str = "Title",
        content: str = "Content",
        minutes: int = 0,
    ) -> Note:
        return Note(
            id=note_id,
            title=title,
            content=content,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )

    return factory


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
