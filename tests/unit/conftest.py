"""
Unit Test Fixtures.

Fixtures for unit tests - collaborators are mocked or in-memory.
Unit tests should be fast and isolated, never opening sockets.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from voicenotes.client.backends import NoteBackend
from voicenotes.client.store import Notification


# =============================================================================
# Repository Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_note_repository() -> AsyncMock:
    """
    Mock note repository for service tests.

    Usage:
        def test_service(mock_note_repository):
            mock_note_repository.get_note.return_value = None
            service = NoteService(mock_note_repository)
    """
    repo = AsyncMock()
    repo.list_notes = AsyncMock(return_value=[])
    repo.get_note = AsyncMock(return_value=None)
    repo.create_note = AsyncMock()
    repo.update_note = AsyncMock(return_value=None)
    repo.delete_note = AsyncMock(return_value=False)
    repo.count = AsyncMock(return_value=0)
    return repo


# =============================================================================
# Client Store Fixtures
# =============================================================================


@pytest.fixture
def notifications() -> list[Notification]:
    """Collects notifications emitted by a NoteStore."""
    return []


@pytest.fixture
def failing_backend() -> MagicMock:
    """
    Backend whose every mutation fails; wire failures with side_effect.

    Usage:
        failing_backend.create_note.side_effect = ExternalServiceError("down")
    """
    backend = MagicMock(spec=NoteBackend)
    backend.name = "failing"
    backend.list_notes = AsyncMock(return_value=[])
    backend.create_note = AsyncMock()
    backend.update_note = AsyncMock()
    backend.delete_note = AsyncMock()
    backend.close = AsyncMock()
    return backend


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.get_logger", return_value=mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger

