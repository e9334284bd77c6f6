"""
Unit Tests for Base Service.

Tests the BaseService logging helpers.
"""

from unittest.mock import patch

from voicenotes.backend.services.base import BaseService


class ExampleService(BaseService):
    pass


class TestBaseServiceInit:
    """Tests for BaseService initialization."""

    def test_init_creates_logger(self):
        assert ExampleService()._logger is not None

    def test_logger_named_after_module(self):
        with patch("voicenotes.backend.services.base.get_logger") as mock_get_logger:
            ExampleService()

        mock_get_logger.assert_called_once_with(__name__)


class TestLogHelpers:
    """Tests for _log_operation and _log_debug."""

    def test_log_operation_tags_service_name(self, mock_logger):
        service = ExampleService()
        service._logger = mock_logger

        service._log_operation("Creating note", title="Groceries")

        mock_logger.info.assert_called_once_with(
            "Creating note",
            extra={"service": "ExampleService", "title": "Groceries"},
        )

    def test_log_debug_tags_service_name(self, mock_logger):
        service = ExampleService()
        service._logger = mock_logger

        service._log_debug("Note created", note_id=1)

        mock_logger.debug.assert_called_once_with(
            "Note created",
            extra={"service": "ExampleService", "note_id": 1},
        )
