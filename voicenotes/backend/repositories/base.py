"""
Base Repository.

Shared machinery for the in-memory repositories: a lock that makes each
operation atomic, a never-reused id sequence, and required-field checks.

Subclasses keep their records in a dict keyed by id:

    class UserRepository(BaseRepository):
        def __init__(self) -> None:
            super().__init__()
            self._users: dict[int, User] = {}
"""

import threading
from itertools import count
from typing import Any

from voicenotes.backend.core.exceptions import ValidationError
from voicenotes.backend.core.logging import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """
    Base class for in-memory repositories.

    Every public operation takes ``self._lock`` for its whole read-modify-write
    and never awaits while holding it. Ids come from a counter that only moves
    forward, so a deleted id is never handed out again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = count(1)

    def _next_id(self) -> int:
        """Return the next id. Caller must hold the lock."""
        return next(self._ids)

    @staticmethod
    def _validate_required(
        fields: dict[str, Any],
        field_names: list[str],
    ) -> None:
        """
        Validate that required fields are present and not blank.

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                f"{' and '.join(missing).capitalize()} cannot be empty",
                details={"missing_fields": missing},
            )
