"""
Note Repository.

Storage layer for notes and the sole authority for note identity.
The in-memory implementation is the reference behaviour; a durable store
only has to honour the same contract.
"""

import dataclasses
from abc import ABC, abstractmethod

from voicenotes.backend.core.logging import get_logger
from voicenotes.backend.core.utils import utc_now
from voicenotes.backend.models.note import Note
from voicenotes.backend.repositories.base import BaseRepository

logger = get_logger(__name__)


def recency_key(note: Note) -> tuple:
    """Sort key placing newer notes last; reverse it for newest first."""
    return (note.created_at, note.id)


class NoteRepository(ABC):
    """
    Contract for note storage.

    Unknown ids are reported through the return value (None/False),
    never by raising. Empty titles or contents raise ValidationError.
    """

    @abstractmethod
    async def list_notes(self) -> list[Note]:
        """All notes, newest first (ties broken by id, highest first)."""
        ...

    @abstractmethod
    async def get_note(self, note_id: int) -> Note | None:
        """Note by id, or None."""
        ...

    @abstractmethod
    async def create_note(self, title: str, content: str) -> Note:
        """Store a new note with a fresh id and the current time."""
        ...

    @abstractmethod
    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note | None:
        """Replace the provided fields; None if the note does not exist."""
        ...

    @abstractmethod
    async def delete_note(self, note_id: int) -> bool:
        """Remove a note; False if it did not exist."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored notes."""
        ...


class InMemoryNoteRepository(BaseRepository, NoteRepository):
    """
    Note repository backed by a dict.

    Usage:
        repo = InMemoryNoteRepository()
        note = await repo.create_note("Groceries", "milk eggs bread")
        await repo.update_note(note.id, title="Shopping")
    """

    def __init__(self) -> None:
        super().__init__()
        self._notes: dict[int, Note] = {}

    async def list_notes(self) -> list[Note]:
        with self._lock:
            notes = list(self._notes.values())
        return sorted(notes, key=recency_key, reverse=True)

    async def get_note(self, note_id: int) -> Note | None:
        with self._lock:
            return self._notes.get(note_id)

    async def create_note(self, title: str, content: str) -> Note:
        self._validate_required(
            {"title": title, "content": content},
            ["title", "content"],
        )

        with self._lock:
            note = Note(
                id=self._next_id(),
                title=title,
                content=content,
                created_at=utc_now(),
            )
            self._notes[note.id] = note

        logger.debug("Note stored", extra={"note_id": note.id})
        return note

    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note | None:
        changes = {
            name: value
            for name, value in (("title", title), ("content", content))
            if value is not None
        }
        self._validate_required(changes, list(changes))

        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                return None
            updated = dataclasses.replace(existing, **changes)
            self._notes[note_id] = updated

        return updated

    async def delete_note(self, note_id: int) -> bool:
        with self._lock:
            removed = self._notes.pop(note_id, None)
        return removed is not None

    async def count(self) -> int:
        with self._lock:
            return len(self._notes)
