"""
Note Service.

Business logic layer for notes. Turns the repository's "absent" results
into NotFoundError so the API layer can map them to 404.
"""

import re

from voicenotes.backend.core.exceptions import NotFoundError, ValidationError
from voicenotes.backend.models.note import Note
from voicenotes.backend.repositories.note import NoteRepository
from voicenotes.backend.schemas.note import NoteCreate, NoteUpdate
from voicenotes.backend.services.base import BaseService

_NOTE_ID_PATTERN = re.compile(r"-?\d+", re.ASCII)


def parse_note_id(raw: str) -> int:
    """
    Parse a note id taken from a URL path segment.

    Raises:
        ValidationError: If the segment is not a base-10 integer
    """
    if not _NOTE_ID_PATTERN.fullmatch(raw):
        raise ValidationError("Invalid note ID", details={"note_id": raw})
    return int(raw)


class NoteService(BaseService):
    """
    Service for note business logic.

    Holds the repository it was given; the application decides which
    repository instance backs a service.
    """

    def __init__(self, repository: NoteRepository) -> None:
        super().__init__()
        self.repo = repository

    async def list_notes(self) -> list[Note]:
        """List all notes, newest first."""
        return await self.repo.list_notes()

    async def get_note(self, note_id: int) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        note = await self.repo.get_note(note_id)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Raises:
            ValidationError: If title or content is empty
        """
        self._log_operation("Creating note", title=data.title)

        note = await self.repo.create_note(title=data.title, content=data.content)

        self._log_debug("Note created", note_id=note.id)
        return note

    async def update_note(self, note_id: int, data: NoteUpdate) -> Note:
        """
        Update an existing note. Only fields present in the payload change.

        Raises:
            NotFoundError: If note not found
            ValidationError: If a provided field is empty
        """
        update_data = data.model_dump(exclude_unset=True)

        if not update_data:
            return await self.get_note(note_id)

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=list(update_data.keys()),
        )

        note = await self.repo.update_note(note_id, **update_data)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    async def delete_note(self, note_id: int) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Deleting note", note_id=note_id)

        if not await self.repo.delete_note(note_id):
            raise NotFoundError("Note not found")
