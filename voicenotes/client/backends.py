"""
Note Backends.

Where the client note store sends its mutations. The API backend mirrors
the server; the local backend keeps notes in this process only and is
lost when the process exits. Both share one contract: unknown ids raise
NotFoundError and empty fields raise ValidationError.
"""

from abc import ABC, abstractmethod

from voicenotes.backend.core.exceptions import NotFoundError
from voicenotes.backend.models.note import Note
from voicenotes.backend.repositories.note import InMemoryNoteRepository, NoteRepository
from voicenotes.client.api import NotesAPIClient


class NoteBackend(ABC):
    """Contract between the client store and note storage."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs ('api', 'local')."""
        ...

    @abstractmethod
    async def list_notes(self) -> list[Note]:
        ...

    @abstractmethod
    async def create_note(self, title: str, content: str) -> Note:
        ...

    @abstractmethod
    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        ...

    @abstractmethod
    async def delete_note(self, note_id: int) -> None:
        ...

    async def close(self) -> None:
        """Release resources held by the backend."""
        return None


class ApiNoteBackend(NoteBackend):
    """Backend talking to the notes REST API."""

    def __init__(self, client: NotesAPIClient | None = None) -> None:
        self.client = client or NotesAPIClient()

    @property
    def name(self) -> str:
        return "api"

    async def list_notes(self) -> list[Note]:
        return await self.client.list_notes()

    async def create_note(self, title: str, content: str) -> Note:
        return await self.client.create_note(title, content)

    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        return await self.client.update_note(note_id, title=title, content=content)

    async def delete_note(self, note_id: int) -> None:
        await self.client.delete_note(note_id)

    async def close(self) -> None:
        await self.client.close()


class LocalNoteBackend(NoteBackend):
    """Backend owning an in-process repository."""

    def __init__(self, repository: NoteRepository | None = None) -> None:
        self.repository = repository or InMemoryNoteRepository()

    @property
    def name(self) -> str:
        return "local"

    async def list_notes(self) -> list[Note]:
        return await self.repository.list_notes()

    async def create_note(self, title: str, content: str) -> Note:
        return await self.repository.create_note(title, content)

    async def update_note(
        self,
        note_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        note = await self.repository.update_note(note_id, title=title, content=content)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    async def delete_note(self, note_id: int) -> None:
        if not await self.repository.delete_note(note_id):
            raise NotFoundError("Note not found")
