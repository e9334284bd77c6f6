"""
Client Note Store.

Holds the notes a client shows and the inputs of its saved-notes view.
Mutations go to a NoteBackend first; local state only changes after the
backend confirms. Search and sort changes never touch the backend.

Usage:
    store = NoteStore(ApiNoteBackend(), notify=print)
    await store.refresh()
    await store.save_transcript("remind me to book a flight")
    store.search("flight")
    store.filtered_notes
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from voicenotes.backend.core.exceptions import ApplicationError, ValidationError
from voicenotes.backend.core.logging import get_logger, log_with_source
from voicenotes.backend.models.note import Note
from voicenotes.client.backends import NoteBackend
from voicenotes.client.transcript import title_from_transcript
from voicenotes.client.view import SortOrder, derive_view

logger = get_logger(__name__)


@dataclass(frozen=True)
class Notification:
    """User-facing outcome of a store operation."""

    title: str
    description: str
    variant: Literal["success", "destructive"] = "success"


Notifier = Callable[[Notification], None]


class NoteStore:
    """
    Client-side note state.

    `notes` is the client's authoritative list; `filtered_notes` is the
    derived view for the current search query and sort order.
    """

    def __init__(self, backend: NoteBackend, notify: Notifier | None = None) -> None:
        self.backend = backend
        self._notify = notify
        self._notes: list[Note] = []
        self._search_query = ""
        self._sort_order = SortOrder.DESC

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def filtered_notes(self) -> list[Note]:
        return derive_view(self._notes, self._search_query, self._sort_order)

    def search(self, query: str) -> None:
        self._search_query = query

    def toggle_sort_order(self) -> SortOrder:
        self._sort_order = self._sort_order.toggled()
        return self._sort_order

    def _emit(self, title: str, description: str, variant: str = "success") -> None:
        if self._notify is not None:
            self._notify(Notification(title, description, variant))

    def _fail(self, action: str, error: ApplicationError) -> None:
        log_with_source(
            logger,
            "client",
            "warning",
            f"Failed to {action} note",
            backend=self.backend.name,
            code=error.code,
            error=error.message,
        )
        self._emit("Error", f"Failed to {action} note: {error.message}", "destructive")

    def _merge(self, note: Note) -> None:
        for index, existing in enumerate(self._notes):
            if existing.id == note.id:
                self._notes[index] = note
                return
        self._notes.append(note)

    async def refresh(self) -> list[Note]:
        """Replace local notes with the backend's current list."""
        try:
            notes = await self.backend.list_notes()
        except ApplicationError as e:
            self._fail("load", e)
            raise
        self._notes = list(notes)
        return notes

    async def add_note(self, title: str, content: str) -> Note:
        """
        Create a note through the backend and add it locally.

        Raises:
            ApplicationError: Whatever the backend raised; local state is unchanged
        """
        try:
            note = await self.backend.create_note(title, content)
        except ApplicationError as e:
            self._fail("save", e)
            raise

        self._merge(note)
        log_with_source(logger, "client", "info", "Note saved", note_id=note.id, backend=self.backend.name)
        self._emit("Success", "Note saved successfully!")
        return note

    async def update_note(self, note_id: int, title: str, content: str) -> Note:
        """Replace a note's title and content."""
        try:
            note = await self.backend.update_note(note_id, title=title, content=content)
        except ApplicationError as e:
            self._fail("update", e)
            raise

        self._merge(note)
        self._emit("Success", "Note updated successfully!")
        return note

    async def delete_note(self, note_id: int) -> None:
        """Delete a note through the backend, then drop it locally."""
        try:
            await self.backend.delete_note(note_id)
        except ApplicationError as e:
            self._fail("delete", e)
            raise

        self._notes = [note for note in self._notes if note.id != note_id]
        log_with_source(logger, "client", "info", "Note deleted", note_id=note_id, backend=self.backend.name)
        self._emit("Success", "Note deleted successfully!")

    async def save_transcript(self, transcript: str, title: str | None = None) -> Note:
        """
        Save a transcript as a note, titling it from its first words.

        Raises:
            ValidationError: If the transcript is blank
        """
        if not transcript.strip():
            error = ValidationError("Please record or type something before saving.")
            self._emit("Empty Note", error.message, "destructive")
            raise error
        return await self.add_note(title or title_from_transcript(transcript), transcript)
