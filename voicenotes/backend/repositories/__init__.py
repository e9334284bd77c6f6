from voicenotes.backend.repositories.note import InMemoryNoteRepository, NoteRepository
from voicenotes.backend.repositories.user import InMemoryUserRepository

__all__ = ["InMemoryNoteRepository", "InMemoryUserRepository", "NoteRepository"]
