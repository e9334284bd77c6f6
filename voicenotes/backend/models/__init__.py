from voicenotes.backend.models.note import Note
from voicenotes.backend.models.user import User

__all__ = ["Note", "User"]
