"""
Client-side note handling: store, derived view, backends and API client.
"""

from voicenotes.client.backends import ApiNoteBackend, LocalNoteBackend, NoteBackend
from voicenotes.client.store import Notification, NoteStore
from voicenotes.client.view import SortOrder, derive_view

__all__ = [
    "ApiNoteBackend",
    "LocalNoteBackend",
    "NoteBackend",
    "NoteStore",
    "Notification",
    "SortOrder",
    "derive_view",
]
