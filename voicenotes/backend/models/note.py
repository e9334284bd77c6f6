"""
Note Model.

Immutable note record held by the note repository.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Note:
    """
    A titled piece of text, usually a speech transcript.

    Records are never mutated in place. Updates build a new record with
    dataclasses.replace and swap it in, so readers always see a whole note.
    """

    id: int
    title: str
    content: str
    created_at: datetime

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
