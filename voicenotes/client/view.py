"""
Derived Note View.

Pure functions computing what the saved-notes list shows: the notes
matching the search query, ordered by creation time. The result depends
only on the arguments, so callers recompute it whenever an input changes.

Usage:
    visible = derive_view(store.notes, "flight", SortOrder.DESC)
"""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Protocol


class SortOrder(str, Enum):
    """Direction of the creation-time sort."""

    DESC = "desc"
    ASC = "asc"

    def toggled(self) -> "SortOrder":
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


class NoteLike(Protocol):
    id: int
    title: str
    content: str
    created_at: datetime


def matches(note: NoteLike, query: str) -> bool:
    """Case-insensitive substring match against title or content."""
    needle = query.lower()
    return needle in note.title.lower() or needle in note.content.lower()


def filter_notes(notes: Iterable[NoteLike], query: str) -> list[NoteLike]:
    """Notes matching query, in input order. Only the empty query keeps everything."""
    if not query:
        return list(notes)
    return [note for note in notes if matches(note, query)]


def sort_notes(
    notes: Iterable[NoteLike],
    order: SortOrder | str = SortOrder.DESC,
) -> list[NoteLike]:
    """
    Sort by creation time.

    Newest first for DESC with equal timestamps broken by id (highest first);
    ASC is the exact reverse.
    """
    order = SortOrder(order)
    return sorted(
        notes,
        key=lambda note: (note.created_at, note.id),
        reverse=order is SortOrder.DESC,
    )


def derive_view(
    notes: Iterable[NoteLike],
    query: str = "",
    order: SortOrder | str = SortOrder.DESC,
) -> list[NoteLike]:
    """Filter by query, then sort by creation time."""
    return sort_notes(filter_notes(notes, query), order)
