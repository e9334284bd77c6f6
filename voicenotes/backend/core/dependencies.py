"""
FastAPI Dependencies.

Shared dependencies for request handling. Repositories and services are
owned by the application instance (app.state), never by module globals,
so every app built by create_app() starts with its own empty store.
"""

from typing import Annotated

from fastapi import Depends, Request

from voicenotes.backend.repositories.note import NoteRepository
from voicenotes.backend.services.messaging import MessagingService
from voicenotes.backend.services.note import NoteService, parse_note_id


def get_note_repository(request: Request) -> NoteRepository:
    """Return the note repository owned by the running application."""
    return request.app.state.note_repository


def get_note_service(
    repository: Annotated[NoteRepository, Depends(get_note_repository)],
) -> NoteService:
    return NoteService(repository)


def get_messaging_service(request: Request) -> MessagingService:
    return request.app.state.messaging_service


def get_note_id(note_id: str) -> int:
    """Parse the {note_id} path segment; non-integers are a 400."""
    return parse_note_id(note_id)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
MessagingServiceDep = Annotated[MessagingService, Depends(get_messaging_service)]
NoteId = Annotated[int, Depends(get_note_id)]
