"""
API Router.

Aggregates all endpoint routers mounted under the configured api prefix.
"""

from fastapi import APIRouter

from voicenotes.backend.api import messages, notes

router = APIRouter()

router.include_router(notes.router, prefix="/notes", tags=["notes"])
router.include_router(messages.router, tags=["messages"])
