"""
Voice Notes API application.

create_app() builds a self-contained application: its note repository and
messaging service live on app.state, so two apps never share notes.
uvicorn loads the lazily built module-level `app`:

    uvicorn voicenotes.backend.main:app
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voicenotes.backend.api import health
from voicenotes.backend.api import router as api_router
from voicenotes.backend.core.config import get_app_config
from voicenotes.backend.core.config_schema import ApplicationSchema
from voicenotes.backend.core.exception_handlers import register_exception_handlers
from voicenotes.backend.core.logging import get_logger, setup_logging
from voicenotes.backend.core.middleware import RequestContextMiddleware
from voicenotes.backend.repositories.note import InMemoryNoteRepository, NoteRepository
from voicenotes.backend.services.messaging import MessagingService

logger = get_logger(__name__)

_default_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Voice notes API up", version=app.version, notes=await app.state.note_repository.count())
    yield
    logger.info("Voice notes API stopped")


def _install_middleware(app: FastAPI, settings: ApplicationSchema) -> None:
    app.add_middleware(RequestContextMiddleware)
    if settings.cors.origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors.origins,
            allow_methods=["GET", "POST", "PATCH", "DELETE"],
            allow_headers=["*"],
        )


def create_app(
    note_repository: NoteRepository | None = None,
    messaging_service: MessagingService | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        note_repository: Store to serve; a new empty InMemoryNoteRepository by default
        messaging_service: Share-by-message stub; built from messaging.yaml by default
    """
    config = get_app_config()
    settings = config.application
    docs = settings.debug

    app = FastAPI(
        title=settings.name,
        description=settings.description,
        version=settings.version,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        lifespan=lifespan,
    )
    app.state.note_repository = note_repository or InMemoryNoteRepository()
    app.state.messaging_service = messaging_service or MessagingService(
        delay_seconds=config.messaging.simulated_delay_seconds,
    )

    _install_middleware(app, settings)
    register_exception_handlers(app)
    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


def __getattr__(name: str) -> FastAPI:
    # Build `app` on first access so importing this module never reads config
    global _default_app
    if name != "app":
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    if _default_app is None:
        _default_app = create_app()
    return _default_app
