"""
Centralized Logging Configuration.

structlog on top of stdlib logging, configured from the validated
config/settings/logging.yaml. Every module logs through get_logger().

JSON records carry: timestamp, level, logger, event, func_name, lineno,
plus whatever is bound in structlog contextvars (request_id, frontend,
method, path inside an HTTP request) and the explicit `source` field set
by log_with_source() outside of one.

Usage:
    from voicenotes.backend.core.logging import get_logger, log_with_source, setup_logging

    setup_logging(level="DEBUG", format_type="console")
    logger = get_logger(__name__)
    logger.info("Note stored", extra={"note_id": 3})
    log_with_source(logger, "cli", "info", "Note deleted", note_id=3)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from voicenotes.backend.core.config import find_project_root, get_app_config
from voicenotes.backend.core.config_schema import LoggingSchema

VALID_SOURCES = frozenset({"web", "cli", "client", "api", "internal", "unknown"})
"""Values accepted for the `source` field. Callers set it explicitly."""

# Chatty third-party loggers kept at WARNING regardless of the app level
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve the log file path relative to project root."""
    return find_project_root() / configured_path


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor, pre_chain: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _build_handlers(
    settings: LoggingSchema,
    format_type: str,
    console_enabled: bool,
    file_enabled: bool,
    pre_chain: list[Processor],
) -> list[logging.Handler]:
    """Console handler in the requested format, file handler always JSON."""
    handlers: list[logging.Handler] = []
    json_formatter = _formatter(structlog.processors.JSONRenderer(), pre_chain)

    if console_enabled:
        console = logging.StreamHandler(sys.stdout)
        if format_type == "console":
            console.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=True), pre_chain))
        else:
            console.setFormatter(json_formatter)
        handlers.append(console)

    if file_enabled:
        file_settings = settings.handlers.file
        log_path = _resolve_log_path(file_settings.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=file_settings.max_bytes,
            backupCount=file_settings.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        handlers.append(file_handler)

    return handlers


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Arguments left as None fall back to logging.yaml. Calling this again
    replaces the root handlers, so the CLI can raise verbosity after import.

    Args:
        level: Log level name (DEBUG, INFO, ...)
        format_type: 'json' or 'console'
        enable_console: Write to stdout
        enable_file_logging: Write JSON lines to the configured rotating file
    """
    settings = get_app_config().logging
    pre_chain = _shared_processors()

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers = _build_handlers(
        settings,
        format_type=format_type or settings.format,
        console_enabled=settings.handlers.console.enabled if enable_console is None else enable_console,
        file_enabled=settings.handlers.file.enabled if enable_file_logging is None else enable_file_logging,
        pre_chain=pre_chain,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, (level or settings.level).upper()))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log with an explicit `source` field (cli, client, ...).

    Raises:
        AttributeError: If level is not a logger method
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
