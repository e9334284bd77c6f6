"""
Configuration Management.

Every setting lives in a YAML file under config/settings/ and is validated
against its schema in config_schema.py when AppConfig is built:

    application.yaml   identity, server, api prefix, cors, timeouts
    logging.yaml       level, renderer, handlers
    messaging.yaml     messaging stub (provider, simulated delay)

The project root is the nearest ancestor of the working directory that
contains a `.project_root` marker.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from voicenotes.backend.core.config_schema import (
    ApplicationSchema,
    LoggingSchema,
    MessagingSchema,
)

PROJECT_MARKER = ".project_root"
SETTINGS_DIR = Path("config") / "settings"

SECTIONS: dict[str, type[BaseModel]] = {
    "application": ApplicationSchema,
    "logging": LoggingSchema,
    "messaging": MessagingSchema,
}


def find_project_root() -> Path:
    """
    Walk up from the working directory to the `.project_root` marker.

    Raises:
        RuntimeError: If no ancestor carries the marker
    """
    cwd = Path.cwd()
    for candidate in (cwd, *cwd.parents):
        if (candidate / PROJECT_MARKER).exists():
            return candidate
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """find_project_root() for entry points: exits with a message instead of raising."""
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """
    Read one settings file. An empty file yields {}.

    Raises:
        FileNotFoundError: If config/settings/<filename> does not exist
    """
    config_path = find_project_root() / SETTINGS_DIR / filename
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_section(name: str) -> BaseModel:
    filename = f"{name}.yaml"
    try:
        return SECTIONS[name](**load_yaml_config(filename))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


class AppConfig:
    """
    Validated settings, one typed section per YAML file.

    All files are read and validated in the constructor, so a bad file
    fails at startup rather than on first use.
    """

    def __init__(self) -> None:
        self._sections = {name: _load_section(name) for name in SECTIONS}

    @property
    def application(self) -> ApplicationSchema:
        return self._sections["application"]

    @property
    def logging(self) -> LoggingSchema:
        return self._sections["logging"]

    @property
    def messaging(self) -> MessagingSchema:
        return self._sections["messaging"]

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Plain-data view of every section, for display."""
        return {name: section.model_dump() for name, section in self._sections.items()}


@lru_cache
def get_app_config() -> AppConfig:
    """Process-wide configuration, loaded once."""
    return AppConfig()


def get_server_base_url() -> tuple[str, float]:
    """Return (base_url, timeout_seconds) for clients of the local server."""
    app = get_app_config().application
    return f"http://{app.server.host}:{app.server.port}", float(app.timeouts.external_api)
