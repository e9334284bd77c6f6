"""
CLI Commands.

Organized by domain/feature area.
"""

from voicenotes.cli.commands.health import app as health_app
from voicenotes.cli.commands.notes import app as notes_app
from voicenotes.cli.commands.server import app as server_app
from voicenotes.cli.commands.system import app as system_app

__all__ = [
    "health_app",
    "notes_app",
    "server_app",
    "system_app",
]
