"""
Voice Notes CLI.

    voicenotes server start --reload
    voicenotes health status -d
    voicenotes notes list -q flight -o ASC
    voicenotes notes add "remind me to book a flight"
    voicenotes system config logging

Logging stays as configured in logging.yaml unless -v or -d raises it.
"""

import typer
from rich.console import Console

from voicenotes.backend.core.config import validate_project_root
from voicenotes.backend.core.logging import setup_logging
from voicenotes.cli.commands import health_app, notes_app, server_app, system_app

app = typer.Typer(
    name="voicenotes",
    help="Voice Notes CLI - server management, health checks and note commands.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()

for group, name in (
    (server_app, "server"),
    (health_app, "health"),
    (system_app, "system"),
    (notes_app, "notes"),
):
    app.add_typer(group, name=name)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO to the console"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Log at DEBUG to the console"),
) -> None:
    """
    Voice Notes CLI: run the notes server and manage notes against it.
    """
    validate_project_root()

    level = "DEBUG" if debug else "INFO" if verbose else None
    if level is not None:
        setup_logging(level=level, format_type="console")
    if debug:
        console.print("[dim]Debug mode enabled[/dim]")


if __name__ == "__main__":
    app()
