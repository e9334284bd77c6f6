"""
Server Commands.

Run the notes API under uvicorn in a child process.
"""

import subprocess
import sys

import typer
from rich.console import Console

from voicenotes.backend.core.config import get_app_config

app = typer.Typer(help="Server management commands")
console = Console()

APP_IMPORT_PATH = "voicenotes.backend.main:app"


def _uvicorn_command(host: str, port: int, reload: bool) -> list[str]:
    command = [sys.executable, "-m", "uvicorn", APP_IMPORT_PATH, "--host", host, "--port", str(port)]
    return command + ["--reload"] if reload else command


@app.command()
def start(
    host: str = typer.Option(None, "--host", "-h", help="Bind address (default from application.yaml)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from application.yaml)"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Restart on code changes"),
) -> None:
    """
    Start the notes API server.

    Examples:
        cli.py server start
        cli.py server start -r
        cli.py server start -h 0.0.0.0 -p 8080
    """
    try:
        defaults = get_app_config().application.server
    except (OSError, RuntimeError, ValueError) as e:
        console.print(f"[red]Cannot start server, configuration failed to load: {e}[/red]")
        raise typer.Exit(1)

    bind_host = host or defaults.host
    bind_port = port or defaults.port
    mode = " (reload)" if reload else ""
    console.print(f"[bold]Serving notes API on http://{bind_host}:{bind_port}{mode}[/bold]")
    console.print("[dim]Ctrl+C stops the server[/dim]\n")

    try:
        subprocess.run(_uvicorn_command(bind_host, bind_port, reload), check=True)
    except KeyboardInterrupt:
        console.print("\n[dim]Server stopped[/dim]")
    except subprocess.CalledProcessError as e:
        console.print(f"[red]uvicorn exited with code {e.returncode}[/red]")
        raise typer.Exit(e.returncode)
