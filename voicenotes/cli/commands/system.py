"""
System Commands.

Show application identity and the validated configuration. None of these
commands need a running server.
"""

from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from voicenotes.backend.core.config import AppConfig, get_app_config

app = typer.Typer(help="System information commands")
console = Console()


def _load_config() -> AppConfig:
    try:
        return get_app_config()
    except (OSError, RuntimeError, ValueError) as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)


def _add_branch(parent: Tree, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, dict):
            _add_branch(parent.add(f"[cyan]{key}[/cyan]"), value)
        else:
            parent.add(f"[cyan]{key}[/cyan]: {value}")


@app.command()
def info() -> None:
    """
    Display application information.
    """
    application = _load_config().application
    console.print(Panel(
        f"[bold]{application.name}[/bold] v{application.version}\n"
        f"{application.description}\n"
        f"Environment: {application.environment}  API prefix: {application.api_prefix}",
        title="Application Info",
    ))


@app.command()
def config(
    section: Optional[str] = typer.Argument(None, help="Section to show (application, logging, messaging)"),
) -> None:
    """
    Display configuration settings, all sections or just one.

    Examples:
        cli.py system config
        cli.py system config messaging
    """
    sections = _load_config().as_dict()

    if section is not None and section not in sections:
        console.print(f"[red]Unknown section: {section}[/red]")
        console.print(f"Available sections: {', '.join(sections)}")
        raise typer.Exit(1)

    for name in [section] if section else list(sections):
        tree = Tree(f"[bold cyan]{name}[/bold cyan]")
        _add_branch(tree, sections[name])
        console.print(tree)


@app.command()
def version() -> None:
    """
    Display version information.
    """
    console.print(f"[bold]{_load_config().application.version}[/bold]")
