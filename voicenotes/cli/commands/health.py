"""
Health Check Commands.

Query the health endpoints of a running server.
"""

import asyncio
from typing import Any

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from voicenotes.client.api import APIClient

app = typer.Typer(help="Health check commands (requires running server)")
console = Console()


async def _fetch(path: str) -> httpx.Response:
    client = APIClient(frontend="cli")
    try:
        return await client.get(path)
    finally:
        await client.close()


def _fetch_or_exit(path: str) -> httpx.Response:
    try:
        return asyncio.run(_fetch(path))
    except httpx.HTTPError as e:
        console.print(f"[red]Cannot connect to backend ({e})[/red]")
        console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        raise typer.Exit(1)


def _colored(status: str, text: str | None = None) -> str:
    color = "green" if status == "healthy" else "red"
    return f"[{color}]{text or status}[/{color}]"


def _check_details(check: dict[str, Any]) -> str:
    parts = [
        f"{key}: {check[key]}"
        for key in ("notes", "latency_ms", "error")
        if key in check
    ]
    return ", ".join(parts) or "-"


@app.command()
def status(
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Show per-component checks"),
) -> None:
    """
    Check backend health status.

    Exits 1 when the backend reports itself unhealthy.

    Examples:
        cli.py health status
        cli.py health status -d
    """
    response = _fetch_or_exit("/health/detailed" if detailed else "/health/ready")
    if response.status_code not in (200, 503):
        console.print(f"[red]Unexpected response: {response.status_code}[/red]")
        raise typer.Exit(1)

    report = response.json()
    # HTTPException bodies wrap the report in "detail"
    report = report.get("detail", report)
    overall = report.get("status", "unknown")

    if detailed:
        table = Table(title="Health Status", show_header=True)
        table.add_column("Component", style="cyan")
        table.add_column("Status")
        table.add_column("Details")
        for component, check in report.get("checks", {}).items():
            table.add_row(component, _colored(check.get("status", "unknown")), _check_details(check))
        console.print(table)

        application = report.get("application", {})
        if application:
            console.print(f"[dim]{application.get('name')} v{application.get('version')}[/dim]")
    else:
        console.print(Panel(_colored(overall, overall.upper()), title="Backend Status"))

    if overall != "healthy":
        raise typer.Exit(1)


@app.command()
def ping() -> None:
    """
    Check that the backend answers at all.

    Examples:
        cli.py health ping
    """
    try:
        response = asyncio.run(_fetch("/health"))
    except httpx.HTTPError:
        console.print("[red]✗ Backend is not reachable[/red]")
        raise typer.Exit(1)

    if response.status_code == 200:
        console.print("[green]✓ Backend is reachable[/green]")
    else:
        console.print(f"[yellow]Backend responded with status {response.status_code}[/yellow]")
