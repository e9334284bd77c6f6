"""
Note Commands.

Drive the client note store against a running backend: list and search
saved notes, save transcripts, edit, delete and share them.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from voicenotes.backend.core.exceptions import ApplicationError
from voicenotes.backend.models.note import Note
from voicenotes.client.api import APIClient, NotesAPIClient
from voicenotes.client.backends import ApiNoteBackend
from voicenotes.client.store import Notification, NoteStore
from voicenotes.client.view import SortOrder

app = typer.Typer(help="Note commands (requires running server)")
console = Console()

T = TypeVar("T")


def _print_notification(notification: Notification) -> None:
    color = "green" if notification.variant == "success" else "red"
    console.print(f"[{color}]{notification.title}:[/{color}] {notification.description}")


def _make_store() -> NoteStore:
    """Build a store backed by the notes API."""
    client = NotesAPIClient(APIClient(frontend="cli"))
    return NoteStore(ApiNoteBackend(client), notify=_print_notification)


def _run(operation: Callable[[NoteStore], Awaitable[T]]) -> T:
    """Run an async store operation, turning application errors into exit code 1."""

    async def runner() -> T:
        store = _make_store()
        try:
            return await operation(store)
        finally:
            await store.backend.close()

    try:
        return asyncio.run(runner())
    except ApplicationError as e:
        # The store has already reported the failure through its notifier
        console.print(f"[dim]{e.code}[/dim]")
        raise typer.Exit(1)


def _display_notes(notes: list[Note], title: str) -> None:
    if not notes:
        console.print("[dim]No notes yet. Your saved notes will appear here.[/dim]")
        return

    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Content")
    table.add_column("Created")

    for note in notes:
        table.add_row(
            str(note.id),
            note.title,
            note.content,
            note.created_at.strftime("%b %d, %Y %H:%M"),
        )
    console.print(table)


@app.command("list")
def list_notes(
    query: str = typer.Option("", "--query", "-q", help="Case-insensitive search over title and content"),
    order: SortOrder = typer.Option(SortOrder.DESC, "--order", "-o", help="Sort by creation time"),
) -> None:
    """
    List saved notes, optionally filtered and sorted.

    Examples:
        cli.py notes list
        cli.py notes list -q flight --order asc
    """

    async def operation(store: NoteStore) -> list[Note]:
        await store.refresh()
        store.search(query)
        if order is not store.sort_order:
            store.toggle_sort_order()
        return store.filtered_notes

    notes = _run(operation)
    label = "Newest first" if order is SortOrder.DESC else "Oldest first"
    _display_notes(notes, f"Saved Notes ({label})")


@app.command()
def add(
    transcript: str = typer.Argument(..., help="Transcript text to save"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Title (defaults to the first words)"),
) -> None:
    """
    Save a transcript as a note.

    Examples:
        cli.py notes add "remind me to book a flight"
        cli.py notes add "milk eggs bread" --title Groceries
    """
    note = _run(lambda store: store.save_transcript(transcript, title=title))
    console.print(f"[dim]Saved note {note.id}: {note.title}[/dim]")


@app.command()
def edit(
    note_id: int = typer.Argument(..., help="Note ID"),
    title: str = typer.Option(..., "--title", "-t", help="New title"),
    content: str = typer.Option(..., "--content", "-c", help="New content"),
) -> None:
    """
    Replace a note's title and content.

    Examples:
        cli.py notes edit 3 --title Ideas --content "book a flight"
    """
    _run(lambda store: store.update_note(note_id, title, content))


@app.command()
def delete(
    note_id: int = typer.Argument(..., help="Note ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Delete a note.

    Examples:
        cli.py notes delete 3 --yes
    """
    if not yes and not typer.confirm("Are you sure you want to delete this note?"):
        raise typer.Abort()
    _run(lambda store: store.delete_note(note_id))


@app.command()
def share(
    note_id: int = typer.Argument(..., help="Note ID"),
    recipient: str = typer.Option(..., "--to", help="Phone number in international format"),
    voice: bool = typer.Option(False, "--voice", help="Send as a voice call instead of text"),
    voice_type: str = typer.Option("woman", "--voice-type", help="Voice used for voice calls"),
) -> None:
    """
    Share a note by (simulated) text message or voice call.

    Examples:
        cli.py notes share 3 --to +15551234567
        cli.py notes share 3 --to +15551234567 --voice --voice-type man
    """

    async def operation(store: NoteStore) -> dict:
        api = store.backend.client
        try:
            note = await api.get_note(note_id)
            return await api.send_message(
                recipient,
                note.content,
                message_type="voice" if voice else "text",
                voice_type=voice_type,
            )
        except ApplicationError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            raise

    result = _run(operation)
    console.print(f"[green]Message Sent:[/green] {result['message']}")
