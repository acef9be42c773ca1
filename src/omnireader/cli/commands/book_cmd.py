# ABOUTME: The `omnireader rm` and `omnireader open` commands.
# ABOUTME: Deletes a book (with its annotations and position) or marks it as read now.

from pathlib import Path

import click
from rich.console import Console

from omnireader.cli.options import db_option, open_store, require_book

console = Console()


@click.command("rm")
@click.argument("book_id")
@db_option
def rm(book_id: str, db_path: Path | None) -> None:
    """Remove a book and everything attached to it from the library."""
    with open_store(db_path, console) as store:
        book = require_book(store, book_id, console)
        store.delete_book(book_id)

    console.print(f"Removed [bold]{book.title}[/bold].")


@click.command("open")
@click.argument("book_id")
@db_option
def open_book(book_id: str, db_path: Path | None) -> None:
    """Record that a book was opened for reading."""
    with open_store(db_path, console) as store:
        book = require_book(store, book_id, console)
        store.update_last_read(book_id)
        position = store.get_reading_position(book_id)

    console.print(f"Opened [bold]{book.title}[/bold]")
    if position is not None:
        console.print(f"Resume at {position.percent:g}% (page {position.page_number})")
    console.print(f"[dim]{book.file_path}[/dim]")
