# ABOUTME: Shared Click options and helpers for OmniReader CLI commands.
# ABOUTME: Provides the --db flag, store opening, and book lookup with consistent error exits.

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console

from omnireader.db.connection import DEFAULT_DB_PATH
from omnireader.db.store import LibraryStore
from omnireader.errors import OmniReaderError
from omnireader.models.book import Book

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to library database (default: {DEFAULT_DB_PATH})",
)


@contextmanager
def open_store(db_path: Path | None, console: Console) -> Iterator[LibraryStore]:
    """Open the library for one command, exiting with status 1 on any library error.

    Covers both opening the database and every store call made in the body.
    """
    try:
        with LibraryStore.open(db_path or DEFAULT_DB_PATH) as store:
            yield store
    except OmniReaderError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc


def require_book(store: LibraryStore, book_id: str, console: Console) -> Book:
    """Fetch a book or exit with status 1 if it does not exist."""
    book = store.get_book(book_id)
    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)
    return book


def format_timestamp(value: int | None) -> str:
    if value is None:
        return "never"
    return datetime.fromtimestamp(value).strftime("%Y-%m-%d %H:%M")
