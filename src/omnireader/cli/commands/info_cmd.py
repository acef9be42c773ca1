# ABOUTME: The `omnireader info` command for displaying one book in detail.
# ABOUTME: Shows stored fields, reading position, and annotation count.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from omnireader.cli.options import db_option, format_timestamp, open_store, require_book

console = Console()


@click.command("info")
@click.argument("book_id")
@db_option
def info(book_id: str, db_path: Path | None) -> None:
    """Show details for a book by ID."""
    with open_store(db_path, console) as store:
        book = require_book(store, book_id, console)
        position = store.get_reading_position(book_id)
        annotation_count = len(store.get_annotations(book_id))

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", book.id)
    table.add_row("Title", book.title)
    table.add_row("Author", book.author or "unknown")
    table.add_row("Type", book.file_type.extension)
    table.add_row("Pages", str(book.total_pages))
    table.add_row("File", book.file_path)
    table.add_row("Cover", "yes" if book.cover_data else "no")
    table.add_row("Added", format_timestamp(book.added_at))
    table.add_row("Last Read", format_timestamp(book.last_read_at))
    if position is not None:
        table.add_row("Position", f"{position.percent:g}% (page {position.page_number})")
    table.add_row("Annotations", str(annotation_count))

    console.print(table)
