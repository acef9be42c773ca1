# ABOUTME: The `omnireader ls` command for listing the library.
# ABOUTME: Displays a Rich table of all books, most recently added first.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from omnireader.cli.options import db_option, format_timestamp, open_store

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List all books in the library."""
    with open_store(db_path, console) as store:
        books = store.get_all_books()

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Type", width=5)
    table.add_column("Pages", justify="right")
    table.add_column("Last Read")

    for book in books:
        table.add_row(
            book.id,
            book.title,
            book.author or "[dim]unknown[/dim]",
            book.file_type.extension,
            str(book.total_pages),
            format_timestamp(book.last_read_at),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
