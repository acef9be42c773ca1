# ABOUTME: The `omnireader position` command for showing or saving reading progress.
# ABOUTME: Saving overwrites the book's previous position.

from pathlib import Path

import click
from rich.console import Console

from omnireader.cli.options import db_option, format_timestamp, open_store, require_book
from omnireader.models.annotation import ReadingPosition

console = Console()


@click.command("position")
@click.argument("book_id")
@click.argument("percent", type=click.FloatRange(0.0, 100.0), required=False)
@click.option("--page", "page_number", type=click.IntRange(min=0), default=0)
@db_option
def position(
    book_id: str, percent: float | None, page_number: int, db_path: Path | None,
) -> None:
    """Show the reading position, or save PERCENT as the new one."""
    with open_store(db_path, console) as store:
        book = require_book(store, book_id, console)

        if percent is not None:
            store.save_reading_position(ReadingPosition.new(book_id, percent, page_number))
            console.print(f"Saved [bold]{book.title}[/bold] at {percent:g}% (page {page_number})")
            return

        current = store.get_reading_position(book_id)

    if current is None:
        console.print(f"[yellow]{book.title} has no saved position.[/yellow]")
        return

    console.print(
        f"[bold]{book.title}[/bold]: {current.percent:g}% "
        f"(page {current.page_number}, saved {format_timestamp(current.updated_at)})"
    )
