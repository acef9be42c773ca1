# ABOUTME: Commands for creating, listing, and removing highlights and notes.
# ABOUTME: Annotations are never edited; remove and re-add to change one.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from omnireader.cli.options import db_option, open_store, require_book
from omnireader.models.annotation import Annotation, AnnotationType, HighlightColor

console = Console()

percent_type = click.FloatRange(0.0, 100.0)


def _store_annotation(db_path: Path | None, annotation: Annotation) -> None:
    with open_store(db_path, console) as store:
        require_book(store, annotation.book_id, console)
        store.insert_annotation(annotation)


@click.command("highlight")
@click.argument("book_id")
@click.argument("start", type=percent_type)
@click.argument("end", type=percent_type)
@click.option("--page", "page_number", type=click.IntRange(min=0), default=0)
@click.option(
    "--color",
    type=click.Choice([c.value for c in HighlightColor], case_sensitive=False),
    default=HighlightColor.default().value,
    show_default=True,
)
@click.option("--text", "selected_text", default=None, help="The highlighted passage.")
@db_option
def highlight(
    book_id: str,
    start: float,
    end: float,
    page_number: int,
    color: str,
    selected_text: str | None,
    db_path: Path | None,
) -> None:
    """Highlight the range START..END (percent through the book)."""
    try:
        annotation = Annotation.new_highlight(
            book_id, start, end, page_number, HighlightColor(color.lower()), selected_text,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    _store_annotation(db_path, annotation)
    console.print(f"Added highlight [dim]{annotation.id}[/dim]")


@click.command("note")
@click.argument("book_id")
@click.argument("percent", type=percent_type)
@click.argument("text")
@click.option("--page", "page_number", type=click.IntRange(min=0), default=0)
@db_option
def note(book_id: str, percent: float, text: str, page_number: int, db_path: Path | None) -> None:
    """Attach a note at PERCENT through the book."""
    annotation = Annotation.new_note(book_id, percent, page_number, text)
    _store_annotation(db_path, annotation)
    console.print(f"Added note [dim]{annotation.id}[/dim]")


@click.command("annotations")
@click.argument("book_id")
@db_option
def annotations(book_id: str, db_path: Path | None) -> None:
    """List a book's highlights and notes in reading order."""
    with open_store(db_path, console) as store:
        book = require_book(store, book_id, console)
        items = store.get_annotations(book_id)

    if not items:
        console.print(f"[yellow]No annotations for {book.title}.[/yellow]")
        return

    table = Table(title=book.title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Where", justify="right")
    table.add_column("Page", justify="right")
    table.add_column("Text")

    for item in items:
        if item.annotation_type is AnnotationType.HIGHLIGHT:
            where = f"{item.start_percent:g}-{item.end_percent:g}%"
            text = item.selected_text or ""
            kind = f"[on {item.color}] [/] highlight"
        else:
            where = f"{item.start_percent:g}%"
            text = item.note_text or ""
            kind = "note"
        table.add_row(item.id, kind, where, str(item.page_number), text)

    console.print(table)


@click.command("unannotate")
@click.argument("annotation_id")
@db_option
def unannotate(annotation_id: str, db_path: Path | None) -> None:
    """Remove a highlight or note by its ID."""
    with open_store(db_path, console) as store:
        store.delete_annotation(annotation_id)
    console.print(f"Removed annotation [dim]{annotation_id}[/dim]")
