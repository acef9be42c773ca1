# ABOUTME: The `omnireader import` command for adding PDF and EPUB files.
# ABOUTME: Accepts files or directories, extracts metadata, and stores books.

from pathlib import Path

import click
from rich.console import Console

from omnireader.cli.options import db_option, open_store
from omnireader.core.importer import find_book_files, import_books

console = Console()


def _collect_paths(paths: tuple[Path, ...]) -> list[Path]:
    """Expand directories into the book files they contain."""
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(find_book_files(path))
        else:
            collected.append(path)
    return collected


@click.command("import")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@db_option
def import_command(paths: tuple[Path, ...], db_path: Path | None) -> None:
    """Add PDF and EPUB files (or directories of them) to the library."""
    book_files = _collect_paths(paths)

    if not book_files:
        console.print("[yellow]No PDF or EPUB files found.[/yellow]")
        return

    console.print(f"Found [bold]{len(book_files)}[/bold] book file(s)\n")

    with open_store(db_path, console) as store:
        result = import_books(book_files, store)

    for book in result.books:
        console.print(f"  [green]+[/green] {book.title} [dim]{book.id}[/dim]")

    parts = []
    if result.added:
        parts.append(f"[green]{result.added} added[/green]")
    if result.skipped:
        parts.append(f"[yellow]{result.skipped} skipped[/yellow]")
    if result.errors:
        parts.append(f"[red]{result.errors} error(s)[/red]")

    console.print(", ".join(parts))

    if result.error_details:
        console.print(
            f"\n[yellow]{result.errors} file(s) could not be imported:[/yellow]"
        )
        for path, msg in result.error_details:
            console.print(f"  [dim]{path.name}:[/dim] {msg}")
