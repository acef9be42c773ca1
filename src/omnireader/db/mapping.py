# ABOUTME: Converts between OmniReader entities and SQLite row dictionaries.
# ABOUTME: Enumerations are persisted through fixed token tables, never by ordinal.

from typing import Any

from omnireader.errors import DatabaseError
from omnireader.models.annotation import Annotation, AnnotationType, ReadingPosition
from omnireader.models.book import Book, BookType

_BOOK_TYPE_TOKENS = {
    BookType.PDF: "pdf",
    BookType.EPUB: "epub",
}
_ANNOTATION_TYPE_TOKENS = {
    AnnotationType.HIGHLIGHT: "highlight",
    AnnotationType.NOTE: "note",
}
_TOKEN_BOOK_TYPES = {token: kind for kind, token in _BOOK_TYPE_TOKENS.items()}
_TOKEN_ANNOTATION_TYPES = {token: kind for kind, token in _ANNOTATION_TYPE_TOKENS.items()}

BOOK_COLUMNS = (
    "id", "title", "author", "file_path", "file_type",
    "cover_data", "added_at", "last_read_at", "total_pages",
)
ANNOTATION_COLUMNS = (
    "id", "book_id", "annotation_type", "start_percent", "end_percent",
    "page_number", "color", "selected_text", "note_text", "created_at",
)
POSITION_COLUMNS = ("book_id", "percent", "page_number", "updated_at")


def _parse_token(table: dict[str, Any], token: str, column: str) -> Any:
    try:
        return table[token]
    except KeyError:
        raise DatabaseError(f"Unrecognized {column} value in database: {token!r}") from None


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict suitable for INSERT."""
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "file_path": book.file_path,
        "file_type": _BOOK_TYPE_TOKENS[book.file_type],
        "cover_data": book.cover_data,
        "added_at": book.added_at,
        "last_read_at": book.last_read_at,
        "total_pages": book.total_pages,
    }


def row_to_book(row: Any) -> Book:
    """Convert a books row back to a Book.

    Raises:
        DatabaseError: If file_type holds a token outside the table.
    """
    cover = row["cover_data"]
    return Book(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        file_path=row["file_path"],
        file_type=_parse_token(_TOKEN_BOOK_TYPES, row["file_type"], "file_type"),
        cover_data=bytes(cover) if cover is not None else None,
        added_at=row["added_at"],
        last_read_at=row["last_read_at"],
        total_pages=row["total_pages"],
    )


def annotation_to_row(annotation: Annotation) -> dict[str, Any]:
    """Convert an Annotation to a dict suitable for INSERT."""
    return {
        "id": annotation.id,
        "book_id": annotation.book_id,
        "annotation_type": _ANNOTATION_TYPE_TOKENS[annotation.annotation_type],
        "start_percent": annotation.start_percent,
        "end_percent": annotation.end_percent,
        "page_number": annotation.page_number,
        "color": annotation.color,
        "selected_text": annotation.selected_text,
        "note_text": annotation.note_text,
        "created_at": annotation.created_at,
    }


def row_to_annotation(row: Any) -> Annotation:
    """Convert an annotations row back to an Annotation."""
    return Annotation(
        id=row["id"],
        book_id=row["book_id"],
        annotation_type=_parse_token(
            _TOKEN_ANNOTATION_TYPES, row["annotation_type"], "annotation_type",
        ),
        start_percent=row["start_percent"],
        end_percent=row["end_percent"],
        page_number=row["page_number"],
        color=row["color"],
        selected_text=row["selected_text"],
        note_text=row["note_text"],
        created_at=row["created_at"],
    )


def position_to_row(position: ReadingPosition) -> dict[str, Any]:
    return {
        "book_id": position.book_id,
        "percent": position.percent,
        "page_number": position.page_number,
        "updated_at": position.updated_at,
    }


def row_to_position(row: Any) -> ReadingPosition:
    return ReadingPosition(
        book_id=row["book_id"],
        percent=row["percent"],
        page_number=row["page_number"],
        updated_at=row["updated_at"],
    )
