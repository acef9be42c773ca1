# ABOUTME: Book entity, its file-type enumeration, and the parser-facing BookMetadata.
# ABOUTME: Pure value types; no I/O happens here.

import time
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class BookType(Enum):
    """Supported ebook file types, valued by their lowercase extension."""

    PDF = "pdf"
    EPUB = "epub"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_extension(cls, ext: str) -> "BookType | None":
        """Parse a file extension (case-insensitive, leading dot allowed).

        Returns None for anything that is not a supported format.
        """
        token = ext.lower().lstrip(".")
        return _EXTENSION_TABLE.get(token)

    @classmethod
    def from_path(cls, path: Path | str) -> "BookType | None":
        return cls.from_extension(Path(path).suffix)


_EXTENSION_TABLE = {
    "pdf": BookType.PDF,
    "epub": BookType.EPUB,
}


@dataclass
class BookMetadata:
    """What a document parser hands to the library when a file is ingested.

    Every field except total_pages is optional: a PDF with an empty info
    dictionary still produces a usable value, and ingestion falls back to the
    file name for the title.
    """

    title: str | None = None
    author: str | None = None
    cover_data: bytes | None = None
    total_pages: int = 0

    @property
    def has_cover(self) -> bool:
        """Whether cover image data is present."""
        return self.cover_data is not None and len(self.cover_data) > 0


@dataclass
class Book:
    """A library item."""

    id: str
    title: str
    author: str | None
    file_path: str
    file_type: BookType
    cover_data: bytes | None
    added_at: int
    last_read_at: int | None
    total_pages: int

    @classmethod
    def new(
        cls,
        title: str,
        author: str | None,
        file_path: str,
        file_type: BookType,
        total_pages: int,
    ) -> "Book":
        """Create a book with a fresh UUID and added_at stamped to now.

        The file path is taken as given; callers confirm it exists before
        building the book.

        Raises:
            ValueError: If the title is blank or total_pages is negative.
        """
        if not title or not title.strip():
            raise ValueError("Book title must not be empty")
        if total_pages < 0:
            raise ValueError(f"total_pages must be non-negative, got {total_pages}")

        return cls(
            id=str(uuid.uuid4()),
            title=title,
            author=author,
            file_path=file_path,
            file_type=file_type,
            cover_data=None,
            added_at=int(time.time()),
            last_read_at=None,
            total_pages=total_pages,
        )
