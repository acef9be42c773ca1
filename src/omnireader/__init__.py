# ABOUTME: OmniReader - local persistence core for a personal ebook reader.
# ABOUTME: Re-exports the entities, the LibraryStore, and the error taxonomy.

from omnireader.db.store import LibraryStore
from omnireader.errors import (
    BookFileNotFoundError,
    DatabaseError,
    DuplicateBookError,
    ErrorKind,
    LibraryIOError,
    OmniReaderError,
    ParseError,
    UnsupportedFormatError,
)
from omnireader.models import (
    Annotation,
    AnnotationType,
    Book,
    BookMetadata,
    BookType,
    HighlightColor,
    ReadingPosition,
)

__all__ = [
    "Annotation",
    "AnnotationType",
    "Book",
    "BookFileNotFoundError",
    "BookMetadata",
    "BookType",
    "DatabaseError",
    "DuplicateBookError",
    "ErrorKind",
    "HighlightColor",
    "LibraryIOError",
    "LibraryStore",
    "OmniReaderError",
    "ParseError",
    "ReadingPosition",
    "UnsupportedFormatError",
]
