# ABOUTME: Ingestion pipeline that turns parsed BookMetadata into persisted Books.
# ABOUTME: Resolves the file type, deduplicates by path, and records per-file errors.

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from omnireader.db.store import LibraryStore
from omnireader.errors import (
    BookFileNotFoundError,
    DuplicateBookError,
    OmniReaderError,
    UnsupportedFormatError,
)
from omnireader.formats.epub import read_epub_metadata
from omnireader.formats.pdf import read_pdf_metadata
from omnireader.models.book import Book, BookMetadata, BookType

logger = logging.getLogger(__name__)

# Type for the extraction callback: takes a book file path -> BookMetadata
MetadataExtractor = Callable[[Path], BookMetadata]


@dataclass
class ImportResult:
    """Summary of an import operation."""

    added: int = 0
    skipped: int = 0
    errors: int = 0
    books: list[Book] = field(default_factory=list)
    error_details: list[tuple[Path, str]] = field(default_factory=list)


def detect_book_type(path: Path) -> BookType:
    """Determine the book type from the file extension.

    Raises:
        UnsupportedFormatError: If the extension is not pdf or epub.
    """
    book_type = BookType.from_path(path)
    if book_type is None:
        raise UnsupportedFormatError(path.suffix.lstrip("."))
    return book_type


def extract_metadata(path: Path) -> BookMetadata:
    """Run the parser that matches the file's type.

    Raises:
        BookFileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not supported.
        ParseError: If the parser cannot read the file.
    """
    book_type = detect_book_type(path)
    if not path.exists():
        raise BookFileNotFoundError(str(path))

    if book_type is BookType.EPUB:
        return read_epub_metadata(path)
    return read_pdf_metadata(path)


def book_from_metadata(path: Path, metadata: BookMetadata) -> Book:
    """Build a new Book for path seeded from parser metadata.

    The title falls back to the file stem when the parser found none.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
    """
    book_type = detect_book_type(path)
    title = metadata.title.strip() if metadata.title else ""
    author = metadata.author.strip() if metadata.author else ""

    book = Book.new(
        title=title or path.stem,
        author=author or None,
        file_path=str(path),
        file_type=book_type,
        total_pages=metadata.total_pages,
    )
    if metadata.has_cover:
        book.cover_data = metadata.cover_data
    return book


def import_book(
    path: Path,
    store: LibraryStore,
    *,
    extractor: MetadataExtractor = extract_metadata,
) -> Book | None:
    """Add one book file to the library.

    Returns the stored Book, or None when a book with the same absolute path
    is already cataloged.

    Raises:
        OmniReaderError: Any taxonomy error from extraction or storage.
    """
    path = path.expanduser().resolve()
    file_path = str(path)

    # Check for duplicate before parsing (cheaper)
    if store.book_exists_by_path(file_path):
        logger.debug("Skipping %s: already in library", path)
        return None

    metadata = extractor(path)
    book = book_from_metadata(path, metadata)

    try:
        store.insert_book(book)
    except DuplicateBookError:
        # Another caller inserted the same path between the check and the insert
        logger.debug("Skipping %s: inserted concurrently", path)
        return None

    logger.info("Imported %s as %s", path, book.id)
    return book


def import_books(
    paths: list[Path],
    store: LibraryStore,
    *,
    extractor: MetadataExtractor = extract_metadata,
) -> ImportResult:
    """Import several book files, collecting failures instead of raising.

    Args:
        paths: Book files to import.
        store: The library to add them to.
        extractor: Metadata extraction callback, mainly for tests.

    Returns:
        ImportResult with counts of added, skipped, and errored files.
    """
    result = ImportResult()

    for path in paths:
        try:
            book = import_book(path, store, extractor=extractor)
        except OmniReaderError as exc:
            logger.warning("Failed to import %s: %s", path, exc)
            result.errors += 1
            result.error_details.append((path, str(exc)))
            continue

        if book is None:
            result.skipped += 1
        else:
            result.added += 1
            result.books.append(book)

    return result


def find_book_files(directory: Path) -> list[Path]:
    """Recursively find all supported book files in a directory."""
    return sorted(
        p for p in directory.rglob("*")
        if p.is_file() and BookType.from_path(p) is not None
    )
