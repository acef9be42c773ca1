# ABOUTME: EPUB metadata extraction using ebooklib.
# ABOUTME: Produces the BookMetadata the library ingests; tolerant of sparse metadata.

import logging
from pathlib import Path

import ebooklib
from ebooklib import epub

from omnireader.errors import BookFileNotFoundError, ParseError
from omnireader.models.book import BookMetadata

logger = logging.getLogger(__name__)


def _get_metadata_value(book: epub.EpubBook, namespace: str, name: str) -> str | None:
    """Extract a single metadata value from an EpubBook, or None if missing."""
    values = book.get_metadata(namespace, name)
    if not values:
        return None
    # Metadata entries are tuples of (value, attributes)
    value = values[0][0]
    return str(value).strip() if value else None


def _extract_cover_image(book: epub.EpubBook) -> bytes | None:
    """Extract cover image data from an EPUB, if present."""
    cover_id = None
    meta_entries = book.get_metadata("OPF", "cover")
    if meta_entries:
        cover_id = meta_entries[0][1].get("content")

    if cover_id:
        cover_item = book.get_item_with_id(cover_id)
        if cover_item:
            return cover_item.get_content()

    # Fallback: any image item with "cover" in its id or filename
    for item in book.get_items_of_type(ebooklib.ITEM_IMAGE):
        item_id = item.get_id() or ""
        item_name = item.get_name() or ""
        if "cover" in item_id.lower() or "cover" in item_name.lower():
            return item.get_content()

    for item in book.get_items_of_type(ebooklib.ITEM_COVER):
        return item.get_content()

    return None


def _count_chapters(book: epub.EpubBook) -> int:
    """Count the content documents in the spine, excluding the nav page."""
    count = 0
    for entry in book.spine:
        item_id = entry[0] if isinstance(entry, tuple) else entry
        if item_id == "nav":
            continue
        count += 1
    return count


def read_epub_metadata(path: Path) -> BookMetadata:
    """Extract metadata from an EPUB file.

    The title falls back to the file stem. total_pages holds the number of
    chapter documents in the spine.

    Raises:
        BookFileNotFoundError: If the file does not exist.
        ParseError: If the file cannot be read as an EPUB.
    """
    if not path.exists():
        raise BookFileNotFoundError(str(path))

    try:
        book = epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise ParseError(f"Failed to open EPUB: {path}: {exc}") from exc

    title = _get_metadata_value(book, "DC", "title")
    if not title:
        logger.debug("No title in %s, using file name", path)
        title = path.stem

    return BookMetadata(
        title=title,
        author=_get_metadata_value(book, "DC", "creator"),
        cover_data=_extract_cover_image(book),
        total_pages=_count_chapters(book),
    )
