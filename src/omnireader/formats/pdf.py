# ABOUTME: PDF metadata extraction using PyMuPDF.
# ABOUTME: Reads the info dictionary and page count, and renders page one as the cover.

import logging
from pathlib import Path

import pymupdf

from omnireader.errors import BookFileNotFoundError, ParseError
from omnireader.models.book import BookMetadata

logger = logging.getLogger(__name__)

# Cover thumbnails are rendered at a fraction of the page's native size.
COVER_SCALE = 0.5


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _render_cover(doc: pymupdf.Document) -> bytes | None:
    """Render the first page as PNG bytes, or None if that fails."""
    if doc.page_count == 0:
        return None
    try:
        pixmap = doc[0].get_pixmap(matrix=pymupdf.Matrix(COVER_SCALE, COVER_SCALE))
        return pixmap.tobytes("png")
    except Exception as exc:
        logger.warning("Could not render cover for %s: %s", doc.name, exc)
        return None


def read_pdf_metadata(path: Path) -> BookMetadata:
    """Extract metadata from a PDF file.

    Raises:
        BookFileNotFoundError: If the file does not exist.
        ParseError: If the file cannot be opened as a PDF.
    """
    if not path.exists():
        raise BookFileNotFoundError(str(path))

    try:
        doc = pymupdf.open(str(path))
    except Exception as exc:
        raise ParseError(f"Failed to load PDF: {path}: {exc}") from exc

    with doc:
        info = doc.metadata or {}
        title = _clean(info.get("title"))
        if not title:
            logger.debug("No title in %s, using file name", path)
            title = path.stem

        return BookMetadata(
            title=title,
            author=_clean(info.get("author")),
            cover_data=_render_cover(doc),
            total_pages=doc.page_count,
        )
