# ABOUTME: Shared pytest fixtures for OmniReader tests.
# ABOUTME: Provides sample EPUB/PDF files, an in-memory store, and a stored book.

from collections.abc import Iterator
from pathlib import Path

import pymupdf
import pytest
from ebooklib import epub

from omnireader.db.store import LibraryStore
from omnireader.models.book import Book, BookType

COVER_BYTES = b"\x89PNG\r\n\x1a\nfake-cover"


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """Create a minimal valid EPUB file with known metadata and a cover."""
    book = epub.EpubBook()

    book.set_identifier("test-isbn-978-0-123456-47-2")
    book.set_title("The Name of the Rose")
    book.set_language("en")
    book.add_author("Umberto Eco")
    book.set_cover("cover.png", COVER_BYTES, create_page=False)

    # Two chapters so the chapter count is distinguishable from the nav page
    chapters = []
    for number in (1, 2):
        chapter = epub.EpubHtml(
            title=f"Chapter {number}", file_name=f"chap0{number}.xhtml", lang="en",
        )
        chapter.content = (
            f"<html><body><h1>Chapter {number}</h1><p>Content.</p></body></html>"
        ).encode()
        book.add_item(chapter)
        chapters.append(chapter)

    book.toc = [
        epub.Link("chap01.xhtml", "Chapter 1", "chap01"),
        epub.Link("chap02.xhtml", "Chapter 2", "chap02"),
    ]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", *chapters]

    filepath = tmp_path / "name_of_the_rose.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def minimal_epub(tmp_path: Path) -> Path:
    """Create an EPUB with no author and no cover."""
    book = epub.EpubBook()
    book.set_identifier("minimal-id")
    book.set_title("Untitled Book")
    book.set_language("en")

    chapter = epub.EpubHtml(title="Content", file_name="content.xhtml", lang="en")
    chapter.content = b"<html><body><p>Minimal content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("content.xhtml", "Content", "content")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    filepath = tmp_path / "minimal.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """Create a corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath


@pytest.fixture
def sample_pdf(tmp_path: Path) -> Path:
    """Create a three-page PDF with title and author metadata."""
    doc = pymupdf.open()
    for number in range(1, 4):
        page = doc.new_page()
        page.insert_text((72, 72), f"Page {number}")
    doc.set_metadata({"title": "A Field Guide to Moss", "author": "Robin Kimmerer"})

    filepath = tmp_path / "moss.pdf"
    doc.save(str(filepath))
    doc.close()
    return filepath


@pytest.fixture
def untitled_pdf(tmp_path: Path) -> Path:
    """Create a one-page PDF with an empty info dictionary."""
    doc = pymupdf.open()
    doc.new_page()

    filepath = tmp_path / "scanned_notes.pdf"
    doc.save(str(filepath))
    doc.close()
    return filepath


@pytest.fixture
def corrupt_pdf(tmp_path: Path) -> Path:
    filepath = tmp_path / "broken.pdf"
    filepath.write_bytes(b"not a pdf at all")
    return filepath


@pytest.fixture
def store() -> Iterator[LibraryStore]:
    """Provide an empty in-memory LibraryStore."""
    library = LibraryStore.open_in_memory()
    yield library
    library.close()


@pytest.fixture
def stored_book(store: LibraryStore) -> Book:
    """A PDF book already inserted into the store fixture."""
    book = Book.new("Test Book", "Test Author", "/b.pdf", BookType.PDF, 100)
    store.insert_book(book)
    return book
