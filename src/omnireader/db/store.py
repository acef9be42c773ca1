# ABOUTME: Typed CRUD for books, annotations, and reading positions.
# ABOUTME: All access goes through one SQLite connection serialized by a lock.

import logging
import sqlite3
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from omnireader.db.connection import IN_MEMORY, open_library
from omnireader.db.mapping import (
    ANNOTATION_COLUMNS,
    BOOK_COLUMNS,
    annotation_to_row,
    book_to_row,
    position_to_row,
    row_to_annotation,
    row_to_book,
    row_to_position,
)
from omnireader.errors import DatabaseError, DuplicateBookError, LibraryIOError
from omnireader.models.annotation import Annotation, ReadingPosition
from omnireader.models.book import Book

logger = logging.getLogger(__name__)

_BOOK_SELECT = f"SELECT {', '.join(BOOK_COLUMNS)} FROM books"
_ANNOTATION_SELECT = f"SELECT {', '.join(ANNOTATION_COLUMNS)} FROM annotations"


def _insert_sql(table: str, row: dict[str, Any]) -> str:
    columns = ", ".join(row.keys())
    placeholders = ", ".join(f":{name}" for name in row)
    return f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"


class LibraryStore:
    """Embedded library database.

    Wraps a single sqlite3 connection. Every public method holds the store's
    lock for its whole duration and runs as one transaction, so operations
    from different threads never interleave. Returned entities are fresh
    copies built from rows; mutating them does not touch the database.

    Storage failures are raised as DatabaseError (DuplicateBookError for a
    repeated file_path). Lookups of a single entity return None when it does
    not exist.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: Path | str) -> "LibraryStore":
        """Open or create a file-backed library at path.

        Raises:
            LibraryIOError: If the parent directory cannot be created.
            DatabaseError: If SQLite cannot open or initialize the file.
        """
        try:
            conn = open_library(path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to open library {path}: {exc}") from exc
        except OSError as exc:
            raise LibraryIOError(f"Failed to prepare library location {path}: {exc}") from exc
        return cls(conn)

    @classmethod
    def open_in_memory(cls) -> "LibraryStore":
        """Open a transient library that disappears when closed."""
        return cls.open(IN_MEMORY)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> "LibraryStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Hold the lock and run the body as one transaction.

        Commits on success and rolls back on any exception. sqlite3 errors
        are re-raised as DatabaseError.
        """
        with self._lock:
            try:
                with self._conn:
                    yield self._conn
            except sqlite3.Error as exc:
                logger.warning("Library storage operation failed: %s", exc)
                raise DatabaseError(str(exc)) from exc

    # --- Book operations ---

    def insert_book(self, book: Book) -> None:
        """Add a book to the library.

        Raises:
            DuplicateBookError: If a book with this file_path already exists.
            DatabaseError: For any other storage failure.
        """
        row = book_to_row(book)
        with self._transaction() as conn:
            try:
                conn.execute(_insert_sql("books", row), row)
            except sqlite3.IntegrityError as exc:
                if "books.file_path" in str(exc):
                    raise DuplicateBookError(book.file_path) from exc
                raise
        logger.debug("Inserted book %s (%s)", book.id, book.file_path)

    def get_all_books(self) -> list[Book]:
        """Return every book, most recently added first."""
        with self._transaction() as conn:
            rows = conn.execute(
                f"{_BOOK_SELECT} ORDER BY added_at DESC, rowid DESC"
            ).fetchall()
            return [row_to_book(row) for row in rows]

    def get_book(self, book_id: str) -> Book | None:
        """Retrieve a book by its ID."""
        with self._transaction() as conn:
            row = conn.execute(f"{_BOOK_SELECT} WHERE id = ?", (book_id,)).fetchone()
            return row_to_book(row) if row else None

    def book_exists_by_path(self, file_path: str) -> bool:
        """Check whether a book with this file path is already cataloged."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT 1 FROM books WHERE file_path = ? LIMIT 1", (file_path,),
            ).fetchone()
            return row is not None

    def count_books(self) -> int:
        with self._transaction() as conn:
            return conn.execute("SELECT COUNT(*) FROM books").fetchone()[0]

    def delete_book(self, book_id: str) -> None:
        """Delete a book together with its annotations and reading position.

        The foreign keys cascade, so the dependents go in the same
        transaction as the book. Deleting an unknown ID does nothing.
        """
        with self._transaction() as conn:
            cursor = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        if cursor.rowcount:
            logger.debug("Deleted book %s", book_id)

    def update_last_read(self, book_id: str) -> None:
        """Stamp last_read_at with the current time. Unknown IDs are ignored."""
        now = int(time.time())
        with self._transaction() as conn:
            conn.execute(
                "UPDATE books SET last_read_at = ? WHERE id = ?", (now, book_id),
            )

    def set_cover(self, book_id: str, cover_data: bytes | None) -> None:
        """Replace a book's cover image bytes. Unknown IDs are ignored."""
        with self._transaction() as conn:
            conn.execute(
                "UPDATE books SET cover_data = ? WHERE id = ?", (cover_data, book_id),
            )

    # --- Annotation operations ---

    def insert_annotation(self, annotation: Annotation) -> None:
        """Add an annotation.

        Raises:
            DatabaseError: If annotation.book_id does not reference a book.
        """
        row = annotation_to_row(annotation)
        with self._transaction() as conn:
            conn.execute(_insert_sql("annotations", row), row)

    def get_annotations(self, book_id: str) -> list[Annotation]:
        """Return a book's annotations in reading order (start_percent ascending)."""
        with self._transaction() as conn:
            rows = conn.execute(
                f"{_ANNOTATION_SELECT} WHERE book_id = ? ORDER BY start_percent, created_at",
                (book_id,),
            ).fetchall()
            return [row_to_annotation(row) for row in rows]

    def delete_annotation(self, annotation_id: str) -> None:
        """Remove one annotation. Unknown IDs are ignored."""
        with self._transaction() as conn:
            conn.execute("DELETE FROM annotations WHERE id = ?", (annotation_id,))

    # --- Reading position operations ---

    def save_reading_position(self, position: ReadingPosition) -> None:
        """Insert the position, or overwrite the one already stored for the book.

        Raises:
            DatabaseError: If position.book_id does not reference a book.
        """
        row = position_to_row(position)
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO reading_positions (book_id, percent, page_number, updated_at) "
                "VALUES (:book_id, :percent, :page_number, :updated_at) "
                "ON CONFLICT(book_id) DO UPDATE SET "
                "percent = excluded.percent, "
                "page_number = excluded.page_number, "
                "updated_at = excluded.updated_at",
                row,
            )

    def get_reading_position(self, book_id: str) -> ReadingPosition | None:
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT book_id, percent, page_number, updated_at "
                "FROM reading_positions WHERE book_id = ?",
                (book_id,),
            ).fetchone()
            return row_to_position(row) if row else None
