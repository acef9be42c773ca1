# ABOUTME: Integration tests for LibraryStore under concurrent callers.
# ABOUTME: Validates the lock serializes upserts, inserts, and cascade deletes.

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from omnireader.db.store import LibraryStore
from omnireader.errors import DatabaseError, DuplicateBookError
from omnireader.models.annotation import Annotation, HighlightColor, ReadingPosition
from omnireader.models.book import Book, BookType


class TestConcurrentAccess:
    """Many threads against one store."""

    def test_concurrent_position_saves_leave_one_row(self, tmp_path: Path) -> None:
        with LibraryStore.open(tmp_path / "lib.db") as store:
            book = Book.new("Shared", None, "/shared.epub", BookType.EPUB, 10)
            store.insert_book(book)
            percents = [float(i) for i in range(50)]

            def save(percent: float) -> None:
                store.save_reading_position(ReadingPosition.new(book.id, percent, int(percent)))

            with ThreadPoolExecutor(max_workers=8) as pool:
                list(pool.map(save, percents))

            rows = store._conn.execute(
                "SELECT COUNT(*) FROM reading_positions WHERE book_id = ?", (book.id,),
            ).fetchone()[0]
            position = store.get_reading_position(book.id)

        assert rows == 1
        assert position is not None
        assert position.percent in percents
        assert position.page_number == int(position.percent)

    def test_concurrent_duplicate_inserts_admit_one(self) -> None:
        with LibraryStore.open_in_memory() as store:
            barrier = threading.Barrier(6)
            outcomes: list[str] = []
            outcomes_lock = threading.Lock()

            def insert(n: int) -> None:
                book = Book.new(f"Copy {n}", None, "/same.pdf", BookType.PDF, 1)
                barrier.wait()
                try:
                    store.insert_book(book)
                    result = "ok"
                except DuplicateBookError:
                    result = "duplicate"
                with outcomes_lock:
                    outcomes.append(result)

            threads = [threading.Thread(target=insert, args=(n,)) for n in range(6)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            assert outcomes.count("ok") == 1
            assert outcomes.count("duplicate") == 5
            assert store.count_books() == 1

    def test_annotating_while_deleting_leaves_no_orphans(self) -> None:
        """Inserts racing a delete either land before it (and cascade) or fail."""
        with LibraryStore.open_in_memory() as store:
            book = Book.new("Doomed", None, "/doomed.epub", BookType.EPUB, 5)
            store.insert_book(book)

            def annotate(i: int) -> None:
                try:
                    store.insert_annotation(
                        Annotation.new_highlight(
                            book.id, float(i % 100), float(i % 100), 1,
                            HighlightColor.BLUE, None,
                        )
                    )
                except DatabaseError:
                    pass

            with ThreadPoolExecutor(max_workers=4) as pool:
                futures = [pool.submit(annotate, i) for i in range(40)]
                store.delete_book(book.id)
                for f in futures:
                    f.result()

            orphans = store._conn.execute(
                "SELECT COUNT(*) FROM annotations WHERE book_id NOT IN (SELECT id FROM books)"
            ).fetchone()[0]
            assert orphans == 0
            assert store.get_book(book.id) is None
