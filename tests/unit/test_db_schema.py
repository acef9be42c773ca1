# ABOUTME: Unit tests for database schema creation and connection management.
# ABOUTME: Validates tables, columns, the annotation index, pragmas, and idempotent reopen.

from pathlib import Path

import pytest

from omnireader.db.connection import DEFAULT_DB_PATH, open_library


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path."""
    return tmp_path / "test_library.db"


def _columns(conn, table: str) -> set[str]:
    return {row[1] for row in conn.execute(f"PRAGMA table_info({table})").fetchall()}


class TestOpenLibrary:
    """Tests for open_library() connection factory."""

    def test_creates_database_file(self, db_path: Path) -> None:
        conn = open_library(db_path)
        conn.close()
        assert db_path.exists()

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        nested = tmp_path / "deep" / "nested" / "library.db"
        conn = open_library(nested)
        conn.close()
        assert nested.exists()

    def test_in_memory_creates_no_file(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        conn = open_library(":memory:")
        conn.close()
        assert list(tmp_path.iterdir()) == []

    def test_books_columns(self, db_path: Path) -> None:
        conn = open_library(db_path)
        columns = _columns(conn, "books")
        conn.close()
        assert columns == {
            "id", "title", "author", "file_path", "file_type",
            "cover_data", "added_at", "last_read_at", "total_pages",
        }

    def test_annotations_columns(self, db_path: Path) -> None:
        conn = open_library(db_path)
        columns = _columns(conn, "annotations")
        conn.close()
        assert columns == {
            "id", "book_id", "annotation_type", "start_percent", "end_percent",
            "page_number", "color", "selected_text", "note_text", "created_at",
        }

    def test_reading_positions_columns(self, db_path: Path) -> None:
        conn = open_library(db_path)
        columns = _columns(conn, "reading_positions")
        conn.close()
        assert columns == {"book_id", "percent", "page_number", "updated_at"}

    def test_annotation_book_index_exists(self, db_path: Path) -> None:
        conn = open_library(db_path)
        indexes = {row[1] for row in conn.execute("PRAGMA index_list(annotations)").fetchall()}
        conn.close()
        assert "idx_annotations_book_id" in indexes

    def test_foreign_keys_cascade(self, db_path: Path) -> None:
        """Both dependent tables reference books with ON DELETE CASCADE."""
        conn = open_library(db_path)
        for table in ("annotations", "reading_positions"):
            fks = conn.execute(f"PRAGMA foreign_key_list({table})").fetchall()
            assert len(fks) == 1
            assert fks[0]["table"] == "books"
            assert fks[0]["on_delete"] == "CASCADE"
        conn.close()

    def test_foreign_keys_enabled(self, db_path: Path) -> None:
        conn = open_library(db_path)
        enabled = conn.execute("PRAGMA foreign_keys").fetchone()[0]
        conn.close()
        assert enabled == 1

    def test_wal_mode_for_files(self, db_path: Path) -> None:
        conn = open_library(db_path)
        mode = conn.execute("PRAGMA journal_mode").fetchone()[0]
        conn.close()
        assert mode == "wal"

    def test_reopen_is_not_destructive(self, db_path: Path) -> None:
        """Opening an initialized database keeps its rows."""
        conn = open_library(db_path)
        conn.execute(
            "INSERT INTO books (id, title, file_path, file_type, added_at, total_pages) "
            "VALUES ('b1', 'Kept', '/kept.pdf', 'pdf', 1, 10)"
        )
        conn.commit()
        conn.close()

        conn2 = open_library(db_path)
        titles = [row[0] for row in conn2.execute("SELECT title FROM books").fetchall()]
        conn2.close()

        assert titles == ["Kept"]

    def test_default_path(self) -> None:
        assert DEFAULT_DB_PATH == Path.home() / ".omnireader" / "library.db"
