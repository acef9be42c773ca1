# ABOUTME: SQL DDL statements for the OmniReader library database schema.
# ABOUTME: Defines books, annotations, reading_positions, and their cascade rules.

# Every statement is guarded with IF NOT EXISTS so applying the schema to an
# already-initialized database changes nothing.
SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    author        TEXT,
    file_path     TEXT NOT NULL UNIQUE,
    file_type     TEXT NOT NULL,
    cover_data    BLOB,
    added_at      INTEGER NOT NULL,
    last_read_at  INTEGER,
    total_pages   INTEGER NOT NULL DEFAULT 0 CHECK (total_pages >= 0)
);

CREATE TABLE IF NOT EXISTS annotations (
    id              TEXT PRIMARY KEY,
    book_id         TEXT NOT NULL REFERENCES books(id) ON DELETE CASCADE,
    annotation_type TEXT NOT NULL,
    start_percent   REAL NOT NULL CHECK (start_percent BETWEEN 0.0 AND 100.0),
    end_percent     REAL NOT NULL CHECK (end_percent BETWEEN 0.0 AND 100.0),
    page_number     INTEGER NOT NULL,
    color           TEXT NOT NULL,
    selected_text   TEXT,
    note_text       TEXT,
    created_at      INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS reading_positions (
    book_id     TEXT PRIMARY KEY REFERENCES books(id) ON DELETE CASCADE,
    percent     REAL NOT NULL CHECK (percent BETWEEN 0.0 AND 100.0),
    page_number INTEGER NOT NULL,
    updated_at  INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_annotations_book_id ON annotations(book_id);
"""
