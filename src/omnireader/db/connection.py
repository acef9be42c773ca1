# ABOUTME: SQLite connection management for the OmniReader library database.
# ABOUTME: Opens a file-backed or in-memory database and applies the schema idempotently.

import logging
import sqlite3
from pathlib import Path

from omnireader.db.schema import SCHEMA

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".omnireader" / "library.db"
IN_MEMORY = ":memory:"


def _apply_schema(conn: sqlite3.Connection) -> None:
    """Create tables and indexes that are not there yet."""
    conn.executescript(SCHEMA)


def open_library(path: Path | str | None = None) -> sqlite3.Connection:
    """Open or create the OmniReader library database.

    Creates parent directories for file-backed databases. Pass ":memory:"
    for a transient database. Foreign keys are switched on for every
    connection since the cascade rules depend on them. The connection may be
    shared across threads; callers are responsible for serializing access.

    Args:
        path: Path to the database file. Defaults to ~/.omnireader/library.db.

    Returns:
        A configured sqlite3.Connection.
    """
    if path is None:
        path = DEFAULT_DB_PATH

    if str(path) == IN_MEMORY:
        conn = sqlite3.connect(IN_MEMORY, check_same_thread=False)
    else:
        db_path = Path(path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), check_same_thread=False)

    try:
        if str(path) != IN_MEMORY:
            conn.execute("PRAGMA journal_mode=WAL")
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys=ON")
        _apply_schema(conn)
    except BaseException:
        conn.close()
        raise

    logger.debug("Opened library database %s", path)

    return conn
