# ABOUTME: Public API for the OmniReader library database layer.
# ABOUTME: Exports connection management and the lock-serialized LibraryStore.

from omnireader.db.connection import DEFAULT_DB_PATH, open_library
from omnireader.db.store import LibraryStore

__all__ = [
    "DEFAULT_DB_PATH",
    "LibraryStore",
    "open_library",
]
