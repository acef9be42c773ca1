# ABOUTME: Closed error taxonomy shared by entities, the store, and ingestion.
# ABOUTME: Every failure surfaced by OmniReader is one of the OmniReaderError subclasses.

from enum import Enum


class ErrorKind(Enum):
    """The closed set of failure kinds."""

    DATABASE = "database"
    FILE_NOT_FOUND = "file_not_found"
    UNSUPPORTED_FORMAT = "unsupported_format"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"


class OmniReaderError(Exception):
    """Base class for all OmniReader failures."""

    kind: ErrorKind


class DatabaseError(OmniReaderError):
    """Any underlying storage failure, including constraint violations."""

    kind = ErrorKind.DATABASE


class DuplicateBookError(DatabaseError):
    """Raised when a book with the same file_path is already in the library."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"Book with path {file_path} already exists")
        self.file_path = file_path


class BookFileNotFoundError(OmniReaderError):
    """A referenced book file does not exist on disk."""

    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsupportedFormatError(OmniReaderError):
    """The file extension is not one of the supported book types."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported format: {extension or '(none)'}")
        self.extension = extension


class ParseError(OmniReaderError):
    """A document parser could not read the file."""

    kind = ErrorKind.PARSE_ERROR


class LibraryIOError(OmniReaderError):
    """Filesystem failure outside the store."""

    kind = ErrorKind.IO_ERROR
