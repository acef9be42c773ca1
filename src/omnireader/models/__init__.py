# ABOUTME: Domain entities for the OmniReader library.
# ABOUTME: Exports Book, Annotation, ReadingPosition, and their enumerations.

from omnireader.models.annotation import (
    Annotation,
    AnnotationType,
    HighlightColor,
    ReadingPosition,
)
from omnireader.models.book import Book, BookMetadata, BookType

__all__ = [
    "Annotation",
    "AnnotationType",
    "Book",
    "BookMetadata",
    "BookType",
    "HighlightColor",
    "ReadingPosition",
]
