# ABOUTME: Annotation (highlight or note) and ReadingPosition entities.
# ABOUTME: Includes the fixed highlight color palette and its hex lookup table.

import time
import uuid
from dataclasses import dataclass
from enum import Enum

MIN_PERCENT = 0.0
MAX_PERCENT = 100.0


class AnnotationType(Enum):
    HIGHLIGHT = "highlight"
    NOTE = "note"


class HighlightColor(Enum):
    """Highlight color presets. Declaration order puts the default first."""

    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"
    ORANGE = "orange"

    @property
    def hex(self) -> str:
        return _COLOR_TO_HEX[self]

    @classmethod
    def from_hex(cls, value: str) -> "HighlightColor | None":
        """Match a hex string against the palette, ignoring case."""
        return _HEX_TO_COLOR.get(value.upper())

    @classmethod
    def default(cls) -> "HighlightColor":
        return cls.YELLOW


_COLOR_TO_HEX = {
    HighlightColor.YELLOW: "#FFEB3B",
    HighlightColor.GREEN: "#4CAF50",
    HighlightColor.BLUE: "#2196F3",
    HighlightColor.PINK: "#E91E63",
    HighlightColor.ORANGE: "#FF9800",
}
_HEX_TO_COLOR = {hex_value: color for color, hex_value in _COLOR_TO_HEX.items()}


def _check_percent(name: str, value: float) -> None:
    if not MIN_PERCENT <= value <= MAX_PERCENT:
        raise ValueError(f"{name} must be within [0.0, 100.0], got {value}")


@dataclass
class Annotation:
    """A highlight or note anchored to a position in a book.

    Positions are percentages through the document. page_number is only a
    display hint; ordering always uses start_percent. Annotations are never
    edited in place: to change one, delete it and insert a replacement.
    """

    id: str
    book_id: str
    annotation_type: AnnotationType
    start_percent: float
    end_percent: float
    page_number: int
    color: str
    selected_text: str | None
    note_text: str | None
    created_at: int

    @classmethod
    def new_highlight(
        cls,
        book_id: str,
        start_percent: float,
        end_percent: float,
        page_number: int,
        color: HighlightColor,
        selected_text: str | None,
    ) -> "Annotation":
        """Create a highlight over [start_percent, end_percent].

        Raises:
            ValueError: If a bound is outside [0, 100] or end precedes start.
        """
        _check_percent("start_percent", start_percent)
        _check_percent("end_percent", end_percent)
        if end_percent < start_percent:
            raise ValueError(
                f"end_percent ({end_percent}) precedes start_percent ({start_percent})"
            )

        return cls(
            id=str(uuid.uuid4()),
            book_id=book_id,
            annotation_type=AnnotationType.HIGHLIGHT,
            start_percent=start_percent,
            end_percent=end_percent,
            page_number=page_number,
            color=color.hex,
            selected_text=selected_text,
            note_text=None,
            created_at=int(time.time()),
        )

    @classmethod
    def new_note(
        cls,
        book_id: str,
        start_percent: float,
        page_number: int,
        note_text: str,
    ) -> "Annotation":
        """Create a point note. end_percent mirrors start_percent."""
        _check_percent("start_percent", start_percent)

        return cls(
            id=str(uuid.uuid4()),
            book_id=book_id,
            annotation_type=AnnotationType.NOTE,
            start_percent=start_percent,
            end_percent=start_percent,
            page_number=page_number,
            color=HighlightColor.default().hex,
            selected_text=None,
            note_text=note_text,
            created_at=int(time.time()),
        )

    @property
    def highlight_color(self) -> HighlightColor | None:
        """The palette entry for the stored color, if it is one."""
        return HighlightColor.from_hex(self.color)


@dataclass
class ReadingPosition:
    """The user's current place in a book. At most one per book."""

    book_id: str
    percent: float
    page_number: int
    updated_at: int

    @classmethod
    def new(cls, book_id: str, percent: float, page_number: int) -> "ReadingPosition":
        _check_percent("percent", percent)
        return cls(
            book_id=book_id,
            percent=percent,
            page_number=page_number,
            updated_at=int(time.time()),
        )
