"""Records, classifier runs, diagnostics and errors shared by the parser."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class VerseLocation:
    """One location group in expanded form.

    ``verses`` is ``None`` for chapter-only citations ("Rev 2,4") and a list
    when the group had a ``:`` separator ("Исх 1:2,4").
    """

    chapters: list[int]
    verses: list[int] | None = None

    def to_dict(self) -> dict:
        return {"chapters": list(self.chapters), "verses": None if self.verses is None else list(self.verses)}


@dataclass
class BibleReference:
    """One book mention and every location attributed to it."""

    book: str
    locations: list[VerseLocation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"book": self.book, "locations": [loc.to_dict() for loc in self.locations]}


# ---------------------------------------------------------------------------
# Classifier runs
# ---------------------------------------------------------------------------


@dataclass
class BookWord:
    """A (possibly merged, possibly multi-word) book-name phrase."""

    text: str
    start: int
    end: int


@dataclass
class LocationGroup:
    """A numeric run such as "1:2-4,7" or "5-8, 10"."""

    text: str
    start: int
    end: int


@dataclass
class Separator:
    """Punctuation that ends the preceding run (";", ".", ",", ":" ...)."""

    text: str
    start: int
    end: int


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class DiagnosticKind(str, Enum):
    MALFORMED_LOCATION = "malformed_location"
    DEGENERATE_RANGE = "degenerate_range"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    ORPHAN_LOCATION = "orphan_location"


@dataclass
class Diagnostic:
    """A location group that was skipped during a scan."""

    kind: DiagnosticKind
    text: str
    start: int
    message: str

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text, "start": self.start, "message": self.message}


# ---------------------------------------------------------------------------
# Errors (raised by the expander, caught by the assembler)
# ---------------------------------------------------------------------------


class LocationError(ValueError):
    """Base class for location groups that cannot be expanded."""

    kind = DiagnosticKind.MALFORMED_LOCATION


class MalformedLocationGroup(LocationError):
    """Empty, non-numeric, or half-open item in a list expression."""


class DegenerateRange(LocationError):
    """Range whose start is greater than its end ("8-5")."""

    kind = DiagnosticKind.DEGENERATE_RANGE


class ValueOutOfRange(LocationError):
    """Zero, or a number above the configured maximum."""

    kind = DiagnosticKind.VALUE_OUT_OF_RANGE
