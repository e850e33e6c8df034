"""Reference assembly: groups location runs under the most recent book phrase.

States are "no current book" and "have current book". A book phrase
replaces the current book; a location group is appended to it; separators
change nothing. A reference is only added to the output once its first
location has parsed, so every returned record has at least one location.
"""

import logging

from bibleref.base import (
    BibleReference,
    BookWord,
    Diagnostic,
    DiagnosticKind,
    LocationError,
    LocationGroup,
)
from bibleref.classifier import classify
from bibleref.locations import parse_location
from settings import settings

logger = logging.getLogger(__name__)


class ReferenceParser:
    """Single-pass citation parser.

    Holds configuration only; all scan state is local to ``parse`` so one
    instance can be shared between threads.
    """

    def __init__(self, max_book_words: int | None = None, max_value: int | None = None):
        self.max_book_words = settings.parser.max_book_words if max_book_words is None else max_book_words
        self.max_value = settings.parser.max_value if max_value is None else max_value

    def parse(self, text: str, diagnostics: list[Diagnostic] | None = None) -> list[BibleReference]:
        """Extract citations from ``text`` in the order they appear.

        Args:
            text:        Decoded input text. Empty or ``None`` yields ``[]``.
            diagnostics: Optional list that receives a ``Diagnostic`` for
                         every location group that was skipped.

        Returns:
            List of ``BibleReference``; never raises on malformed citations.
        """
        references = []
        if not text:
            return references

        book = None
        current = None

        for run in classify(text, max_book_words=self.max_book_words):
            if isinstance(run, BookWord):
                book, current = run, None
                continue
            if not isinstance(run, LocationGroup):
                continue

            if book is None:
                self._report(
                    diagnostics,
                    DiagnosticKind.ORPHAN_LOCATION,
                    run,
                    "location before any book name",
                )
                continue

            try:
                location = parse_location(run.text, max_value=self.max_value)
            except LocationError as e:
                self._report(diagnostics, e.kind, run, f"{book.text}: {e}")
                continue

            if current is None:
                current = BibleReference(book=book.text)
                references.append(current)
            current.locations.append(location)

        return references

    @staticmethod
    def _report(diagnostics, kind, run, message):
        logger.debug(f"Skipped {kind.value} {run.text!r} at {run.start}: {message}")
        if diagnostics is not None:
            diagnostics.append(Diagnostic(kind=kind, text=run.text, start=run.start, message=message))


def parse(
    text: str,
    *,
    diagnostics: list[Diagnostic] | None = None,
    max_book_words: int | None = None,
    max_value: int | None = None,
) -> list[BibleReference]:
    """Parse citations out of ``text``.

    Example:
        >>> refs = parse("Gen 1:1-3, Act 9")
        >>> refs[0].book, refs[0].locations[0].verses
        ('Gen', [1, 2, 3])

    ``None`` for ``max_book_words`` or ``max_value`` uses ``settings.parser``.
    Book names are kept verbatim and never checked against a book list.
    Descending ranges ("8-5") reject their whole location group; numbers
    before the first book name are dropped. Both are reported through
    ``diagnostics`` when a list is supplied.
    """
    return ReferenceParser(max_book_words=max_book_words, max_value=max_value).parse(text, diagnostics)
