"""Token classifier: splits raw text into book-name, location and separator runs.

A single master regex walks the text left to right. Alternatives are
tried in priority order:

  prefix    a digit 1-4 directly followed (optional whitespace) by a word,
            i.e. the ordinal of a numbered book ("1 Пет", "1Cor")
  location  a chapter/verse group ("5-8, 10", "1:2-4,7")
  word      letters of any script, with an optional abbreviation dot ("Ki.")
  space     skipped
  separator any other single character (";", ".", ",", ":", brackets ...)

Words and prefixes accumulate into a phrase until a location or separator
ends it; the phrase is then emitted as one ``BookWord``.
"""

from collections.abc import Iterator

import regex as re

from bibleref.base import BookWord, LocationGroup, Separator
from bibleref.expander import RANGE_DASHES

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

LETTER = r"\p{L}"
# A word starts with a letter and runs on through combining marks ("मत्ती", "בְּרֵאשִׁית")
_WORD = rf"{LETTER}[\p{{L}}\p{{M}}]*"

# Ordinal digits that can open a numbered book title
_NUMBERED_PREFIX = rf"[1-4](?=\s*{LETTER})"

# "II Ki.", "IV Kings": uppercase only, so a lowercase "i" never merges
ROMAN_PREFIX = re.compile(r"I{1,3}|IV")

_ITEM = rf"[0-9]+(?:[{RANGE_DASHES}][0-9]+)?"
# A list continues past a comma only if the next number is not a book ordinal
_NEXT_ITEM = rf",\s*(?!{_NUMBERED_PREFIX}){_ITEM}"
_LIST = rf"{_ITEM}(?:{_NEXT_ITEM})*"

TOKEN_PATTERN = re.compile(
    rf"(?P<prefix>{_NUMBERED_PREFIX})"
    rf"|(?P<location>{_LIST}(?::\s*(?!{_NUMBERED_PREFIX}){_LIST})?)"
    rf"|(?P<word>{_WORD}\.?)"
    rf"|(?P<space>\s+)"
    rf"|(?P<separator>.)",
    re.DOTALL,
)


class _Unit:
    """One word of a book phrase, with any ordinal prefix merged in."""

    __slots__ = ("start", "end", "open_prefix")

    def __init__(self, start, end, open_prefix=False):
        self.start = start
        self.end = end
        # True while this unit is a bare ordinal waiting for its word
        self.open_prefix = open_prefix


def _phrase(text, units, max_book_words):
    kept = units[-max_book_words:]
    start, end = kept[0].start, kept[-1].end
    return BookWord(text=text[start:end], start=start, end=end)


def classify(text, *, max_book_words=1) -> Iterator[BookWord | LocationGroup | Separator]:
    """Yield the tagged runs of ``text`` in order.

    Args:
        text:           Raw input text.
        max_book_words: Number of trailing words kept from a run of
                        consecutive words when it is emitted as a book
                        name. Ordinal prefixes do not count as words.
    """
    if max_book_words < 1:
        raise ValueError(f"max_book_words must be >= 1, got {max_book_words}")

    units = []
    for m in TOKEN_PATTERN.finditer(text):
        kind = m.lastgroup
        if kind == "space":
            continue
        if kind == "prefix":
            units.append(_Unit(m.start(), m.end(), open_prefix=True))
            continue
        if kind == "word":
            if units and units[-1].open_prefix:
                units[-1].end = m.end()
                units[-1].open_prefix = False
            else:
                units.append(_Unit(m.start(), m.end(), open_prefix=bool(ROMAN_PREFIX.fullmatch(m.group()))))
            continue

        if units:
            yield _phrase(text, units, max_book_words)
            units = []
        if kind == "location":
            yield LocationGroup(text=m.group(), start=m.start(), end=m.end())
        else:
            yield Separator(text=m.group(), start=m.start(), end=m.end())

    if units:
        yield _phrase(text, units, max_book_words)
