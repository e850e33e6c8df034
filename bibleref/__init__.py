"""bibleref -- Scripture citation extraction from free-form multilingual text.

Finds book names followed by chapter/verse locations ("Gen 1:1-3",
"1 Пет 5-8, 10", "II Ki. 3:12-14, 25") and returns them as structured
records, in the order they appear in the text.
"""

from bibleref.assembler import ReferenceParser, parse
from bibleref.base import BibleReference, Diagnostic, DiagnosticKind, VerseLocation
from bibleref.formatting import format_reference, format_references

__all__ = [
    "BibleReference",
    "Diagnostic",
    "DiagnosticKind",
    "ReferenceParser",
    "VerseLocation",
    "format_reference",
    "format_references",
    "parse",
]
