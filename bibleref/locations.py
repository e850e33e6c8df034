"""Location-group parsing: "1:2-4,7" -> VerseLocation([1], [2, 3, 4, 7])."""

from bibleref.base import VerseLocation
from bibleref.expander import expand


def parse_location(text, *, max_value=None) -> VerseLocation:
    """Parse one location group.

    Text before the first ``:`` is the chapter list, text after it is the
    verse list. Without a ``:`` the whole group is a chapter list and
    ``verses`` stays ``None``.

    Raises:
        LocationError: if either side fails to expand.
    """
    chapters, colon, verses = text.partition(":")
    if not colon:
        return VerseLocation(chapters=expand(text, max_value=max_value))
    return VerseLocation(
        chapters=expand(chapters, max_value=max_value),
        verses=expand(verses, max_value=max_value),
    )
