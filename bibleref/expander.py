"""List/range expansion: "5-8, 10" -> [5, 6, 7, 8, 10].

Comma-separated items are concatenated in written order. Ranges are
expanded in place and never re-sorted against their neighbours, so
"5,3" stays [5, 3].
"""

import re

from bibleref.base import DegenerateRange, MalformedLocationGroup, ValueOutOfRange

# ASCII hyphen plus the en/em dashes typeset citations use
RANGE_DASHES = "-–—"

# [0-9] rather than \d: \d also matches non-ASCII digits
_ITEM_PATTERN = re.compile(rf"(?P<start>[0-9]+)(?:\s*[{RANGE_DASHES}]\s*(?P<end>[0-9]+))?")


def _to_int(digits, max_value):
    value = int(digits)
    if value < 1:
        raise ValueOutOfRange(f"location numbers start at 1, got {value}")
    if max_value is not None and value > max_value:
        raise ValueOutOfRange(f"{value} exceeds maximum {max_value}")
    return value


def expand_item(item, max_value=None):
    """Expand a single list item ("7" or "2-4") into its integers."""
    item = item.strip()
    m = _ITEM_PATTERN.fullmatch(item)
    if not m:
        raise MalformedLocationGroup(f"not a number or range: {item!r}")

    start = _to_int(m.group("start"), max_value)
    if m.group("end") is None:
        return [start]

    end = _to_int(m.group("end"), max_value)
    if start > end:
        raise DegenerateRange(f"range {start}-{end} runs backwards")
    return list(range(start, end + 1))


def expand(expression, *, max_value=None):
    """Expand a comma-separated list of numbers and inclusive ranges.

    Args:
        expression: e.g. "1-4, 5" or "2,4".
        max_value:  Reject numbers above this bound (``None`` = unbounded).

    Returns:
        Flat list of integers in expansion order.

    Raises:
        MalformedLocationGroup: empty item, stray characters, missing endpoint.
        DegenerateRange:        start > end in any range.
        ValueOutOfRange:        zero, or a value above ``max_value``.
    """
    values = []
    for item in expression.split(","):
        values.extend(expand_item(item, max_value))
    return values
