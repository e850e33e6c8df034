"""Render parsed references back to citation text.

Output re-parses to the same records: "Gen 1:1-2 2:2,5", "1 Пет 5-8,10".
"""


def format_numbers(values):
    """Compress ascending consecutive runs into ranges: [5, 6, 7, 8, 10] -> "5-8,10"."""
    parts = []
    i = 0
    while i < len(values):
        j = i
        while j + 1 < len(values) and values[j + 1] == values[j] + 1:
            j += 1
        if j > i:
            parts.append(f"{values[i]}-{values[j]}")
        else:
            parts.append(str(values[i]))
        i = j + 1
    return ",".join(parts)


def format_location(location):
    chapters = format_numbers(location.chapters)
    if location.verses is None:
        return chapters
    return f"{chapters}:{format_numbers(location.verses)}"


def format_reference(reference):
    """Format one reference as "<book> <location> <location> ..."."""
    return " ".join([reference.book] + [format_location(loc) for loc in reference.locations])


def format_references(references, sep="; "):
    return sep.join(format_reference(ref) for ref in references)
