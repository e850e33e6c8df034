"""Tests for bibleref/formatting.py -- citation rendering and re-parsing."""

import pytest

from bibleref import BibleReference, VerseLocation, format_reference, format_references, parse
from bibleref.formatting import format_location, format_numbers


class TestFormatNumbers:
    def test_single(self):
        assert format_numbers([7]) == "7"

    def test_run_compressed(self):
        assert format_numbers([5, 6, 7, 8, 10]) == "5-8,10"

    def test_order_kept(self):
        assert format_numbers([5, 3]) == "5,3"

    def test_duplicates_kept(self):
        assert format_numbers([3, 3]) == "3,3"

    def test_empty(self):
        assert format_numbers([]) == ""


class TestFormatReference:
    def test_chapter_only(self):
        assert format_location(VerseLocation(chapters=[2, 4])) == "2,4"

    def test_verses(self):
        assert format_location(VerseLocation(chapters=[1], verses=[2, 3, 4, 7])) == "1:2-4,7"

    def test_multiple_locations(self):
        ref = BibleReference(
            book="Gen",
            locations=[VerseLocation(chapters=[1], verses=[1, 2]), VerseLocation(chapters=[2], verses=[2, 5])],
        )
        assert format_reference(ref) == "Gen 1:1-2 2:2,5"

    def test_join(self):
        refs = [
            BibleReference(book="Быт", locations=[VerseLocation(chapters=[1])]),
            BibleReference(book="1 Пет", locations=[VerseLocation(chapters=[5, 6, 7, 8, 10])]),
        ]
        assert format_references(refs) == "Быт 1; 1 Пет 5-8,10"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "II Ki. 3:12-14, 25",
            "Rev 2, 1 Пет 3",
            "Gen 3,1 Exo 5:9,2",
        ],
    )
    def test_reparse_equivalent(self, text):
        refs = parse(text)
        assert refs
        assert parse(format_references(refs)) == refs

    def test_daily_readings(self, daily_readings_text):
        refs = parse(daily_readings_text)
        assert parse(format_references(refs)) == refs
