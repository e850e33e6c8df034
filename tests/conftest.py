"""Shared fixtures for the test suite.

The parser has no heavy dependencies; tests only need the project root on
sys.path and a clean BIBLEREF_ environment.
"""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Drop BIBLEREF_* overrides from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("BIBLEREF_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def daily_readings_text():
    """Mixed Cyrillic/Latin reading list with six citations."""
    return (
        "Daily readings are Быт 1;"
        "Исх 1:2,4;"
        "1 Пет 5-8, 10."
        "Also take a look in:\n"
        "             Rev 2,4;"
        "Jh 1:2-4,7"
        "Gen 1:1-2 2:2,5"
    )


@pytest.fixture
def sample_jsonl(tmp_path):
    """Diarized transcript with a metadata line and an error record."""
    path = tmp_path / "sermon.jsonl"
    records = [
        {"_metadata": {"speakers": 2}},
        {"start": 5.0, "speaker": "SPEAKER_00", "text": "Open to Rom 8:28 please."},
        {"start": 3725.0, "speaker": "SPEAKER_01", "text": "[transcription error: timeout]"},
        {"start": 3730.0, "speaker": "SPEAKER_01", "text": "And 1 Cor 13:4-7 too."},
    ]
    path.write_text("\n".join(json.dumps(r, ensure_ascii=False) for r in records) + "\n", encoding="utf-8")
    return path
