#!/usr/bin/env python3
"""
extract_verses.py -- Scripture Citation Extraction from Text and Transcripts

Runs the bibleref parser over every text segment of the input and collects
the structured citations ("Быт 1", "Исх 1:2,4", "1 Пет 5-8, 10") together
with the timestamp/speaker of the segment they came from.

Book names are reported exactly as written; no book list is consulted, so
the tool works the same for any language or abbreviation style.

Input: plain text (.txt/.md), CSV (english or text column), JSONL
       (text/start/speaker records) or "-" for stdin
Output: JSON summary with every citation, unique citations, book frequency
        and skipped location groups.

Usage:
    python features/extract_verses.py notes.txt
    python features/extract_verses.py transcripts/sunday_service.csv
    python features/extract_verses.py sermon.jsonl -o metrics/references/sermon.json
    cat notes.txt | python features/extract_verses.py - --stdout
"""

import argparse
import csv
import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bibleref import ReferenceParser, format_reference  # noqa: E402
from settings import settings  # noqa: E402

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md")
TRANSCRIPT_ERROR_PREFIX = "[transcription error"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class ReferenceCollector:
    """Accumulates citations across many text segments.

    Each segment is parsed independently: a book named in one segment is
    never applied to numbers in the next.
    """

    def __init__(self, parser=None, collect_diagnostics=None, context_chars=None):
        self.parser = parser or ReferenceParser()
        if collect_diagnostics is None:
            collect_diagnostics = settings.parser.collect_diagnostics
        self.collect_diagnostics = collect_diagnostics
        self.context_chars = settings.output.context_chars if context_chars is None else context_chars
        self.references = []  # list of reference dicts
        self.diagnostics = []

    def extract_from_text(self, text, timestamp="", speaker=None):
        """Parse one segment and record its citations.

        Returns:
            Number of citations found in this segment.
        """
        if not text:
            return 0

        diagnostics = [] if self.collect_diagnostics else None
        refs = self.parser.parse(text, diagnostics)

        context = text.strip()[: self.context_chars * 2]
        for ref in refs:
            self.references.append(
                {
                    "reference": format_reference(ref),
                    "book": ref.book,
                    "locations": [loc.to_dict() for loc in ref.locations],
                    "timestamp": timestamp,
                    "speaker": speaker,
                    "context": context,
                }
            )

        for diag in diagnostics or []:
            entry = diag.to_dict()
            entry["timestamp"] = timestamp
            self.diagnostics.append(entry)

        return len(refs)


# ---------------------------------------------------------------------------
# Input Loading
# ---------------------------------------------------------------------------


def load_text(path):
    """Load a plain text file (or stdin for "-") as one segment per paragraph."""
    if path == "-":
        raw = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    entries = [
        {"timestamp": "", "text": block.strip(), "speaker": None} for block in raw.split("\n\n") if block.strip()
    ]
    logger.info(f"Loaded {len(entries)} paragraphs from {path}")
    return entries


def load_csv_transcript(csv_path):
    """Load transcript rows from a CSV with an english or text column."""
    entries = []
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            text = (row.get("english") or row.get("text") or "").strip()
            if not text:
                continue
            entries.append(
                {
                    "timestamp": row.get("timestamp", ""),
                    "text": text,
                    "speaker": row.get("speaker") or None,
                }
            )
    logger.info(f"Loaded {len(entries)} segments from CSV")
    return entries


def load_jsonl_transcript(jsonl_path):
    """Load transcript records from JSONL; metadata and error records are skipped."""
    entries = []
    with open(jsonl_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            record = json.loads(line)
            if "_metadata" in record:
                continue
            text = record.get("text", "")
            if not text or text.startswith(TRANSCRIPT_ERROR_PREFIX):
                continue
            entries.append(
                {
                    "timestamp": _format_seconds(record.get("start", 0)),
                    "text": text,
                    "speaker": record.get("speaker"),
                }
            )
    logger.info(f"Loaded {len(entries)} segments from JSONL")
    return entries


def _format_seconds(start):
    h = int(start // 3600)
    m = int((start % 3600) // 60)
    s = int(start % 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def load_input(input_path):
    """Auto-detect input type and load its segments."""
    if input_path == "-":
        return load_text(input_path)
    p = Path(input_path)
    suffix = p.suffix.lower()
    if suffix == ".csv":
        return load_csv_transcript(input_path)
    elif suffix in (".jsonl", ".json"):
        return load_jsonl_transcript(input_path)
    elif suffix in TEXT_SUFFIXES:
        return load_text(input_path)
    else:
        print(f"ERROR: Unsupported file type: {p.suffix}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def format_output(collector, inputs):
    """Build the JSON report from collected citations."""
    refs = collector.references

    unique_refs = []
    seen = set()
    for ref in refs:
        key = ref["reference"]
        if key not in seen:
            seen.add(key)
            unique_refs.append(key)

    book_counts = {}
    for ref in refs:
        b = ref["book"]
        book_counts[b] = book_counts.get(b, 0) + 1

    return {
        "input": inputs,
        "timestamp": datetime.now().isoformat(),
        "total_references": len(refs),
        "unique_references": unique_refs,
        "books_referenced": dict(sorted(book_counts.items(), key=lambda x: -x[1])),
        "references": refs,
        "diagnostics": collector.diagnostics,
    }


def write_output(data, output_path, ensure_ascii=None):
    """Write the report to a JSON file, creating parent directories."""
    if ensure_ascii is None:
        ensure_ascii = settings.output.ensure_ascii
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=ensure_ascii)
    logger.info(f"Output: {output_path}")


def default_output_path(input_path):
    stem = "stdin" if input_path == "-" else Path(input_path).stem
    return os.path.join(settings.output.output_dir, f"{stem}_refs.json")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Extract scripture citations from text and transcripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python features/extract_verses.py notes.txt
    python features/extract_verses.py sermon.jsonl -o metrics/references/sermon.json
    cat notes.txt | python features/extract_verses.py - --stdout
        """,
    )
    parser.add_argument("input", nargs="+", help="Text, CSV or JSONL file(s), or - for stdin")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output JSON path (default: <output_dir>/<input_name>_refs.json)",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the JSON report instead of writing a file")
    parser.add_argument(
        "--max-book-words",
        type=int,
        default=None,
        help=f"Trailing words kept as the book name (default: {settings.parser.max_book_words})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each citation and skipped group")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)-7s %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.max_book_words is not None and args.max_book_words < 1:
        print("ERROR: --max-book-words must be at least 1", file=sys.stderr)
        sys.exit(1)

    all_entries = []
    for input_path in args.input:
        logger.info(f"Loading: {input_path}")
        all_entries.extend(load_input(input_path))

    if not all_entries:
        print("ERROR: No text content found.", file=sys.stderr)
        sys.exit(1)

    collector = ReferenceCollector(parser=ReferenceParser(max_book_words=args.max_book_words))
    for entry in all_entries:
        found = collector.extract_from_text(
            text=entry["text"],
            timestamp=entry.get("timestamp", ""),
            speaker=entry.get("speaker"),
        )
        if found:
            for ref in collector.references[-found:]:
                logger.debug(f"Found: {ref['reference']}")

    data = format_output(collector, args.input)

    if args.stdout:
        print(json.dumps(data, indent=2, ensure_ascii=settings.output.ensure_ascii))
    else:
        write_output(data, args.output or default_output_path(args.input[0]))

    logger.info(f"Total references found: {data['total_references']}")
    logger.info(f"Unique references: {len(data['unique_references'])}")
    if data["diagnostics"]:
        logger.info(f"Skipped location groups: {len(data['diagnostics'])}")
    for book, count in data["books_referenced"].items():
        logger.info(f"  {book}: {count}x")

    return data


if __name__ == "__main__":
    main()
