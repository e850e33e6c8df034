#!/usr/bin/env python3
"""
settings.py -- Unified Configuration for the bibleref citation extractor

Centralizes all runtime configuration using pydantic-settings.
Supports environment variable overrides (prefix: BIBLEREF_) and .env files.

Environment variable examples:
    BIBLEREF_LOG_LEVEL=DEBUG
    BIBLEREF_PARSER__MAX_BOOK_WORDS=3
    BIBLEREF_PARSER__MAX_VALUE=176
    BIBLEREF_OUTPUT__OUTPUT_DIR=out/refs

Nested delimiter is "__" (double underscore), so:
    BIBLEREF_PARSER__MAX_BOOK_WORDS -> settings.parser.max_book_words
    BIBLEREF_OUTPUT__CONTEXT_CHARS  -> settings.output.context_chars

Usage:
    from settings import settings
    print(settings.parser.max_book_words)
    print(settings.output.output_dir)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

# ---------------------------------------------------------------------------
# Sub-settings groups
# ---------------------------------------------------------------------------


class ParserSettings(BaseSettings):
    """Citation parser configuration."""

    max_book_words: int = Field(
        default=1,
        ge=1,
        description=(
            "Trailing words kept from a run of words as the book name. "
            "1 keeps 'Быт' out of 'Daily readings are Быт'; 3 keeps 'Song of Songs'."
        ),
    )
    max_value: int | None = Field(
        default=255,
        ge=1,
        description="Largest chapter/verse number accepted (None = unbounded). Bounds range expansion.",
    )
    collect_diagnostics: bool = Field(
        default=True,
        description="Record skipped location groups in CLI output",
    )

    model_config = {"env_prefix": "BIBLEREF_PARSER_"}


class OutputSettings(BaseSettings):
    """JSON report configuration for the extraction CLI."""

    output_dir: str = Field(
        default="metrics/references",
        description="Directory for <input>_refs.json reports when -o is not given",
    )
    context_chars: int = Field(
        default=80,
        ge=0,
        description="Citation context: first 2x this many characters of the segment text",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII book names in JSON output",
    )

    model_config = {"env_prefix": "BIBLEREF_OUTPUT_"}


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------


class BiblerefSettings(BaseSettings):
    """Top-level configuration.

    All sub-settings are nested. Environment variables use BIBLEREF_ prefix
    with double-underscore delimiter for nesting:

        BIBLEREF_LOG_LEVEL=DEBUG              -> settings.log_level
        BIBLEREF_PARSER__MAX_BOOK_WORDS=2     -> settings.parser.max_book_words

    Also reads from .env file in the project root if present.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the command-line tool",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    model_config = {
        "env_prefix": "BIBLEREF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }


# ---------------------------------------------------------------------------
# Singleton instance: the main API
#
#   from settings import settings
#   settings.parser.max_book_words
#   settings.output.output_dir
# ---------------------------------------------------------------------------

settings = BiblerefSettings()
