#!/usr/bin/env python3
"""
journal_entry.py
-------------------

Defines the JournalEntry dataclass: one raw entry of a flat journal export.

An export is a single text file in which every entry starts with a marker
line of the form::

    <TAB>Date:<TAB>5 March 2021 at 10:30pm

followed by the free-form body, up to the next marker or the end of file.
JournalEntry keeps the date text and body exactly as written (trimmed);
interpretation happens in DayEntry.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

# ---- Third party ----
from ftfy import TextFixerConfig, fix_text as ftfy_fix_text  # type: ignore


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
ENTRY_MARKER = "\tDate:\t"
ENTRY_PATTERN = re.compile(
    r"\tDate:\t(?P<date>.+?)\r?\n(?P<body>.*?)(?=\tDate:\t|\Z)",
    re.DOTALL,
)
# Encoding and line-break repair only; entry text is otherwise kept verbatim
TEXT_FIXER_CONFIG = TextFixerConfig(
    unescape_html=False,
    uncurl_quotes=False,
    fix_latin_ligatures=False,
    fix_character_width=False,
    normalization=None,
)


# ----- Dataclass -----
@dataclass(frozen=True)
class JournalEntry:
    """
    A single entry as it appears in the export.

    Attributes:
        date_text (str): Date text following the marker, trimmed.
        body (str): Everything after the marker line up to the next marker,
            trimmed. May contain blank lines and Markdown headings.
    """

    date_text: str
    body: str

    # ---- Public constructors ----
    @classmethod
    def iter_text(cls, text: str) -> Iterator[JournalEntry]:
        """
        Lazily split export text into entries, in file order.

        Text before the first marker is ignored. A marker whose date line
        is not terminated by a line break yields no entry.
        """
        for match in ENTRY_PATTERN.finditer(text):
            yield cls(
                date_text=match.group("date").strip(),
                body=match.group("body").strip(),
            )

    @classmethod
    def from_file(cls, path: Path, fix_text: bool = True) -> Iterator[JournalEntry]:
        """
        Read an export file and lazily yield its entries.

        The whole file is read into memory. With ``fix_text`` the content is
        passed through ftfy to repair mojibake and normalize line breaks.
        HTML entities, ligatures, full-width forms and quotes are kept.

        Raises:
            OSError, UnicodeDecodeError: If the file cannot be read
        """
        logger.debug(f"Reading file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.error(f"Cannot read input file: {path}")
            raise

        if fix_text:
            content = ftfy_fix_text(content, TEXT_FIXER_CONFIG)

        if ENTRY_MARKER not in content:
            logger.warning(f"No entry marker found in {path.name}")

        return cls.iter_text(content)
