#!/usr/bin/env python3
"""
day_entry.py
-------------------

Defines the DayEntry dataclass: a journal entry resolved to a calendar day
and ready to be written as a Hugo content page.

Each DayEntry knows where it belongs in the content tree::

    <output>/
    └── <yyyy-MM>/
        ├── _index.md
        └── <yyyyMMdd>.md

and renders itself with the front matter the Hugo Book theme expects.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass
from datetime import date
from textwrap import dedent

# ---- Local imports ----
from daybook.dataclasses.journal_entry import JournalEntry
from daybook.utils import dates, md


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Dataclass -----
@dataclass
class DayEntry:
    """
    A journal entry with a parsed date and title.

    Attributes:
        date (date): Calendar day of the entry.
        title (str): First heading of the body, or "Untitled".
        body (str): Trimmed body text, before date injection.
    """

    date: date
    title: str
    body: str

    # ---- Public constructors ----
    @classmethod
    def from_journal_entry(
        cls,
        entry: JournalEntry,
        dayfirst: bool = False,
    ) -> DayEntry:
        """
        Resolve a raw JournalEntry.

        Raises:
            DateParseError: If the entry date text cannot be parsed
        """
        entry_date = dates.parse_entry_date(entry.date_text, dayfirst=dayfirst)
        title = md.extract_title(entry.body)
        logger.debug(f"Parsed entry {entry_date.isoformat()}: {title}")
        return cls(date=entry_date, title=title, body=entry.body)

    # ---- Derived attributes ----
    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def display_date(self) -> str:
        return dates.format_display_date(self.date)

    @property
    def weight(self) -> str:
        return dates.format_weight(self.date)

    @property
    def day_of_month(self) -> int:
        return self.date.day

    @property
    def month_folder(self) -> str:
        return dates.format_month_folder(self.date)

    @property
    def file_name(self) -> str:
        return dates.format_file_name(self.date)

    # ---- Serialization ----
    def front_matter(self) -> str:
        """Front matter block, closing '---' line and trailing blank line."""
        title = md.escape_quotes(self.title)
        return dedent(
            f"""\
            ---
            title: "{self.day_of_month}. {title}"
            date: {self.iso_date}
            weight: {self.weight}
            ---

            """
        )

    def to_markdown(self) -> str:
        """
        Full file content: front matter followed by the body with the
        display date inserted under its first line.
        """
        body = md.insert_date_after_heading(self.body, self.display_date)
        return self.front_matter() + body
