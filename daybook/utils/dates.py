#!/usr/bin/env python3
"""
dates.py
-------------------
Date parsing and formatting for journal entries and month folders.

Entry dates are free text ("5 March 2021", "March 5, 2021 at 10:30pm",
"2021-03-05") and go through dateutil. Month folder names are generated
here and parsed back strictly.

Accepted entry date forms (month-first unless ``dayfirst=True``):
    5 March 2021            March 5, 2021
    Friday, March 5, 2021   5 Mar 2021
    2021-03-05              03/05/2021

Missing fields default to January 1st of the current year, so
"March 2021" resolves to 2021-03-01.

Functions:
    strip_time_clause: Drop a trailing " at <time>" clause
    parse_entry_date: Free-text entry date -> date
    parse_month_folder: "yyyy-MM" -> first day of that month
    format_*: The yyyy-MM-dd / yyMMdd / yyyy-MM / ... renderings
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date, datetime

# --- Third party ---
from dateutil import parser as date_parser

# --- Local imports ---
from daybook.core.exceptions import DateParseError, FolderDateParseError


TIME_CLAUSE_SEPARATOR = " at "
MONTH_FOLDER_RE = re.compile(r"^\d{4}-\d{2}$")


# ----- Parsing -----
def strip_time_clause(date_text: str) -> str:
    """
    Cut everything from the first " at " onward.

    >>> strip_time_clause("5 March 2021 at 10:30pm")
    '5 March 2021'
    """
    idx = date_text.find(TIME_CLAUSE_SEPARATOR)
    if idx >= 0:
        return date_text[:idx]
    return date_text


def parse_entry_date(date_text: str, dayfirst: bool = False) -> date:
    """
    Parse the date text of a journal entry.

    Args:
        date_text: Raw date text from the entry marker
        dayfirst: Read ambiguous numeric dates as day/month

    Returns:
        Calendar date of the entry (time of day discarded)

    Raises:
        DateParseError: If no valid date can be derived
    """
    text = strip_time_clause(date_text).strip()
    default = datetime(datetime.now().year, 1, 1)
    try:
        parsed = date_parser.parse(text, default=default, dayfirst=dayfirst)
    except (ValueError, OverflowError) as e:
        raise DateParseError(date_text) from e
    return parsed.date()


def parse_month_folder(folder: str) -> date:
    """
    Parse a month folder name of the exact form yyyy-MM.

    Returns:
        The first day of that month

    Raises:
        FolderDateParseError: If the name is not exactly yyyy-MM
    """
    if not MONTH_FOLDER_RE.match(folder):
        raise FolderDateParseError(folder)
    try:
        return datetime.strptime(folder, "%Y-%m").date()
    except ValueError as e:
        raise FolderDateParseError(folder) from e


# ----- Formatting -----
def format_display_date(d: date) -> str:
    """Day, full month name and year: '5 March 2021'."""
    return f"{d.day} {d.strftime('%B')} {d.year}"


def format_weight(d: date) -> str:
    """yyMMdd sort weight: '210305'."""
    return d.strftime("%y%m%d")


def format_month_folder(d: date) -> str:
    return d.strftime("%Y-%m")


def format_file_name(d: date) -> str:
    return f"{d.strftime('%Y%m%d')}.md"


def format_month_title(d: date) -> str:
    """Full month name and year: 'March 2021'."""
    return f"{d.strftime('%B')} {d.year}"


def format_month_weight(d: date) -> str:
    return d.strftime("%y%m")
