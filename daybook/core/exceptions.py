#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the daybook project.

Exception Hierarchy:
    Exception (built-in)
    ├── EntryParseError - Malformed journal export
    │   └── DateParseError - Entry date text cannot be parsed
    ├── FolderDateParseError - Month folder name is not yyyy-MM
    ├── DuplicateEntryError - Two entries fall on the same calendar day
    └── Journal2MdError - Journal export to Markdown conversion errors

Usage:
    from daybook.core.exceptions import DateParseError

    try:
        entry_date = parse_entry_date(text)
    except DateParseError as e:
        logger.error(f"Bad entry date: {e.date_text}")
"""
from __future__ import annotations


class EntryParseError(Exception):
    """
    Exception for journal export parsing failures.

    Raised when the export file cannot be split into entries:
    - No ``\\tDate:\\t`` marker anywhere in the file
    - Malformed entry structure

    Examples:
        >>> raise EntryParseError("No entries found in export.txt")
    """

    pass


class DateParseError(EntryParseError):
    """
    Exception for unparseable entry dates.

    Raised when the date text of an entry, after dropping any trailing
    " at <time>" clause, does not resolve to a calendar date. Fatal for
    the run: files already written stay on disk.

    Attributes:
        date_text: Raw date text as it appears in the export

    Examples:
        >>> raise DateParseError("someday soon")
    """

    def __init__(self, date_text: str, message: str | None = None) -> None:
        self.date_text = date_text
        super().__init__(message or f"Could not parse date: {date_text!r}")


class FolderDateParseError(Exception):
    """
    Exception for month folder names that are not exactly yyyy-MM.

    Folder names are generated by daybook itself, so this signals an
    internal inconsistency rather than bad input.

    Attributes:
        folder: The offending folder name

    Examples:
        >>> raise FolderDateParseError("2021-3")
    """

    def __init__(self, folder: str) -> None:
        self.folder = folder
        super().__init__(f"Could not parse folder name: {folder!r}")


class DuplicateEntryError(Exception):
    """
    Exception for two entries resolving to the same calendar day.

    Only raised in strict mode; the default conversion overwrites the
    earlier file and logs a warning.

    Attributes:
        file_name: Day file both entries map to (yyyyMMdd.md)
    """

    def __init__(self, file_name: str, date_text: str) -> None:
        self.file_name = file_name
        self.date_text = date_text
        super().__init__(
            f"Duplicate entry for {file_name} (date text: {date_text!r})"
        )


class Journal2MdError(Exception):
    """
    Exception for journal export to Markdown conversion errors.

    Raised by the journal2md pipeline when the conversion cannot start:
    - Input file not found
    - Input path is a directory

    Examples:
        >>> raise Journal2MdError("Input file not found: journal.txt")
    """

    pass
