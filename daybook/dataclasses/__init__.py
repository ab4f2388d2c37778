"""
Entry data structures for the journal2md pipeline.

- JournalEntry: raw (date text, body) pair from the export
- DayEntry: entry resolved to a calendar day, renders a day page
- MonthIndex: month folder section page
"""
from .journal_entry import JournalEntry
from .day_entry import DayEntry
from .month_index import MonthIndex, INDEX_FILE_NAME

__all__ = ["JournalEntry", "DayEntry", "MonthIndex", "INDEX_FILE_NAME"]
