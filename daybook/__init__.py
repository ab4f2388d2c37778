"""
daybook
=======

Turns a flat journal export (entries separated by ``<TAB>Date:<TAB>`` lines)
into a Hugo Book content tree: one Markdown page per day inside ``yyyy-MM``
month folders, each folder with an ``_index.md`` section page.

Main Components:
    - pipeline: journal2md conversion and the click CLI
    - dataclasses: JournalEntry, DayEntry, MonthIndex
    - core: Logging, exceptions, paths, run statistics
    - utils: Date parsing/formatting and Markdown helpers

Example Usage:
    >>> from pathlib import Path
    >>> from daybook import convert_file
    >>> stats = convert_file(Path("journal.txt"), Path("content/docs"))
    >>> print(stats.summary())
"""

__version__ = "1.0.0"

from daybook.pipeline.journal2md import convert_file

__all__ = ["convert_file"]
