#!/usr/bin/env python3
"""
journal2md.py
-------------------
Convert a flat journal export into a Hugo Book content tree.

Every entry of the export becomes one daily Markdown page with front matter,
grouped into month folders, and each month folder gets a section index:

    <output>/
    ├── 2021-03/
    │   ├── _index.md
    │   ├── 20210305.md
    │   └── 20210306.md
    └── 2021-04/
        ├── _index.md
        └── 20210401.md

Entries are processed in file order and each page is written before the
next entry is parsed. A fatal error (bad date, filesystem failure) aborts
the run and leaves pages already written in place.

Programmatic API:
    from daybook.pipeline.journal2md import convert_file
    stats = convert_file(input_path, output_dir, strict=False, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List, Optional

# --- Local imports ---
from daybook.core.cli import ConversionStats
from daybook.core.exceptions import (
    DuplicateEntryError,
    EntryParseError,
    Journal2MdError,
)
from daybook.core.logging_manager import DaybookLogger, safe_logger
from daybook.dataclasses import INDEX_FILE_NAME, DayEntry, JournalEntry, MonthIndex


# month folder -> day file names, in first-seen order
MonthMap = Dict[str, List[str]]


# --- Conversion ---
def process_entry(
    entry: JournalEntry,
    output_dir: Path,
    entries_by_month: MonthMap,
    stats: ConversionStats,
    strict: bool = False,
    dayfirst: bool = False,
    logger: Optional[DaybookLogger] = None,
) -> Path:
    """
    Render one entry and write it to its month folder.

    Processing Flow:
    1. Parse the entry date and title (DayEntry)
    2. Create the month folder if needed
    3. Check for an earlier entry on the same day
    4. Write <month>/<yyyyMMdd>.md as UTF-8, overwriting
    5. Record the file name under its month

    Args:
        entry: Raw entry from the export
        output_dir: Root of the content tree
        entries_by_month: Running month -> file names map, updated in place
        stats: Run statistics, updated in place
        strict: Raise on a second entry for the same day instead of
            overwriting the first one
        dayfirst: Read ambiguous numeric dates as day/month
        logger: Optional logger

    Returns:
        Path of the written page

    Raises:
        DateParseError: If the entry date cannot be parsed
        DuplicateEntryError: If ``strict`` and the day was already written
    """
    day = DayEntry.from_journal_entry(entry, dayfirst=dayfirst)
    safe_logger(logger).log_debug(
        f"Parsed entry: {day.file_name}",
        {"date_text": entry.date_text, "title": day.title},
    )

    month_dir = output_dir / day.month_folder
    month_dir.mkdir(parents=True, exist_ok=True)

    output_path = month_dir / day.file_name

    recorded = entries_by_month.setdefault(day.month_folder, [])
    if day.file_name in recorded:
        stats.duplicates += 1
        if strict:
            raise DuplicateEntryError(day.file_name, entry.date_text)
        safe_logger(logger).log_warning(
            f"Duplicate entry for {day.file_name}, overwriting",
            {"date_text": entry.date_text},
        )
    else:
        recorded.append(day.file_name)

    existed = output_path.exists()
    output_path.write_text(day.to_markdown(), encoding="utf-8")

    if existed:
        stats.entries_overwritten += 1
    else:
        stats.entries_created += 1

    safe_logger(logger).log_info(f"Written: {output_path}")
    return output_path


def write_month_indexes(
    entries_by_month: MonthMap,
    output_dir: Path,
    stats: ConversionStats,
    logger: Optional[DaybookLogger] = None,
) -> List[Path]:
    """
    Write ``_index.md`` for every month, in first-seen order.

    Raises:
        FolderDateParseError: If a recorded month is not a yyyy-MM name
    """
    written: List[Path] = []
    for folder, file_names in entries_by_month.items():
        index = MonthIndex.from_folder(folder, file_names)

        index_path = output_dir / folder / INDEX_FILE_NAME
        index_path.write_text(index.to_markdown(), encoding="utf-8")

        stats.indexes_created += 1
        written.append(index_path)
        safe_logger(logger).log_info(f"Written index: {index_path}")

    return written


def convert_file(
    input_path: Path,
    output_dir: Path,
    strict: bool = False,
    dayfirst: bool = False,
    fix_text: bool = True,
    logger: Optional[DaybookLogger] = None,
) -> ConversionStats:
    """
    Convert a journal export file into daily pages and month indexes.

    Error Handling:
    - Any entry failure is fatal: it is logged, counted and re-raised
    - Pages written before the failure stay on disk
    - No month index is written after a failure

    Args:
        input_path: Journal export (.txt)
        output_dir: Root of the content tree (created if missing)
        strict: Fail on two entries for the same day
        dayfirst: Read ambiguous numeric dates as day/month
        fix_text: Repair text encoding issues with ftfy before parsing
        logger: Optional logger for operation tracking

    Returns:
        ConversionStats with processing results

    Raises:
        Journal2MdError: If the input file does not exist
        EntryParseError: If the export contains no entry marker
        DateParseError: If an entry date cannot be parsed
        DuplicateEntryError: If ``strict`` and two entries share a day
        FolderDateParseError: On an inconsistent month folder name
    """
    stats = ConversionStats()

    if not input_path.is_file():
        raise Journal2MdError(f"Input file not found: {input_path}")

    output_dir.mkdir(parents=True, exist_ok=True)

    safe_logger(logger).log_operation(
        "convert_file_start", {"input": str(input_path), "output": str(output_dir)}
    )

    entries_by_month: MonthMap = {}
    processed = 0
    current: Optional[JournalEntry] = None
    try:
        for current in JournalEntry.from_file(input_path, fix_text=fix_text):
            process_entry(
                current,
                output_dir,
                entries_by_month,
                stats,
                strict=strict,
                dayfirst=dayfirst,
                logger=logger,
            )
            processed += 1
        current = None

        if processed == 0:
            raise EntryParseError(f"No entries found in {input_path}")

        write_month_indexes(entries_by_month, output_dir, stats, logger)
    except Exception as e:
        stats.errors += 1
        context = {"operation": "convert_file", "file": str(input_path)}
        if current is not None:
            context["date_text"] = current.date_text
        safe_logger(logger).log_error(e, context)
        raise

    stats.files_processed = 1

    safe_logger(logger).log_operation("convert_file_complete", {"stats": stats.summary()})

    return stats


def preview_file(
    input_path: Path,
    dayfirst: bool = False,
    fix_text: bool = True,
) -> List[DayEntry]:
    """
    Parse an export without writing anything.

    Returns:
        DayEntry objects in file order

    Raises:
        Journal2MdError: If the input file does not exist
        EntryParseError: If the export contains no entries
        DateParseError: If an entry date cannot be parsed
    """
    if not input_path.is_file():
        raise Journal2MdError(f"Input file not found: {input_path}")

    days = [
        DayEntry.from_journal_entry(entry, dayfirst=dayfirst)
        for entry in JournalEntry.from_file(input_path, fix_text=fix_text)
    ]
    if not days:
        raise EntryParseError(f"No entries found in {input_path}")

    return days
