"""
Utilities package for daybook.

- dates: Entry date parsing, month folder parsing, date renderings
- md: Title extraction, date injection, front-matter escaping

Import commonly-used utilities directly from this package:
    from daybook.utils import parse_entry_date, extract_title
"""

# Date utilities
from .dates import (
    strip_time_clause,
    parse_entry_date,
    parse_month_folder,
    format_display_date,
    format_weight,
    format_month_folder,
    format_file_name,
    format_month_title,
    format_month_weight,
)

# Markdown utilities
from .md import (
    UNTITLED,
    extract_title,
    insert_date_after_heading,
    escape_quotes,
    relref,
)

__all__ = [
    # Dates
    "strip_time_clause",
    "parse_entry_date",
    "parse_month_folder",
    "format_display_date",
    "format_weight",
    "format_month_folder",
    "format_file_name",
    "format_month_title",
    "format_month_weight",
    # Markdown
    "UNTITLED",
    "extract_title",
    "insert_date_after_heading",
    "escape_quotes",
    "relref",
]
