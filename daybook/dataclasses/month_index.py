#!/usr/bin/env python3
"""
month_index.py
-------------------

Defines the MonthIndex dataclass: the ``_index.md`` section page of one
month folder, listing every day file written into it.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from datetime import date
from typing import List

# ---- Local imports ----
from daybook.utils import dates, md


INDEX_FILE_NAME = "_index.md"


@dataclass
class MonthIndex:
    """
    Section index for one month folder.

    Attributes:
        folder (str): Month folder name, yyyy-MM.
        month (date): First day of the month, parsed back from ``folder``.
        file_names (List[str]): Day files recorded for the month, in the
            order they were written.
    """

    folder: str
    month: date
    file_names: List[str] = field(default_factory=list)

    @classmethod
    def from_folder(cls, folder: str, file_names: List[str]) -> MonthIndex:
        """
        Raises:
            FolderDateParseError: If ``folder`` is not exactly yyyy-MM
        """
        return cls(
            folder=folder,
            month=dates.parse_month_folder(folder),
            file_names=list(file_names),
        )

    @property
    def month_title(self) -> str:
        return dates.format_month_title(self.month)

    @property
    def weight(self) -> str:
        return dates.format_month_weight(self.month)

    def sorted_file_names(self) -> List[str]:
        # yyyyMMdd names sort chronologically
        return sorted(self.file_names)

    def to_markdown(self) -> str:
        lines = [
            "---",
            f'title: "{self.month_title}"',
            "bookCollapseSection: true",
            f"weight: {self.weight}",
            "---",
            "",
        ]
        lines.extend(md.relref(name) for name in self.sorted_file_names())
        return "\n".join(lines) + "\n"
