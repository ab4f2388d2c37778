#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for daybook commands.

Functions:
    setup_logger: Initialize DaybookLogger for CLI operations

Classes:
    OperationStats: Base class for run statistics
    ConversionStats: Counters for a journal2md conversion

Usage:
    from daybook.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "journal2md")
    stats = ConversionStats()
    stats.entries_created += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from daybook.core.logging_manager import DaybookLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> DaybookLogger:
    """
    Setup logging for CLI operations.

    Log files go to ``<log_dir>/operations/``.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'journal2md')

    Returns:
        Configured DaybookLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return DaybookLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of input files processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ConversionStats(OperationStats):
    """
    Statistics for a journal2md conversion.

    Attributes:
        entries_created: Day files written that did not exist before
        entries_overwritten: Day files written over an existing file
        duplicates: Entries sharing a calendar day with an earlier entry
        indexes_created: Month _index.md files written
    """
    entries_created: int = 0
    entries_overwritten: int = 0
    duplicates: int = 0
    indexes_created: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("entries_created", "entries_overwritten", "duplicates", "indexes_created"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @property
    def entries_written(self) -> int:
        return self.entries_created + self.entries_overwritten

    def summary(self) -> str:
        """Get formatted summary with entry metrics."""
        parts = [
            f"{self.files_processed} files processed",
            f"{self.entries_created} created",
            f"{self.entries_overwritten} overwritten",
            f"{self.indexes_created} indexes",
        ]
        if self.duplicates:
            parts.append(f"{self.duplicates} duplicates")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_created": self.entries_created,
            "entries_overwritten": self.entries_overwritten,
            "duplicates": self.duplicates,
            "indexes_created": self.indexes_created,
        })
        return d
