"""
test_cli_stats.py
-----------------
Unit tests for ConversionStats and setup_logger.
"""
import pytest

from daybook.core.cli import ConversionStats, OperationStats, setup_logger
from daybook.core.logging_manager import DaybookLogger


class TestConversionStats:
    """Test ConversionStats counters and summaries."""

    def test_defaults(self):
        stats = ConversionStats()
        assert stats.entries_written == 0
        assert stats.errors == 0

    def test_entries_written(self):
        stats = ConversionStats(entries_created=3, entries_overwritten=2)
        assert stats.entries_written == 5

    @pytest.mark.parametrize(
        "field", ["entries_created", "entries_overwritten", "duplicates", "indexes_created", "errors"]
    )
    def test_negative_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            ConversionStats(**{field: -1})

    def test_summary(self):
        stats = ConversionStats(files_processed=1, entries_created=4, indexes_created=2)
        summary = stats.summary()

        assert "1 files processed" in summary
        assert "4 created" in summary
        assert "2 indexes" in summary
        assert "duplicates" not in summary

    def test_summary_mentions_duplicates(self):
        assert "1 duplicates" in ConversionStats(duplicates=1).summary()

    def test_to_dict(self):
        d = ConversionStats(entries_created=1, duplicates=1).to_dict()

        assert d["entries_created"] == 1
        assert d["duplicates"] == 1
        assert "duration" in d

    def test_duration_cached(self):
        stats = OperationStats()
        assert stats.duration() == stats.duration()


class TestSetupLogger:
    """Test setup_logger()."""

    def test_creates_operations_dir(self, tmp_dir):
        logger = setup_logger(tmp_dir, "journal2md_test")

        assert isinstance(logger, DaybookLogger)
        assert (tmp_dir / "operations").is_dir()
        assert logger.log_dir == tmp_dir / "operations"
        logger.close()
