#!/usr/bin/env python3
"""
Integration tests for the journal2md pipeline.

Converts whole export files and checks the resulting content tree.
"""
import pytest
import yaml
from datetime import date
from unittest.mock import MagicMock

from daybook.core.cli import ConversionStats
from daybook.core.exceptions import (
    DateParseError,
    DuplicateEntryError,
    EntryParseError,
    FolderDateParseError,
    Journal2MdError,
)
from daybook.core.logging_manager import DaybookLogger
from daybook.dataclasses import JournalEntry
from daybook.pipeline.journal2md import (
    convert_file,
    preview_file,
    process_entry,
    write_month_indexes,
)


def page_files(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*.md"))


def front_matter(path):
    return yaml.safe_load(path.read_text(encoding="utf-8").split("---\n")[1])


class TestConvertFile:
    """End-to-end conversion of export files."""

    def test_single_entry(self, write_export, single_entry_export, output_dir):
        stats = convert_file(write_export(single_entry_export), output_dir)

        page = output_dir / "2021-03" / "20210305.md"
        assert page.read_text(encoding="utf-8") == (
            "---\n"
            'title: "5. My Day"\n'
            "date: 2021-03-05\n"
            "weight: 210305\n"
            "---\n"
            "\n"
            "# My Day\n"
            "\n"
            "5 March 2021\n"
            "\n"
            "Hello world"
        )

        index = output_dir / "2021-03" / "_index.md"
        assert index.read_text(encoding="utf-8") == (
            "---\n"
            'title: "March 2021"\n'
            "bookCollapseSection: true\n"
            "weight: 2103\n"
            "---\n"
            "\n"
            '{{< relref "20210305.md" >}}\n'
        )

        assert stats.entries_created == 1
        assert stats.indexes_created == 1
        assert stats.files_processed == 1
        assert stats.errors == 0

    def test_page_and_index_counts(self, write_export, multi_month_export, output_dir):
        stats = convert_file(write_export(multi_month_export), output_dir)

        assert page_files(output_dir) == [
            "2021-03/20210305.md",
            "2021-03/20210312.md",
            "2021-03/20210320.md",
            "2021-03/_index.md",
            "2021-04/20210401.md",
            "2021-04/_index.md",
        ]
        assert stats.entries_created == 4
        assert stats.indexes_created == 2

    def test_index_sorted_chronologically(self, write_export, multi_month_export, output_dir):
        convert_file(write_export(multi_month_export), output_dir)

        index = (output_dir / "2021-03" / "_index.md").read_text(encoding="utf-8")
        assert index.splitlines()[6:] == [
            '{{< relref "20210305.md" >}}',
            '{{< relref "20210312.md" >}}',
            '{{< relref "20210320.md" >}}',
        ]

    def test_front_matter_fields_consistent(self, write_export, multi_month_export, output_dir):
        convert_file(write_export(multi_month_export), output_dir)

        for page in (output_dir / "2021-03").glob("2021*.md"):
            fm = front_matter(page)
            assert fm["date"].strftime("%Y%m%d") + ".md" == page.name
            assert str(fm["weight"]) == fm["date"].strftime("%y%m%d")
            assert fm["title"].startswith(f"{fm['date'].day}. ")

    def test_entry_text_written_verbatim(self, write_export, output_dir):
        content = "\tDate:\t5 March 2021\n# Tom &amp; Jerry\nScore was 3 &lt; 5. ＡＢＣ ﬁne"
        convert_file(write_export(content), output_dir)

        page = (output_dir / "2021-03" / "20210305.md").read_text(encoding="utf-8")
        assert 'title: "5. Tom &amp; Jerry"\n' in page
        assert page.endswith("# Tom &amp; Jerry\n\n5 March 2021\n\nScore was 3 &lt; 5. ＡＢＣ ﬁne")

    def test_titles(self, write_export, multi_month_export, output_dir):
        convert_file(write_export(multi_month_export), output_dir)

        assert front_matter(output_dir / "2021-03" / "20210312.md")["title"] == "12. Rainy Thursday"
        assert front_matter(output_dir / "2021-03" / "20210320.md")["title"] == "20. Untitled"

    def test_quotes_in_body_untouched(self, write_export, multi_month_export, output_dir):
        convert_file(write_export(multi_month_export), output_dir)

        text = (output_dir / "2021-03" / "20210305.md").read_text(encoding="utf-8")
        assert text.endswith('# Market\n\n5 March 2021\n\nBought "fresh" bread.')

    def test_month_index_file_order_is_first_seen(self, write_export, multi_month_export, output_dir):
        written = []
        logger = MagicMock(spec=DaybookLogger)
        logger.log_info.side_effect = lambda message, details=None: written.append(message)

        convert_file(write_export(multi_month_export), output_dir, logger=logger)

        index_lines = [m for m in written if m.startswith("Written index:")]
        assert index_lines[0].endswith("2021-03/_index.md")
        assert index_lines[1].endswith("2021-04/_index.md")

    def test_creates_output_dir(self, write_export, single_entry_export, tmp_dir):
        target = tmp_dir / "deep" / "content"
        convert_file(write_export(single_entry_export), target)

        assert (target / "2021-03" / "20210305.md").is_file()

    def test_existing_page_overwritten(self, write_export, single_entry_export, output_dir):
        page = output_dir / "2021-03" / "20210305.md"
        page.parent.mkdir(parents=True)
        page.write_text("stale", encoding="utf-8")

        stats = convert_file(write_export(single_entry_export), output_dir)

        assert "stale" not in page.read_text(encoding="utf-8")
        assert stats.entries_overwritten == 1
        assert stats.entries_created == 0

    def test_missing_input_raises(self, tmp_dir, output_dir):
        with pytest.raises(Journal2MdError):
            convert_file(tmp_dir / "missing.txt", output_dir)

    def test_no_marker_raises(self, write_export, output_dir):
        with pytest.raises(EntryParseError):
            convert_file(write_export("No entries here\n"), output_dir)

    def test_bad_date_aborts_keeping_earlier_pages(self, write_export, output_dir):
        content = (
            "\tDate:\t5 March 2021\n# One\ntext\n"
            "\tDate:\tsometime last week\n# Two\ntext\n"
            "\tDate:\t7 March 2021\n# Three\ntext\n"
        )
        with pytest.raises(DateParseError) as exc_info:
            convert_file(write_export(content), output_dir)

        assert exc_info.value.date_text == "sometime last week"
        assert page_files(output_dir) == ["2021-03/20210305.md"]

    def test_bad_date_logged(self, write_export, output_dir):
        logger = MagicMock(spec=DaybookLogger)
        content = "\tDate:\tsometime last week\n# Two\ntext\n"

        with pytest.raises(DateParseError):
            convert_file(write_export(content), output_dir, logger=logger)

        error, context = logger.log_error.call_args[0]
        assert isinstance(error, DateParseError)
        assert context["date_text"] == "sometime last week"


class TestDuplicateDays:
    """Two entries on the same calendar day."""

    @pytest.fixture
    def duplicate_export(self):
        return (
            "\tDate:\t5 March 2021 at 8:00am\n# Morning\nfirst\n"
            "\tDate:\t5 March 2021 at 9:00pm\n# Evening\nsecond\n"
        )

    def test_default_overwrites_and_warns(self, write_export, duplicate_export, output_dir):
        logger = MagicMock(spec=DaybookLogger)
        stats = convert_file(write_export(duplicate_export), output_dir, logger=logger)

        page = (output_dir / "2021-03" / "20210305.md").read_text(encoding="utf-8")
        assert "Evening" in page
        assert "Morning" not in page
        assert stats.duplicates == 1
        assert logger.log_warning.called

        index = (output_dir / "2021-03" / "_index.md").read_text(encoding="utf-8")
        assert index.count("relref") == 1

    def test_strict_raises_before_second_write(self, write_export, duplicate_export, output_dir):
        with pytest.raises(DuplicateEntryError) as exc_info:
            convert_file(write_export(duplicate_export), output_dir, strict=True)

        assert exc_info.value.file_name == "20210305.md"
        page = (output_dir / "2021-03" / "20210305.md").read_text(encoding="utf-8")
        assert "Morning" in page
        assert not (output_dir / "2021-03" / "_index.md").exists()


class TestProcessEntry:
    """Test process_entry() on its own."""

    def test_records_month_membership(self, output_dir):
        entries_by_month = {}
        stats = ConversionStats()
        entry = JournalEntry(date_text="5 March 2021", body="# Day\ntext")

        path = process_entry(entry, output_dir, entries_by_month, stats)

        assert path == output_dir / "2021-03" / "20210305.md"
        assert entries_by_month == {"2021-03": ["20210305.md"]}
        assert stats.entries_created == 1

    def test_dayfirst(self, output_dir):
        entries_by_month = {}
        entry = JournalEntry(date_text="05/03/2021", body="text")

        path = process_entry(entry, output_dir, entries_by_month, ConversionStats(), dayfirst=True)

        assert path.name == "20210305.md"

    def test_logs_parsed_entry(self, output_dir):
        logger = MagicMock(spec=DaybookLogger)
        entry = JournalEntry(date_text="5 March 2021", body="# Day\ntext")

        process_entry(entry, output_dir, {}, ConversionStats(), logger=logger)

        message, details = logger.log_debug.call_args[0]
        assert message == "Parsed entry: 20210305.md"
        assert details == {"date_text": "5 March 2021", "title": "Day"}


class TestWriteMonthIndexes:
    """Test write_month_indexes() on its own."""

    def test_inconsistent_folder_raises(self, output_dir):
        (output_dir / "2021-3").mkdir(parents=True)

        with pytest.raises(FolderDateParseError):
            write_month_indexes({"2021-3": ["20210305.md"]}, output_dir, ConversionStats())

    def test_writes_in_map_order(self, output_dir):
        for folder in ("2021-05", "2020-01"):
            (output_dir / folder).mkdir(parents=True)

        paths = write_month_indexes(
            {"2021-05": ["20210501.md"], "2020-01": ["20200101.md"]},
            output_dir,
            ConversionStats(),
        )

        assert [p.parent.name for p in paths] == ["2021-05", "2020-01"]


class TestPreviewFile:
    """Test preview_file() dry run."""

    def test_writes_nothing(self, write_export, multi_month_export, output_dir):
        days = preview_file(write_export(multi_month_export))

        assert [d.date for d in days] == [
            date(2021, 3, 12),
            date(2021, 4, 1),
            date(2021, 3, 5),
            date(2021, 3, 20),
        ]
        assert not output_dir.exists()

    def test_missing_input_raises(self, tmp_dir):
        with pytest.raises(Journal2MdError):
            preview_file(tmp_dir / "missing.txt")

    def test_no_marker_raises(self, write_export):
        with pytest.raises(EntryParseError):
            preview_file(write_export("No entries here\n"))
