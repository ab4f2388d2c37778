"""
conftest.py
-----------
Shared pytest fixtures for daybook tests.

Provides fixtures for:
- Temporary directories
- Journal export content and files
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def output_dir(tmp_dir):
    """Content tree root (not created yet)."""
    return tmp_dir / "content"


# ----- Export Content Fixtures -----

@pytest.fixture
def single_entry_export():
    """Smallest well-formed export: one entry with a heading."""
    return "\tDate:\t5 March 2021\n# My Day\nHello world"


@pytest.fixture
def multi_month_export():
    """Four entries across two months, out of order within March."""
    return (
        "\tDate:\t12 March 2021 at 9:15pm\n"
        "# Rainy Thursday\n"
        "Stayed in.\n"
        "\n"
        "## Notes\n"
        "Read a book.\n"
        "\tDate:\t1 April 2021\n"
        "# Fools\n"
        "Nothing happened.\n"
        "\tDate:\tMarch 5, 2021\n"
        "# Market\n"
        'Bought "fresh" bread.\n'
        "\tDate:\t2021-03-20\n"
        "Short one without a heading\n"
    )


@pytest.fixture
def write_export(tmp_dir):
    """Factory writing export content to a UTF-8 file."""

    def _write(content: str, name: str = "journal.txt") -> Path:
        path = tmp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
