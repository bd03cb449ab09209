"""Tests for the listing table buffer."""

import io

from image_lister.utils.table import ListingTable


def test_rows_buffered_until_flush():
    """Test nothing is written before the single flush."""
    out = io.StringIO()
    table = ListingTable(out, ["REPOSITORY", "TAG"])
    table.add_row(["library/foo", "latest"])

    assert out.getvalue() == ""

    table.flush()
    lines = out.getvalue().splitlines()
    assert [line.split() for line in lines] == [
        ["REPOSITORY", "TAG"],
        ["library/foo", "latest"],
    ]


def test_columns_aligned():
    """Test every cell of a column starts at the same offset."""
    out = io.StringIO()
    table = ListingTable(out, ["REPOSITORY", "TAG", "SIZE"])
    table.add_row(["registry.example.com/team/app", "v1", "1.0 MB"])
    table.add_row(["a", "latest", "5.0 GB"])
    table.flush()

    header, first, second = out.getvalue().splitlines()
    assert header.index("TAG") == first.index("v1") == second.index("latest")
    assert header.index("SIZE") == first.index("1.0 MB") == second.index("5.0 GB")
    assert first.index("v1") >= len("registry.example.com/team/app") + 3


def test_cells_are_not_markup():
    """Test square brackets in cells are printed verbatim."""
    out = io.StringIO()
    table = ListingTable(out, ["REPOSITORY"])
    table.add_row(["[bold]x[/bold]"])
    table.flush()

    assert "[bold]x[/bold]" in out.getvalue()


def test_wide_values_not_truncated():
    """Test long digests are printed in full."""
    digest = "sha256:" + "ab" * 32
    out = io.StringIO()
    table = ListingTable(out, ["REPOSITORY", "DIGEST", "SIZE"])
    table.add_row(["library/foo", digest, "1.0 MB"])
    table.flush()

    assert out.getvalue().splitlines()[1].split() == ["library/foo", digest, "1.0", "MB"]


def test_header_only():
    """Test an empty table still prints its header."""
    out = io.StringIO()
    table = ListingTable(out, ["REPOSITORY", "TAG"])
    table.flush()

    assert out.getvalue().split() == ["REPOSITORY", "TAG"]


def test_without_columns_writes_values_directly():
    """Test single-value rows are written straight through."""
    out = io.StringIO()
    table = ListingTable(out)
    table.add_row(["0123456789ab"])
    table.add_row(["fedcba987654"])

    assert out.getvalue() == "0123456789ab\nfedcba987654\n"

    table.flush()
    assert out.getvalue() == "0123456789ab\nfedcba987654\n"


def test_flush_empties_buffer():
    """Test a second flush prints only the header again."""
    out = io.StringIO()
    table = ListingTable(out, ["A", "B"])
    table.add_row(["x", "y"])
    table.flush()
    first = out.getvalue()

    assert "x" in first
    table.flush()
    assert "x" not in out.getvalue()[len(first):]
