"""
Unit tests for header parsing and column resolution.

Run with: pytest tests/test_header.py -v
"""

import pytest

from bgg_analytics.errors import MissingColumn
from bgg_analytics.header import ColumnRef, Header, clean_name


class TestCleanName:
    """Tests for clean_name function."""

    def test_surrounding_whitespace_trimmed(self):
        """Leading and trailing spaces are removed."""
        assert clean_name("  Rating Average  ") == "Rating Average"

    def test_trailing_carriage_return_removed(self):
        """A CR left by a CRLF line ending is removed."""
        assert clean_name("Domains\r") == "Domains"

    def test_inner_whitespace_kept(self):
        """Whitespace inside a name is part of the name."""
        assert clean_name("Year  Published") == "Year  Published"


class TestHeaderParse:
    """Tests for Header.parse."""

    def test_splits_on_delimiter(self):
        """Names come out in column order."""
        header = Header.parse("/ID;Name;Year Published", ";")
        assert header.names == ["/ID", "Name", "Year Published"]
        assert len(header) == 3

    def test_byte_order_mark_stripped(self):
        """A leading BOM does not become part of the first name."""
        header = Header.parse("\ufeff/ID;Name", ";")
        assert header.names[0] == "/ID"
        assert header.find("/ID") == 1

    def test_names_cleaned(self):
        """Each name is trimmed and loses a trailing CR."""
        header = Header.parse(" /ID ;Name;Domains\r", ";")
        assert header.names == ["/ID", "Name", "Domains"]

    def test_raw_fields_preserved(self):
        """Raw fields keep their original spelling for re-emission."""
        header = Header.parse(" /ID ;Domains\r", ";")
        assert header.raw_fields == [" /ID ", "Domains\r"]

    def test_missing_first_line_gives_empty_header(self):
        """An empty source has no columns."""
        assert len(Header.parse(None, ";")) == 0

    def test_blank_first_line_gives_empty_header(self):
        """A blank first line has no columns."""
        assert len(Header.parse("", ";")) == 0


class TestHeaderLookup:
    """Tests for find, require and resolve_present."""

    def test_find_is_one_based(self):
        """Positions start at 1."""
        header = Header.parse("a\tb\tc", "\t")
        assert header.find("a") == 1
        assert header.find("c") == 3

    def test_find_missing_returns_none(self):
        """Unknown names give the not-found sentinel."""
        header = Header.parse("a\tb", "\t")
        assert header.find("z") is None

    def test_duplicate_names_resolve_to_first(self):
        """The first matching column wins."""
        header = Header.parse("Name;Mechanics;Name", ";")
        assert header.find("Name") == 1

    def test_lookup_is_case_sensitive(self):
        """Names must match exactly."""
        header = Header.parse("Mechanics", ";")
        assert header.find("mechanics") is None

    def test_require_returns_column_refs(self):
        """require maps each name to a ColumnRef."""
        header = Header.parse("/ID;Rating Average", ";")
        refs = header.require(["Rating Average", "/ID"])
        assert refs["Rating Average"] == ColumnRef("Rating Average", 2)
        assert refs["/ID"] == ColumnRef("/ID", 1)

    def test_require_reports_every_missing_name(self):
        """All missing names are listed, not just the first."""
        header = Header.parse("/ID;Name", ";")
        with pytest.raises(MissingColumn) as excinfo:
            header.require(["/ID", "Mechanics", "Domains"], source="games.tsv")

        assert excinfo.value.names == ["Mechanics", "Domains"]
        assert "games.tsv" in str(excinfo.value)
        assert "Missing: Mechanics\nMissing: Domains" in excinfo.value.details()

    def test_resolve_present_skips_absent(self):
        """Absent optional columns are dropped silently."""
        header = Header.parse("/ID;Complexity Average", ";")
        refs = header.resolve_present(["Rating Average", "Complexity Average"])
        assert refs == [ColumnRef("Complexity Average", 2)]


class TestColumnRef:
    """Tests for ColumnRef."""

    def test_value_in_range(self):
        """Returns the cell at the referenced position."""
        assert ColumnRef("b", 2).value(["x", "y"]) == "y"

    def test_value_past_end_is_empty(self):
        """A short row reads as empty."""
        assert ColumnRef("c", 3).value(["x"]) == ""

    def test_immutable(self):
        """Resolved references cannot be changed."""
        ref = ColumnRef("a", 1)
        with pytest.raises(Exception):
            ref.index = 2
