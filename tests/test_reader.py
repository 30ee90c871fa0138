"""
Unit tests for line and record reading.

Run with: pytest tests/test_reader.py -v
"""

import os

import pytest

from bgg_analytics.errors import UnreadableSource
from bgg_analytics.reader import (
    Record,
    RecordReader,
    check_source,
    open_source,
    read_lines,
    split_record,
)


class TestSplitRecord:
    """Tests for split_record function."""

    def test_adjacent_delimiters_give_empty_cells(self):
        """Delimiters are not coalesced."""
        assert split_record("a;;b;", ";").fields == ["a", "", "b", ""]

    def test_short_row_reads_empty(self):
        """Positions past the end read as empty strings."""
        record = split_record("a;b", ";")
        assert record.cell(2) == "b"
        assert record.cell(5) == ""

    def test_extra_fields_retained(self):
        """Fields beyond the header are kept positionally."""
        record = split_record("1;2;3;4", ";")
        assert len(record) == 4
        assert record.cell(4) == "4"

    def test_cell_index_zero_is_empty(self):
        """Positions are 1-based."""
        assert Record(["a"]).cell(0) == ""


class TestRecordReader:
    """Tests for RecordReader."""

    def test_header_and_records(self):
        """First line is the header, the rest are records."""
        reader = RecordReader(["/ID;Name", "1;Catan", "2;Azul"], ";")
        records = list(reader)

        assert reader.header.names == ["/ID", "Name"]
        assert [r.fields for r in records] == [["1", "Catan"], ["2", "Azul"]]
        assert reader.records_read == 2

    def test_line_numbers_follow_source(self):
        """Record line numbers count the header as line 1."""
        records = list(RecordReader(["h", "a", "b"], ";"))
        assert [r.line_number for r in records] == [2, 3]

    def test_empty_source(self):
        """No lines gives an empty header and no records."""
        reader = RecordReader([], ";")
        assert len(reader.header) == 0
        assert list(reader) == []


class TestOpenSource:
    """Tests for open_source and check_source."""

    def test_missing_file_raises(self, tmp_path):
        """A path that does not exist is unreadable."""
        with pytest.raises(UnreadableSource) as excinfo:
            with open_source(tmp_path / "nope.txt"):
                pass
        assert "nope.txt" in str(excinfo.value)

    def test_directory_raises(self, tmp_path):
        """A directory is not a regular file."""
        with pytest.raises(UnreadableSource):
            check_source(tmp_path)

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_unreadable_file_raises(self, tmp_path):
        """A file without read permission is rejected."""
        path = tmp_path / "locked.txt"
        path.write_text("a;b\n")
        path.chmod(0)
        with pytest.raises(UnreadableSource):
            check_source(path)

    def test_lines_split_on_lf_only(self, tmp_path):
        """CR stays in the line; only LF ends it."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"a;b\r\nc;d\r\ne")
        with open_source(path) as lines:
            assert list(lines) == ["a;b\r", "c;d\r", "e"]

    def test_undecodable_bytes_survive(self, tmp_path):
        """Invalid UTF-8 bytes round-trip through decoding."""
        path = tmp_path / "latin.txt"
        path.write_bytes(b"Caf\xe9\n")
        with open_source(path) as lines:
            (line,) = list(lines)
        assert line.encode("utf-8", "surrogateescape") == b"Caf\xe9"


class TestReadLines:
    """Tests for read_lines function."""

    def test_text_split_like_a_file(self):
        """A trailing newline does not add an empty line."""
        assert read_lines("a\nb\n") == ["a", "b"]
        assert read_lines("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self):
        """Empty text has no lines."""
        assert read_lines("") == []

    def test_sequence_passthrough(self):
        """Sequences are copied into a list."""
        assert read_lines(("x", "y")) == ["x", "y"]
