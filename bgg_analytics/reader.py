"""
Line and record reading.

Sources are read as bytes and split on LF only. Each line is decoded as UTF-8
with `surrogateescape`, so undecodable bytes pass through untouched and every
stage sees the source byte-for-byte. A CR before the LF stays in the line;
the stages that care about it strip it themselves.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from .errors import UnreadableSource
from .header import ColumnRef, Header

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def check_source(path: Path | str) -> Path:
    """
    Make sure `path` names a readable regular file.

    Raises:
        UnreadableSource: if it does not
    """
    path = Path(path)
    if not path.is_file():
        raise UnreadableSource(path)
    if not os.access(path, os.R_OK):
        raise UnreadableSource(path, reason="cannot be read")
    return path


def decode_line(raw: bytes) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    return raw.decode(ENCODING, ENCODING_ERRORS)


@contextmanager
def open_source(path: Path | str) -> Iterator[Iterator[str]]:
    """Open `path` and yield an iterator over its decoded lines."""
    path = check_source(path)
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise UnreadableSource(path, reason=f"cannot be read ({e.strerror})") from e
    with fh:
        yield (decode_line(raw) for raw in fh)


class Record:
    """One data row, positionally aligned to the header."""

    __slots__ = ("fields", "line_number")

    def __init__(self, fields: List[str], line_number: int = 0):
        self.fields = fields
        self.line_number = line_number

    def __len__(self) -> int:
        return len(self.fields)

    def __repr__(self) -> str:
        return f"Record({self.fields!r}, line_number={self.line_number})"

    def cell(self, index: int) -> str:
        """Cell at 1-based `index`; "" past the end of a short row."""
        if 0 < index <= len(self.fields):
            return self.fields[index - 1]
        return ""

    def get(self, ref: ColumnRef) -> str:
        return ref.value(self.fields)


def split_record(line: str, delimiter: str, line_number: int = 0) -> Record:
    """Split on every delimiter occurrence; adjacent delimiters give empty cells."""
    return Record(line.split(delimiter), line_number)


class RecordReader:
    """
    Reads a header line followed by data records.

    Usage:
        with open_source("bgg_dataset.txt") as lines:
            reader = RecordReader(lines, ";")
            for record in reader:
                ...
    """

    def __init__(self, lines: Iterable[str], delimiter: str):
        self.delimiter = delimiter
        self._lines = iter(lines)
        first: Optional[str] = next(self._lines, None)
        self.header = Header.parse(first, delimiter)
        self.records_read = 0

    def __iter__(self) -> Iterator[Record]:
        line_number = 1
        for line in self._lines:
            line_number += 1
            self.records_read += 1
            yield split_record(line, self.delimiter, line_number)


def read_lines(lines: Sequence[str] | str) -> List[str]:
    """Split in-memory text the same way `open_source` splits a file."""
    if not isinstance(lines, str):
        return list(lines)
    if lines == "":
        return []
    parts = lines.split("\n")
    if lines.endswith("\n"):
        parts.pop()
    return parts
