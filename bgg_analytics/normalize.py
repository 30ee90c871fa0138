"""
Normalization of a raw, semicolon-separated export into the cleaned form.

Transformations:
1. Fields are re-separated with the output delimiter (tab).
2. A CR left before the line feed is dropped.
3. Decimal commas in the numeric columns become periods.
4. Blank primary keys are filled from an `IdSequencer` seeded one past the
   largest numeric key anywhere in the source.
5. Every character outside TAB, LF and printable ASCII is deleted.

The header only goes through the structural steps (1, 2 and 5); it has no
numeric or identifier semantics.

Usage:
    from bgg_analytics import normalize

    with open("bgg_dataset_cleaned.tsv", "w", encoding="ascii", newline="") as out:
        normalize.normalize_file("bgg_dataset.txt", out)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from . import config
from .header import ASCII_WHITESPACE, ColumnRef, Header
from .ids import IdSequencer
from .reader import Record, RecordReader, open_source, read_lines

logger = logging.getLogger(__name__)

# Everything except TAB, LF and SPACE..TILDE
NON_PRINTABLE_ASCII = re.compile(r"[^\t\n\x20-\x7e]")


def strip_non_ascii(text: str) -> str:
    return NON_PRINTABLE_ASCII.sub("", text)


def finish_line(line: str) -> str:
    if line.endswith("\r"):
        line = line[:-1]
    return strip_non_ascii(line) + "\n"


@dataclass(frozen=True)
class NormalizeColumns:
    """Columns the normalizer acts on, resolved against one header."""

    id_ref: ColumnRef
    numeric_refs: Tuple[ColumnRef, ...] = ()

    @classmethod
    def resolve(
        cls,
        header: Header,
        id_column: str = config.ID_COLUMN,
        numeric_columns: Sequence[str] = tuple(config.NUMERIC_COLUMNS),
        source: Optional[str] = None,
    ) -> "NormalizeColumns":
        """
        Resolve the primary key (required) and numeric columns (optional).

        Raises:
            MissingColumn: if the primary key column is absent
        """
        id_ref = header.require([id_column], source=source)[id_column]
        numeric_refs = tuple(header.resolve_present(numeric_columns))
        skipped = [name for name in numeric_columns if header.find(name) is None]
        if skipped:
            logger.warning(f"Decimal normalization skipped for absent columns: {', '.join(skipped)}")
        return cls(id_ref, numeric_refs)


class Normalizer:
    """Turns raw records into cleaned output lines."""

    def __init__(
        self,
        columns: NormalizeColumns,
        sequencer: IdSequencer,
        output_delimiter: str = config.OUTPUT_DELIMITER,
    ):
        self.columns = columns
        self.sequencer = sequencer
        self.output_delimiter = output_delimiter
        self.ids_assigned = 0

    def format_header(self, header: Header) -> str:
        return finish_line(self.output_delimiter.join(header.raw_fields))

    def normalize(self, record: Record) -> str:
        fields = list(record.fields)

        for ref in self.columns.numeric_refs:
            if ref.index <= len(fields):
                fields[ref.index - 1] = fields[ref.index - 1].replace(",", ".")

        id_index = self.columns.id_ref.index
        if len(fields) < id_index:
            fields.extend([""] * (id_index - len(fields)))
        identifier = fields[id_index - 1].strip(ASCII_WHITESPACE)
        if identifier == "":
            identifier = str(next(self.sequencer))
            self.ids_assigned += 1
        fields[id_index - 1] = identifier

        return finish_line(self.output_delimiter.join(fields))


def _prepare(
    reader: RecordReader,
    id_column: str,
    numeric_columns: Sequence[str],
    source: Optional[str],
) -> Tuple[NormalizeColumns, IdSequencer]:
    columns = NormalizeColumns.resolve(reader.header, id_column, numeric_columns, source=source)
    sequencer = IdSequencer.seeded_from(reader, columns.id_ref)
    return columns, sequencer


def normalize_lines(
    lines: Sequence[str] | str,
    delimiter: str = config.INPUT_DELIMITER,
    id_column: str = config.ID_COLUMN,
    numeric_columns: Sequence[str] = tuple(config.NUMERIC_COLUMNS),
    output_delimiter: str = config.OUTPUT_DELIMITER,
) -> List[str]:
    """Normalize in-memory lines (or text) and return the output lines."""
    lines = read_lines(lines)
    columns, sequencer = _prepare(RecordReader(lines, delimiter), id_column, numeric_columns, None)

    reader = RecordReader(lines, delimiter)
    normalizer = Normalizer(columns, sequencer, output_delimiter)
    output = [normalizer.format_header(reader.header)]
    output.extend(normalizer.normalize(record) for record in reader)
    return output


def normalize_file(
    path: Path | str,
    out: TextIO,
    delimiter: str = config.INPUT_DELIMITER,
    id_column: str = config.ID_COLUMN,
    numeric_columns: Sequence[str] = tuple(config.NUMERIC_COLUMNS),
    output_delimiter: str = config.OUTPUT_DELIMITER,
) -> int:
    """
    Normalize the file at `path` and write the cleaned stream to `out`.

    The source is read twice: a seeding pass over the primary keys, then the
    normalization pass. Nothing is written until seeding has finished.

    Returns:
        Number of data records written
    """
    source = str(path)
    with open_source(path) as lines:
        columns, sequencer = _prepare(RecordReader(lines, delimiter), id_column, numeric_columns, source)

    with open_source(path) as lines:
        reader = RecordReader(lines, delimiter)
        normalizer = Normalizer(columns, sequencer, output_delimiter)
        out.write(normalizer.format_header(reader.header))
        for record in reader:
            out.write(normalizer.normalize(record))

    logger.info(
        f"Normalized {reader.records_read:,} records from {source} "
        f"({normalizer.ids_assigned:,} identifiers assigned)"
    )
    return reader.records_read
