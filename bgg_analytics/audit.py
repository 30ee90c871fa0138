"""
Empty-cell audit.

Counts, for every column named in the header, how many data records leave
that column empty. Rows shorter than the header count as empty in the
missing positions; extra fields beyond the header are ignored.

Usage:
    from bgg_analytics import audit

    counts = audit.audit_file("bgg_dataset.txt", ";")
    for line in audit.format_counts(counts):
        print(line)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

import pandas as pd

from .base import RecordConsumer
from .header import Header
from .reader import Record, RecordReader, open_source
from .utils import safe_write_csv

logger = logging.getLogger(__name__)


class EmptyCellAuditor(RecordConsumer):
    """Per-column empty-cell counter."""

    def __init__(self, header: Header):
        self.header = header
        self.counts = [0] * len(header)
        self.records = 0

    def consume(self, record: Record) -> None:
        self.records += 1
        for position in range(1, len(self.counts) + 1):
            value = record.cell(position)
            if value.endswith("\r"):
                value = value[:-1]
            if value == "":
                self.counts[position - 1] += 1

    def result(self) -> List[Tuple[str, int]]:
        return list(zip(self.header.names, self.counts))


def audit_records(reader: RecordReader) -> List[Tuple[str, int]]:
    auditor = EmptyCellAuditor(reader.header)
    counts = auditor.consume_all(reader)
    logger.info(
        f"Audited {auditor.records:,} records across {len(reader.header)} columns"
    )
    return counts


def audit_file(path: Path | str, delimiter: str) -> List[Tuple[str, int]]:
    with open_source(path) as lines:
        return audit_records(RecordReader(lines, delimiter))


def format_counts(counts: Iterable[Tuple[str, int]]) -> List[str]:
    return [f"{name}: {count}" for name, count in counts]


def counts_to_dataframe(counts: Iterable[Tuple[str, int]]) -> pd.DataFrame:
    return pd.DataFrame(list(counts), columns=["column", "empty_cells"])


def write_report(counts: Iterable[Tuple[str, int]], path: Path) -> None:
    """Save the audit as a `column,empty_cells` CSV."""
    safe_write_csv(counts_to_dataframe(counts), path)
