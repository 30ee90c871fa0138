"""
Frequency ranking over multi-valued (comma-separated) columns.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional, Tuple

from .base import RecordConsumer
from .header import ASCII_WHITESPACE, ColumnRef
from .reader import Record

logger = logging.getLogger(__name__)


def split_tokens(cell: str) -> List[str]:
    """Comma-split `cell`, trim each part and drop the empty ones."""
    tokens = []
    for part in cell.split(","):
        token = part.strip(ASCII_WHITESPACE)
        if token:
            tokens.append(token)
    return tokens


class FrequencyAggregator(RecordConsumer):
    """
    Counts distinct tokens in one column.

    Ranking is by count descending, then token ascending, so ties always
    resolve the same way. `column=None` is allowed and simply never counts
    anything.
    """

    def __init__(self, column: Optional[ColumnRef]):
        self.column = column
        self.counts: Counter = Counter()

    def consume(self, record: Record) -> None:
        if self.column is None:
            return
        cell = record.get(self.column)
        if cell == "":
            return
        self.counts.update(split_tokens(cell))

    def ranked(self) -> List[Tuple[str, int]]:
        return sorted(self.counts.items(), key=lambda item: (-item[1], item[0]))

    def top(self) -> Optional[Tuple[str, int]]:
        """Most frequent token and its count, or None when nothing was counted."""
        if not self.counts:
            name = self.column.name if self.column else "<unresolved>"
            logger.warning(f"No tokens found in column {name}")
            return None
        return self.ranked()[0]

    def result(self) -> Optional[Tuple[str, int]]:
        return self.top()
