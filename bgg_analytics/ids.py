"""
Identifier sequence used to fill blank primary keys.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .header import ASCII_WHITESPACE, ColumnRef
from .reader import Record

logger = logging.getLogger(__name__)

UNSIGNED_INT = re.compile(r"[0-9]+")


class IdSequencer:
    """
    Monotonic counter handing out new identifiers.

    `next(seq)` returns the current value and then advances, so values come
    out strictly increasing in call order.
    """

    def __init__(self, start: int = 1):
        self.current = start
        self.issued = 0

    @classmethod
    def seeded_from(cls, records: Iterable[Record], id_ref: ColumnRef) -> "IdSequencer":
        """
        Seed one past the largest numeric identifier in `records`.

        Cells are trimmed the same way the normalizer trims them before
        output, so `" 12 "` and a trailing `"5\\r"` both count. Signed or
        non-digit values are ignored. With no numeric identifier the sequence
        starts at 1.
        """
        highest = 0
        for record in records:
            value = record.get(id_ref).strip(ASCII_WHITESPACE)
            if UNSIGNED_INT.fullmatch(value):
                highest = max(highest, int(value))
        logger.info(f"Highest existing {id_ref.name} is {highest}; new ids start at {highest + 1}")
        return cls(highest + 1)

    def __iter__(self) -> "IdSequencer":
        return self

    def __next__(self) -> int:
        value = self.current
        self.current += 1
        self.issued += 1
        return value

    def __repr__(self) -> str:
        return f"IdSequencer(current={self.current}, issued={self.issued})"
