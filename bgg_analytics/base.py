"""
Base class and helpers for record consumers.

Every streaming stage that reads records should:
1. Subclass `RecordConsumer`
2. Keep only its own accumulator state (never the records themselves)
3. Expose the final value through `result()`
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from .reader import Record

logger = logging.getLogger(__name__)


class RecordConsumer(ABC):
    """Accumulates state from a record stream, one record at a time."""

    __slots__ = ()

    @abstractmethod
    def consume(self, record: Record) -> None:
        """Fold one record into the accumulator."""

    @abstractmethod
    def result(self) -> Any:
        """Return the value accumulated so far."""

    def consume_all(self, records: Iterable[Record]) -> Any:
        for record in records:
            self.consume(record)
        return self.result()


def fan_out(records: Iterable[Record], consumers: Sequence[RecordConsumer]) -> int:
    """
    Feed one record stream to several consumers in lock-step.

    Every consumer sees a record before the stream advances, so a single pass
    over the source serves all of them.

    Returns:
        Number of records consumed
    """
    count = 0
    for record in records:
        for consumer in consumers:
            consumer.consume(record)
        count += 1
    logger.info(f"Fed {count:,} records to {len(consumers)} consumers")
    return count
