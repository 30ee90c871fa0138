"""
Pearson correlation from single-pass sufficient statistics.
"""

from __future__ import annotations

import math
import re

from .base import RecordConsumer
from .header import ColumnRef
from .reader import Record

NUMERIC = re.compile(r"[+-]?([0-9]+([.][0-9]*)?|[.][0-9]+)")


def is_numeric(value: str) -> bool:
    return value != "" and NUMERIC.fullmatch(value) is not None


def format_coefficient(r: float) -> str:
    return f"{r:.3f}"


class CorrelationCalculator(RecordConsumer):
    """
    Running sums for the correlation of column `x` against column `y`.

    A record contributes only when both cells are numeric; otherwise the
    whole pair is skipped.
    """

    __slots__ = ("x", "y", "n", "sum_x", "sum_y", "sum_x_sq", "sum_y_sq", "sum_xy")

    def __init__(self, x: ColumnRef, y: ColumnRef):
        self.x = x
        self.y = y
        self.n = 0
        self.sum_x = 0.0
        self.sum_y = 0.0
        self.sum_x_sq = 0.0
        self.sum_y_sq = 0.0
        self.sum_xy = 0.0

    def add(self, x: float, y: float) -> None:
        self.n += 1
        self.sum_x += x
        self.sum_y += y
        self.sum_x_sq += x * x
        self.sum_y_sq += y * y
        self.sum_xy += x * y

    def consume(self, record: Record) -> None:
        val_x = record.get(self.x)
        val_y = record.get(self.y)
        if is_numeric(val_x) and is_numeric(val_y):
            self.add(float(val_x), float(val_y))

    def coefficient(self) -> float:
        """
        Pearson r, or 0.0 with fewer than two pairs or a zero-variance column.
        """
        if self.n < 2:
            return 0.0
        numerator = (self.n * self.sum_xy) - (self.sum_x * self.sum_y)
        denominator_x = (self.n * self.sum_x_sq) - (self.sum_x * self.sum_x)
        denominator_y = (self.n * self.sum_y_sq) - (self.sum_y * self.sum_y)
        if denominator_x <= 0 or denominator_y <= 0:
            return 0.0
        return numerator / math.sqrt(denominator_x * denominator_y)

    def result(self) -> str:
        return format_coefficient(self.coefficient())
