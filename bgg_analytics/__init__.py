"""
Streaming analytics for delimiter-separated board-game exports.

Each module covers one stage of the pipeline:
    header       column names and resolution
    reader       byte-faithful line and record reading
    audit        empty cells per column
    normalize    raw export -> cleaned tab-separated stream
    ids          identifiers for rows with a blank primary key
    frequency    most frequent token in multi-valued columns
    correlation  Pearson r from running sums
    analysis     the combined single-pass report

Usage:
    from bgg_analytics import audit, normalize, analysis

    audit.audit_file("bgg_dataset.txt", ";")
    normalize.normalize_lines(open("bgg_dataset.txt").read())
    analysis.analyze_file("bgg_dataset_cleaned.tsv")
"""

from __future__ import annotations

from . import analysis, audit, base, correlation, frequency, header, ids, normalize, reader
from .errors import AnalyticsError, InvalidArguments, MissingColumn, UnreadableSource

__version__ = "0.1.0"

__all__ = [
    "analysis",
    "audit",
    "base",
    "correlation",
    "frequency",
    "header",
    "ids",
    "normalize",
    "reader",
    "AnalyticsError",
    "InvalidArguments",
    "MissingColumn",
    "UnreadableSource",
]
