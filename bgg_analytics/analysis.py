"""
Board-game analysis over a cleaned (tab-separated) dataset.

Answers four questions in one pass over the file:
1. Most frequent game mechanic
2. Most frequent game domain ("style of game")
3. Correlation of year of publication with average rating
4. Correlation of complexity with average rating

Usage:
    from bgg_analytics import analysis

    result = analysis.analyze_file("bgg_dataset_cleaned.tsv")
    print(analysis.format_report(result))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import config
from .base import fan_out
from .correlation import CorrelationCalculator
from .frequency import FrequencyAggregator
from .reader import RecordReader, open_source, read_lines

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    config.YEAR_COLUMN,
    config.RATING_COLUMN,
    config.COMPLEXITY_COLUMN,
    config.MECHANICS_COLUMN,
    config.DOMAINS_COLUMN,
]

# Correlated pairs, x against y
CORRELATION_PAIRS = {
    "year_rating": (config.YEAR_COLUMN, config.RATING_COLUMN),
    "complexity_rating": (config.COMPLEXITY_COLUMN, config.RATING_COLUMN),
}

FREQUENCY_COLUMNS = {
    "mechanics": config.MECHANICS_COLUMN,
    "domains": config.DOMAINS_COLUMN,
}


@dataclass
class AnalysisResult:
    records: int
    top_mechanic: Optional[Tuple[str, int]]
    top_domain: Optional[Tuple[str, int]]
    year_rating: str
    complexity_rating: str

    def to_dict(self) -> Dict[str, Any]:
        def top_entry(entry: Optional[Tuple[str, int]]) -> Optional[Dict[str, Any]]:
            if entry is None:
                return None
            return {"name": entry[0], "count": entry[1]}

        return {
            "records": self.records,
            "most_popular_mechanic": top_entry(self.top_mechanic),
            "most_popular_domain": top_entry(self.top_domain),
            "correlations": {
                "year_published_vs_rating_average": self.year_rating,
                "complexity_average_vs_rating_average": self.complexity_rating,
            },
        }


def analyze_records(reader: RecordReader, source: Optional[str] = None) -> AnalysisResult:
    """
    Run every aggregator and calculator over `reader` in a single pass.

    Raises:
        MissingColumn: if any of REQUIRED_COLUMNS is absent from the header
    """
    refs = reader.header.require(REQUIRED_COLUMNS, source=source)
    logger.info(
        "Resolved columns: "
        + ", ".join(f"{name}={ref.index}" for name, ref in refs.items())
    )

    frequencies = {
        label: FrequencyAggregator(refs[name]) for label, name in FREQUENCY_COLUMNS.items()
    }
    correlations = {
        label: CorrelationCalculator(refs[x], refs[y])
        for label, (x, y) in CORRELATION_PAIRS.items()
    }
    records = fan_out(reader, [*frequencies.values(), *correlations.values()])

    return AnalysisResult(
        records=records,
        top_mechanic=frequencies["mechanics"].result(),
        top_domain=frequencies["domains"].result(),
        year_rating=correlations["year_rating"].result(),
        complexity_rating=correlations["complexity_rating"].result(),
    )


def analyze_lines(lines: Sequence[str] | str, delimiter: str = "\t") -> AnalysisResult:
    return analyze_records(RecordReader(read_lines(lines), delimiter))


def analyze_file(path: Path | str, delimiter: str = "\t") -> AnalysisResult:
    with open_source(path) as lines:
        return analyze_records(RecordReader(lines, delimiter), source=str(path))


def format_report(result: AnalysisResult) -> str:
    lines: List[str] = []

    if result.top_mechanic is not None:
        name, count = result.top_mechanic
        lines.append(f"The most popular game mechanics is {name} found in {count} games")
    else:
        lines.append("No mechanics data available to determine the most popular.")

    if result.top_domain is not None:
        name, count = result.top_domain
        lines.append(f"The most style of game is {name} found in {count} games")
    else:
        lines.append("No domains data available to determine the most popular.")

    lines.append("")
    lines.append(
        f"The correlation between the year of publication and the average rating is {result.year_rating}"
    )
    lines.append(
        f"The correlation between the complexity of a game and its average rating is {result.complexity_rating}"
    )
    return "\n".join(lines)
