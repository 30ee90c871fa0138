"""
Command-line entry points.

Usage examples:
    bgg-empty-cells bgg_dataset.txt ";"                 # empty cells per column
    bgg-empty-cells bgg_dataset.txt ";" --report audit.csv
    bgg-preprocess bgg_dataset.txt > bgg_dataset_cleaned.tsv
    bgg-preprocess bgg_dataset.txt --output bgg_dataset_cleaned.tsv
    bgg-analysis bgg_dataset_cleaned.tsv
    bgg-analysis bgg_dataset_cleaned.tsv --json results.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import analysis, audit, config, normalize
from .errors import AnalyticsError, InvalidArguments, MissingColumn
from .reader import check_source
from .utils import ensure_dir, write_json

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format=config.LOG_FORMAT,
    )


def parse_delimiter(raw: str) -> str:
    if raw == "":
        raise InvalidArguments("The separator character argument cannot be empty.")
    return config.decode_delimiter(raw)


def report_error(error: Exception) -> int:
    message = error.details() if isinstance(error, MissingColumn) else str(error)
    print(f"Error: {message}", file=sys.stderr)
    return 1


# =============================================================================
# EMPTY CELL AUDIT
# =============================================================================

def parse_empty_cells_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bgg-empty-cells",
        description="Count empty cells in every column of a delimited text file.",
    )
    parser.add_argument("input_file", help="Path to the file to audit.")
    parser.add_argument("separator", help="Column separator (use '\\t' or 'tab' for tab).")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also save the counts as a CSV report at this path.",
    )
    return parser.parse_args(argv)


def empty_cells_main(argv: Optional[List[str]] = None) -> int:
    args = parse_empty_cells_args(argv)
    configure_logging()

    try:
        separator = parse_delimiter(args.separator)
        counts = audit.audit_file(args.input_file, separator)
    except AnalyticsError as e:
        return report_error(e)

    for line in audit.format_counts(counts):
        print(line)

    if args.report:
        try:
            audit.write_report(counts, args.report)
        except OSError as e:
            return report_error(e)
    return 0


# =============================================================================
# PREPROCESS
# =============================================================================

def parse_preprocess_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bgg-preprocess",
        description="Clean a semicolon-separated export into a tab-separated file.",
    )
    parser.add_argument("input_file", help="Path to the raw semicolon-separated file.")
    parser.add_argument(
        "--delimiter",
        type=str,
        default=config.INPUT_DELIMITER,
        help="Input column separator (default: ';').",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the cleaned data here instead of standard output.",
    )
    return parser.parse_args(argv)


def preprocess_main(argv: Optional[List[str]] = None) -> int:
    args = parse_preprocess_args(argv)
    configure_logging()

    try:
        delimiter = parse_delimiter(args.delimiter)
        check_source(args.input_file)
        if args.output is None:
            normalize.normalize_file(args.input_file, sys.stdout, delimiter=delimiter)
        else:
            ensure_dir(args.output.parent)
            try:
                with open(args.output, "w", encoding="ascii", newline="") as out:
                    normalize.normalize_file(args.input_file, out, delimiter=delimiter)
            except AnalyticsError:
                args.output.unlink(missing_ok=True)
                raise
            logger.info(f"Cleaned data saved to {args.output}")
    except (AnalyticsError, OSError) as e:
        return report_error(e)
    return 0


# =============================================================================
# ANALYSIS
# =============================================================================

def parse_analysis_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bgg-analysis",
        description="Most popular mechanics/domains and rating correlations of a cleaned file.",
    )
    parser.add_argument("input_file", help="Path to the cleaned tab-separated file.")
    parser.add_argument(
        "--delimiter",
        type=str,
        default="\t",
        help="Column separator of the cleaned file (default: tab).",
    )
    parser.add_argument(
        "--json",
        dest="json_path",
        type=Path,
        default=None,
        help="Also save the results as JSON at this path.",
    )
    return parser.parse_args(argv)


def analysis_main(argv: Optional[List[str]] = None) -> int:
    args = parse_analysis_args(argv)
    configure_logging()

    try:
        delimiter = parse_delimiter(args.delimiter)
        result = analysis.analyze_file(args.input_file, delimiter=delimiter)
    except AnalyticsError as e:
        return report_error(e)

    print(analysis.format_report(result))

    if args.json_path:
        try:
            write_json(args.json_path, result.to_dict())
        except OSError as e:
            return report_error(e)
        logger.info(f"Results saved to {args.json_path}")
    return 0
