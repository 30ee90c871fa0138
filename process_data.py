#!/usr/bin/env python3
"""
Convenience wrapper around the three board-game data steps.

Usage examples:
    python process_data.py audit bgg_dataset.txt ";"          # empty cells per column
    python process_data.py preprocess bgg_dataset.txt > bgg_dataset_cleaned.tsv
    python process_data.py analyze bgg_dataset_cleaned.tsv    # popularity + correlations
"""

from __future__ import annotations

import argparse
import sys

from bgg_analytics import cli

COMMANDS = {
    "audit": cli.empty_cells_main,
    "preprocess": cli.preprocess_main,
    "analyze": cli.analysis_main,
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Audit, clean and analyze board-game data exports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s audit bgg_dataset.txt ";"
  %(prog)s audit bgg_dataset.txt ";" --report audit.csv
  %(prog)s preprocess bgg_dataset.txt --output bgg_dataset_cleaned.tsv
  %(prog)s analyze bgg_dataset_cleaned.tsv --json results.json

Arguments after the command are passed to that step; use
`%(prog)s <command> --help` for its options.
        """,
    )
    parser.add_argument("command", choices=sorted(COMMANDS), help="Step to run.")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the step.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    return COMMANDS[args.command](args.args)


if __name__ == "__main__":
    sys.exit(main())
