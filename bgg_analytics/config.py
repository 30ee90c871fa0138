"""
Run configuration.

Defaults live here as module constants. A `.env` file at the project root (or
the process environment) can override the delimiters and the log level.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=env_path)


def _delimiter_from_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if not raw:
        return default
    return decode_delimiter(raw)


def decode_delimiter(raw: str) -> str:
    """Turn a user-typed delimiter into the literal character(s) it names."""
    if raw in ("\\t", "tab", "TAB"):
        return "\t"
    return raw


# Column names consumed from headers
ID_COLUMN = "/ID"
RATING_COLUMN = "Rating Average"
COMPLEXITY_COLUMN = "Complexity Average"
YEAR_COLUMN = "Year Published"
MECHANICS_COLUMN = "Mechanics"
DOMAINS_COLUMN = "Domains"

# Columns whose decimal commas are rewritten to periods during normalization
NUMERIC_COLUMNS = [RATING_COLUMN, COMPLEXITY_COLUMN]

# Delimiters
INPUT_DELIMITER = _delimiter_from_env("BGG_INPUT_DELIMITER", ";")
OUTPUT_DELIMITER = _delimiter_from_env("BGG_OUTPUT_DELIMITER", "\t")

# Logging
LOG_LEVEL = os.getenv("BGG_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
