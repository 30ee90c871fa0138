"""
Error kinds raised by the analytics pipeline.

Library code raises these; only the command-line layer catches them and turns
them into an error message on stderr plus a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional


class AnalyticsError(Exception):
    """Base class for every fatal pipeline error."""


class InvalidArguments(AnalyticsError):
    """Command-line arguments are missing or malformed."""


class UnreadableSource(AnalyticsError):
    """The source file does not exist, is not a regular file, or cannot be read."""

    def __init__(self, path: Path | str, reason: str = "does not exist or is not a regular file"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Input file '{path}' {reason}.")


class MissingColumn(AnalyticsError):
    """One or more required columns are absent from the header."""

    def __init__(self, names: Iterable[str], source: Optional[str] = None):
        self.names: List[str] = list(names)
        self.source = source
        where = f" in header of {source}" if source else " in header"
        message = (
            f"Required column(s) not found{where}: {', '.join(self.names)}"
        )
        super().__init__(message)

    def details(self) -> str:
        """Message followed by one `Missing: <name>` line per column."""
        lines = [str(self)]
        lines.extend(f"Missing: {name}" for name in self.names)
        return "\n".join(lines)
