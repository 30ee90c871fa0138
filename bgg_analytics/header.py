"""
Header parsing and column resolution.

The first line of a source names its columns. Names are cleaned once, and
every later lookup goes through the resolved `ColumnRef` objects rather than
scanning names per record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import MissingColumn

BOM = "\ufeff"

# Matches the POSIX [[:space:]] class
ASCII_WHITESPACE = " \t\n\v\f\r"


def clean_name(raw: str) -> str:
    """Trim surrounding whitespace and any trailing carriage return."""
    return raw.strip(ASCII_WHITESPACE).rstrip("\r")


@dataclass(frozen=True)
class ColumnRef:
    """A column name resolved to its 1-based position."""

    name: str
    index: int

    def value(self, fields: Sequence[str]) -> str:
        """Cell of `fields` at this column, or "" past the end."""
        if 0 < self.index <= len(fields):
            return fields[self.index - 1]
        return ""


class Header:
    """Ordered column names of a source, with name-to-position lookup."""

    def __init__(self, raw_fields: Sequence[str]):
        self.raw_fields: List[str] = list(raw_fields)
        self.names: List[str] = [clean_name(field) for field in self.raw_fields]
        self._positions: Dict[str, int] = {}
        for position, name in enumerate(self.names, start=1):
            # first occurrence wins
            self._positions.setdefault(name, position)

    @classmethod
    def parse(cls, line: Optional[str], delimiter: str) -> "Header":
        if line is None:
            return cls([])
        if line.startswith(BOM):
            line = line[len(BOM):]
        if line == "":
            return cls([])
        return cls(line.split(delimiter))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __repr__(self) -> str:
        return f"Header({self.names!r})"

    def find(self, name: str) -> Optional[int]:
        """1-based position of the first column named `name`, or None."""
        return self._positions.get(name)

    def ref(self, name: str) -> Optional[ColumnRef]:
        position = self.find(name)
        if position is None:
            return None
        return ColumnRef(name, position)

    def require(self, names: Iterable[str], source: Optional[str] = None) -> Dict[str, ColumnRef]:
        """
        Resolve every name in `names`.

        Raises:
            MissingColumn: listing all unresolved names, not just the first
        """
        resolved: Dict[str, ColumnRef] = {}
        missing: List[str] = []
        for name in names:
            ref = self.ref(name)
            if ref is None:
                missing.append(name)
            else:
                resolved[name] = ref
        if missing:
            raise MissingColumn(missing, source=source)
        return resolved

    def resolve_present(self, names: Iterable[str]) -> List[ColumnRef]:
        """Resolve the names that exist and silently drop the rest."""
        refs = []
        for name in names:
            ref = self.ref(name)
            if ref is not None:
                refs.append(ref)
        return refs
