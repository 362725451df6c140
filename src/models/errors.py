"""
Error kinds raised by the remapping core.

All are fatal for the run: there is no retry logic anywhere in the core.
"""
from typing import Any, List, Optional

from src.models.mapping_entry import MappingEntry


class RemapError(Exception):
    """Base class for every error the remapping core raises."""


class ParseError(RemapError):
    """Structured input does not decompose into the expected numeric tokens."""

    def __init__(self, message: str, row: Any = None, errors: Optional[List[str]] = None) -> None:
        self.row = row
        self.errors = errors or [message]
        super().__init__(message)


class OverlapError(RemapError):
    """Two entries of one table have overlapping source ranges."""

    def __init__(self, table_name: str, first: MappingEntry, second: MappingEntry) -> None:
        self.table_name = table_name
        self.first = first
        self.second = second
        label = table_name or "<unnamed>"
        super().__init__(
            f"Overlapping entries in table '{label}': "
            f"[{first.source_start},{first.source_end}) and "
            f"[{second.source_start},{second.source_end})"
        )


class EmptyResultError(RemapError):
    """The minimum was requested over an empty collection."""
