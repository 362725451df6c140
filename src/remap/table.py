"""
Translation Table construction & Point Mapper.

build_table() sorts entries by source_start and rejects overlaps.
lookup_point() does a single bisection for the entry whose source_start is
the greatest value <= the input, then checks the entry's end.
lookup_points() is the numpy batch form of the same lookup.
"""
import logging
import re
from bisect import bisect_right
from typing import Any, Iterable, Sequence, Union

import numpy as np

from src.config.constants import ENTRY_ROW_ARITY
from src.models.errors import OverlapError, ParseError
from src.models.mapping_entry import MappingEntry
from src.models.table import TranslationTable

logger = logging.getLogger(__name__)

EntryLike = Union[MappingEntry, Sequence[Any]]

# Optional sign and ASCII digits only: no "1_000", no non-Latin digits
_DECIMAL_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)


# ======================================================================
# Internal helpers
# ======================================================================

def _coerce_int(token: Any, row: Any) -> int:
    """Accept ints and ASCII decimal strings; reject bools, floats and anything else."""
    if isinstance(token, bool):
        raise ParseError(f"Non-numeric token {token!r} in row {row!r}", row=row)
    if isinstance(token, (int, np.integer)):
        return int(token)
    if isinstance(token, str) and _DECIMAL_TOKEN.fullmatch(token.strip()):
        return int(token.strip())
    raise ParseError(f"Non-numeric token {token!r} in row {row!r}", row=row)


def entry_from_row(row: Sequence[Any]) -> MappingEntry:
    """
    Convert a (destination_start, source_start, length) row into a MappingEntry.

    Raises:
        ParseError: wrong arity, non-numeric token, or non-positive length.
    """
    if isinstance(row, (str, bytes)) or len(row) != ENTRY_ROW_ARITY:
        raise ParseError(
            f"Expected {ENTRY_ROW_ARITY} numeric tokens, got {row!r}", row=row
        )
    destination_start, source_start, length = (_coerce_int(t, row) for t in row)
    if length <= 0:
        raise ParseError(f"Entry length must be positive, got {length} in {row!r}", row=row)
    return MappingEntry.from_triple(destination_start, source_start, length)


def candidate_index(table: TranslationTable, value: int) -> int:
    """Index of the entry with the greatest source_start <= value, or -1."""
    return bisect_right(table.source_starts, value) - 1


# ======================================================================
# Construction
# ======================================================================

def build_table(entries: Iterable[EntryLike], name: str = "") -> TranslationTable:
    """
    Build a TranslationTable from MappingEntry objects or raw rows.

    Args:
        entries: MappingEntry instances or (destination_start, source_start,
                 length) rows, in any order.
        name: Stage label carried into logs and reports.

    Returns:
        TranslationTable with entries sorted by source_start.

    Raises:
        ParseError: If a raw row is malformed.
        OverlapError: If two source ranges overlap after sorting.
    """
    converted = [
        e if isinstance(e, MappingEntry) else entry_from_row(e)
        for e in entries
    ]
    converted.sort(key=lambda e: e.source_start)

    try:
        table = TranslationTable(entries=tuple(converted), name=name)
    except OverlapError as e:
        logger.error("Overlapping entries in table '%s': %r / %r", name, e.first, e.second)
        raise

    logger.debug("Built table '%s' with %d entries", name, len(table))
    return table


# ======================================================================
# Point Mapper
# ======================================================================

def lookup_point(table: TranslationTable, value: int) -> int:
    """
    Map one value through *table*; values in a gap map to themselves.

    O(log n) in the number of entries.
    """
    index = candidate_index(table, value)
    if index >= 0:
        entry = table.entries[index]
        if entry.contains(value):
            return value + entry.offset
    return value


def lookup_points(table: TranslationTable, values: Any) -> np.ndarray:
    """
    Vectorized lookup_point over an int64 array of values.

    Args:
        table: Translation table.
        values: Anything np.asarray accepts; must fit in int64.

    Returns:
        New int64 array of mapped values, same shape as *values*.
    """
    arr = np.asarray(values, dtype=np.int64)
    if table.is_identity:
        return arr.copy()

    starts = np.asarray(table.source_starts, dtype=np.int64)
    ends = np.asarray([e.source_end for e in table.entries], dtype=np.int64)
    offsets = np.asarray([e.offset for e in table.entries], dtype=np.int64)

    index = np.searchsorted(starts, arr, side="right") - 1
    safe_index = np.clip(index, 0, None)
    hit = (index >= 0) & (arr < ends[safe_index])
    return np.where(hit, arr + offsets[safe_index], arr)
