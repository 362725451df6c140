"""
Range Mapper: splits one interval at table boundaries.

The output pieces are pairwise disjoint, their union is exactly the input,
and each piece lies entirely inside one entry (shifted by its offset) or
entirely inside a gap (unchanged). Runs in O(log n + k) where k is the
number of entries the interval spans.
"""
from typing import List

from src.models.interval import Interval
from src.models.table import TranslationTable
from src.remap.table import candidate_index


def map_interval(interval: Interval, table: TranslationTable) -> List[Interval]:
    """
    Map *interval* through *table*.

    Args:
        interval: Half-open input range.
        table: Translation table (may be empty = identity).

    Returns:
        List of mapped pieces in source order. Empty input yields [].
    """
    if interval.is_empty:
        return []

    entries = table.entries
    cursor = interval.start
    end = interval.end
    pieces: List[Interval] = []

    # Start at the entry that may already cover cursor, else the next one
    index = candidate_index(table, cursor)
    if index < 0 or entries[index].source_end <= cursor:
        index += 1

    while cursor < end and index < len(entries):
        entry = entries[index]
        if entry.source_start >= end:
            break

        # 1. Gap before the entry
        if cursor < entry.source_start:
            pieces.append(Interval(cursor, entry.source_start))
            cursor = entry.source_start

        # 2. Entry-covered slice
        covered_end = min(end, entry.source_end)
        if cursor < covered_end:
            pieces.append(Interval(cursor, covered_end).shifted(entry.offset))
            cursor = covered_end

        index += 1

    # 3. Leftover tail past the last spanned entry
    if cursor < end:
        pieces.append(Interval(cursor, end))

    return pieces
