"""
Coalescer: merges overlapping or adjacent intervals between stages.

Used for efficiency only: the mapped value set is unchanged.
"""
from typing import Iterable, List

from src.models.interval import Interval


def drop_empty(intervals: Iterable[Interval]) -> List[Interval]:
    """Discard intervals with start == end."""
    return [i for i in intervals if not i.is_empty]


def coalesce(intervals: Iterable[Interval]) -> List[Interval]:
    """
    Sort by start and merge whenever next.start <= current.end.

    Idempotent: the output is sorted and has no mergeable neighbours.

    Args:
        intervals: Any collection of intervals (may contain empties).

    Returns:
        Fewest equivalent non-empty intervals, sorted by start.
    """
    ordered = sorted(drop_empty(intervals), key=lambda i: (i.start, i.end))
    if not ordered:
        return []

    merged: List[Interval] = []
    current = ordered[0]

    for nxt in ordered[1:]:
        if nxt.start <= current.end:
            if nxt.end > current.end:
                current = Interval(current.start, nxt.end)
        else:
            merged.append(current)
            current = nxt

    merged.append(current)
    return merged
