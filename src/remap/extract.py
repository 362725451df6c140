"""
Minimum Extractor.
"""
from typing import Iterable

from src.models.errors import EmptyResultError
from src.models.interval import Interval


def minimum(intervals: Iterable[Interval]) -> int:
    """
    Smallest start among *intervals*.

    Raises:
        EmptyResultError: If there are no non-empty intervals to scan.
    """
    starts = [i.start for i in intervals if not i.is_empty]
    if not starts:
        raise EmptyResultError("Cannot take the minimum of an empty interval collection")
    return min(starts)
