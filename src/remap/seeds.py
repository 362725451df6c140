"""
Seed interpretation: turns the flat seed list into initial intervals.

Point mode:  every value v becomes [v, v+1).
Range mode:  values are consumed two at a time as (start, length) pairs.
"""
from typing import List, Sequence

from src.config.constants import POINT_MODE, RANGE_MODE, SEED_MODES
from src.models.errors import ParseError
from src.models.interval import Interval


def seeds_as_points(values: Sequence[int]) -> List[Interval]:
    return [Interval(v, v + 1) for v in values]


def seeds_as_ranges(values: Sequence[int]) -> List[Interval]:
    """
    Pair up (start, length) values; zero-length ranges are dropped.

    Raises:
        ParseError: Odd number of values or a negative length.
    """
    if len(values) % 2 != 0:
        raise ParseError(
            f"Range mode needs (start, length) pairs, got {len(values)} values",
            row=list(values),
        )

    intervals: List[Interval] = []
    for start, length in zip(values[::2], values[1::2]):
        if length < 0:
            raise ParseError(
                f"Seed range length must be >= 0, got {length}", row=[start, length]
            )
        if length:
            intervals.append(Interval.from_start_length(start, length))
    return intervals


def seed_intervals(values: Sequence[int], mode: str = POINT_MODE) -> List[Interval]:
    """Dispatch on *mode* ('point' or 'range')."""
    if mode == POINT_MODE:
        return seeds_as_points(values)
    if mode == RANGE_MODE:
        return seeds_as_ranges(values)
    raise ValueError(f"mode must be one of {SEED_MODES}, got '{mode}'")
