"""
Unit tests for the Coalescer.
"""
import random

from src.models.interval import Interval
from src.remap.coalesce import coalesce, drop_empty


class TestCoalesce:
    def test_empty_input(self):
        assert coalesce([]) == []

    def test_merges_overlap_and_adjacency(self):
        result = coalesce([Interval(10, 20), Interval(0, 5), Interval(5, 8), Interval(15, 30)])
        assert result == [Interval(0, 8), Interval(10, 30)]

    def test_keeps_disjoint(self):
        assert coalesce([Interval(3, 4), Interval(0, 2)]) == [Interval(0, 2), Interval(3, 4)]

    def test_contained_interval_absorbed(self):
        assert coalesce([Interval(0, 100), Interval(10, 20)]) == [Interval(0, 100)]

    def test_empty_intervals_filtered(self):
        assert coalesce([Interval(5, 5), Interval(1, 2), Interval(9, 9)]) == [Interval(1, 2)]

    def test_empty_interval_does_not_bridge_gap(self):
        result = coalesce([Interval(0, 2), Interval(2, 2), Interval(3, 4)])
        assert result == [Interval(0, 2), Interval(3, 4)]

    def test_idempotent(self):
        rng = random.Random(99)
        for _ in range(100):
            intervals = []
            for _ in range(rng.randrange(0, 15)):
                start = rng.randrange(0, 100)
                intervals.append(Interval(start, start + rng.randrange(0, 10)))
            once = coalesce(intervals)
            assert coalesce(once) == once

    def test_preserves_value_set(self):
        rng = random.Random(5)
        for _ in range(100):
            intervals = []
            for _ in range(rng.randrange(1, 10)):
                start = rng.randrange(0, 60)
                intervals.append(Interval(start, start + rng.randrange(0, 12)))
            before = {v for i in intervals for v in range(i.start, i.end)}
            after = [v for i in coalesce(intervals) for v in range(i.start, i.end)]
            assert sorted(before) == after


class TestDropEmpty:
    def test_drop_empty(self):
        assert drop_empty([Interval(1, 1), Interval(1, 3)]) == [Interval(1, 3)]
