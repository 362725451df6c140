"""
Unit tests for the value types: Interval, MappingEntry, TranslationTable.
"""
import dataclasses

import pytest

from src.models.interval import Interval
from src.models.errors import OverlapError
from src.models.mapping_entry import MappingEntry
from src.models.table import TranslationTable


class TestInterval:
    def test_length_and_empty(self):
        assert Interval(3, 10).length == 7
        assert Interval(5, 5).is_empty
        assert not Interval(5, 6).is_empty

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            Interval(10, 3)

    def test_from_start_length(self):
        assert Interval.from_start_length(79, 14) == Interval(79, 93)

    def test_shifted_returns_new_value(self):
        iv = Interval(10, 20)
        moved = iv.shifted(-5)
        assert moved == Interval(5, 15)
        assert iv == Interval(10, 20)

    def test_frozen(self):
        iv = Interval(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            iv.start = 0  # type: ignore[misc]


class TestMappingEntry:
    def test_from_triple_layout(self):
        entry = MappingEntry.from_triple(50, 98, 2)
        assert entry.source_start == 98
        assert entry.source_end == 100
        assert entry.target_start == 50
        assert entry.offset == -48
        assert entry.length == 2

    def test_contains(self):
        entry = MappingEntry.from_triple(52, 50, 48)
        assert entry.contains(50)
        assert entry.contains(97)
        assert not entry.contains(98)

    def test_empty_source_rejected(self):
        with pytest.raises(ValueError):
            MappingEntry(10, 10, 0)


class TestTranslationTable:
    def test_source_starts_derived(self):
        table = TranslationTable(
            entries=(MappingEntry(0, 5, 100), MappingEntry(10, 12, 0)),
            name="t",
        )
        assert table.source_starts == (0, 10)
        assert len(table) == 2
        assert not table.is_identity

    def test_empty_table_is_identity(self):
        assert TranslationTable().is_identity

    def test_out_of_order_entries_rejected(self):
        with pytest.raises(ValueError):
            TranslationTable(entries=(MappingEntry(20, 30, 0), MappingEntry(0, 10, 50)))

    def test_overlapping_entries_rejected(self):
        with pytest.raises(OverlapError) as exc_info:
            TranslationTable(
                entries=(MappingEntry(10, 15, 0), MappingEntry(12, 16, 0)),
                name="direct",
            )
        assert exc_info.value.table_name == "direct"

    def test_touching_entries_accepted(self):
        table = TranslationTable(entries=(MappingEntry(0, 10, 50), MappingEntry(10, 20, 0)))
        assert table.source_starts == (0, 10)
