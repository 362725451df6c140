"""
Unit tests for the Pydantic I/O contracts.
"""
import pytest
from pydantic import ValidationError

from src.models.almanac_io import AlmanacPayload, MapBlock, RemapReport


class TestMapBlock:
    def test_rows_become_tuples(self):
        block = MapBlock(name="seed-to-soil", entries=[[50, 98, 2]])
        assert block.entries == [(50, 98, 2)]

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValidationError):
            MapBlock(entries=[[50, 98, 0]])

    def test_wrong_arity_rejected(self):
        with pytest.raises(ValidationError):
            MapBlock(entries=[[50, 98]])


class TestAlmanacPayload:
    def test_from_example(self, example_payload):
        almanac = AlmanacPayload.model_validate(example_payload)
        assert almanac.seeds == [79, 14, 55, 13]
        assert len(almanac.maps) == 7
        assert almanac.maps[3].name == "water-to-light"


class TestRemapReport:
    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            RemapReport(
                mode="sideways",
                minimum=1,
                seed_count=1,
                stages=[],
                processing_metadata={"duration_ms": 0, "stages_run": 0, "final_intervals": 1},
            )
