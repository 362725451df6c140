"""
Typed Pydantic models for the remapping I/O contracts.

Covers the parser → core hand-off (already-tokenized seeds and table rows)
and the report returned by a full run.
"""
from __future__ import annotations

from typing import List, Literal, Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Parser → core  (structured payload, accepted after schema validation)
# =============================================================================


class MapBlock(BaseModel):
    """
    One translation table as produced by the parsing collaborator.

    Rows keep the (destination_start, source_start, length) layout of the
    source text; conversion to MappingEntry happens in build_table().
    """

    name: str = Field("", description="Stage label, e.g. 'seed-to-soil'.")
    entries: List[Tuple[int, int, int]] = Field(
        default_factory=list,
        description="(destination_start, source_start, length) rows.",
    )

    @field_validator("entries")
    @classmethod
    def validate_lengths(cls, v: List[Tuple[int, int, int]]) -> List[Tuple[int, int, int]]:
        for row in v:
            if row[2] <= 0:
                raise ValueError(f"entry length must be positive, got {row[2]} in {list(row)}")
        return v


class AlmanacPayload(BaseModel):
    """Seeds plus the ordered list of tables, in pipeline order."""

    seeds: List[int] = Field(default_factory=list)
    maps: List[MapBlock] = Field(default_factory=list)


# =============================================================================
# Core → reporting collaborator
# =============================================================================


class StageReport(BaseModel):
    """Interval bookkeeping for one pipeline stage."""

    name: str
    entries: int = Field(..., ge=0)
    intervals_in: int = Field(..., ge=0)
    intervals_out: int = Field(..., ge=0)


class ProcessingMetadata(BaseModel):
    duration_ms: int = Field(..., ge=0)
    stages_run: int = Field(..., ge=0)
    final_intervals: int = Field(..., ge=0)


class RemapReport(BaseModel):
    """Outcome of one lowest_location() run."""

    mode: Literal["point", "range"]
    minimum: int
    seed_count: int = Field(..., ge=0)
    stages: List[StageReport]
    processing_metadata: ProcessingMetadata
