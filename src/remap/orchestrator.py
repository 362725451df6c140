"""
Orchestrator: main entry point for a lowest-location run.

Executes the 5-stage flow:
    1. Validation of the structured payload
    2. Table & pipeline construction (sorting, overlap rejection)
    3. Seed interpretation (point or range mode)
    4. Pipeline fold (Range Mapper + Coalescer per stage)
    5. Minimum extraction + report assembly
"""
import logging
import time
from typing import Optional

from src.config import settings
from src.config.constants import SEED_MODES
from src.models.almanac_io import AlmanacPayload, ProcessingMetadata, RemapReport, StageReport
from src.models.errors import RemapError
from src.remap.extract import minimum
from src.remap.metrics import record_error, record_run
from src.remap.pipeline import build_pipeline, iter_stages
from src.remap.seeds import seed_intervals
from src.remap.validation import validate_almanac_payload

logger = logging.getLogger(__name__)


def lowest_location(
    payload: dict | str,
    mode: Optional[str] = None,
    coalesce_between_stages: Optional[bool] = None,
) -> dict:
    """
    Compute the minimum value reachable from the seeds through every table.

    Args:
        payload: Structured parser output ({"seeds": [...], "maps": [...]})
                 as a dict or JSON string.
        mode: "point" or "range". Defaults to settings.DEFAULT_SEED_MODE.
        coalesce_between_stages: Override for settings.COALESCE_BETWEEN_STAGES.

    Returns:
        RemapReport as a plain dict.

    Raises:
        ParseError: Payload failed validation.
        OverlapError: A table has overlapping source ranges.
        EmptyResultError: No seeds to take the minimum of.
    """
    if mode is None:
        mode = settings.DEFAULT_SEED_MODE
    if mode not in SEED_MODES:
        raise ValueError(f"mode must be one of {SEED_MODES}, got '{mode}'")

    try:
        return _run(payload, mode, coalesce_between_stages)
    except RemapError as e:
        record_error(type(e).__name__)
        raise


def _run(payload: dict | str, mode: str, coalesce_between_stages: Optional[bool]) -> dict:
    start_time = time.monotonic()

    # ==================================================================
    # Stage 1: Validate
    # ==================================================================
    validation_result = validate_almanac_payload(payload, mode=mode)
    if not validation_result.valid:
        logger.error("Almanac payload validation failed: %s", validation_result.errors)
    almanac = AlmanacPayload.model_validate(validation_result.raise_for_errors())

    # ==================================================================
    # Stage 2: Build pipeline
    # ==================================================================
    pipeline = build_pipeline(almanac.maps)

    # ==================================================================
    # Stage 3: Seeds → initial intervals
    # ==================================================================
    initial = seed_intervals(almanac.seeds, mode)
    logger.info(
        "Remapping %d seeds (%s mode, %d initial intervals) through %d stages",
        len(almanac.seeds),
        mode,
        len(initial),
        len(pipeline),
    )

    # ==================================================================
    # Stage 4: Fold
    # ==================================================================
    stages = []
    current = initial
    for table, intervals_in, current in iter_stages(initial, pipeline, coalesce_between_stages):
        stages.append(
            StageReport(
                name=table.name,
                entries=len(table),
                intervals_in=intervals_in,
                intervals_out=len(current),
            )
        )

    # ==================================================================
    # Stage 5: Minimum + report
    # ==================================================================
    lowest = minimum(current)
    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    record_run(mode)
    logger.info("Lowest location %d (%s mode) in %d ms", lowest, mode, elapsed_ms)

    report = RemapReport(
        mode=mode,
        minimum=lowest,
        seed_count=len(almanac.seeds),
        stages=stages,
        processing_metadata=ProcessingMetadata(
            duration_ms=elapsed_ms,
            stages_run=len(stages),
            final_intervals=len(current),
        ),
    )
    return report.model_dump()
