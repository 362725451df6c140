"""
Prometheus Metrics: remapping pipeline observability.

Exposes counters and histograms for:
- Stage processing latency
- Interval counts after each stage
- Error kinds surfaced to the caller
- Runs per seed mode

Usage
-----
    from src.remap.metrics import timed_stage, record_stage_intervals

    with timed_stage("seed-to-soil"):
        current = ...

    record_stage_intervals("seed-to-soil", len(current))
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Processing latency per stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "remap_stage_seconds",
    "Processing time per pipeline stage in seconds",
    ["stage"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

# Working-set size after each stage (post-coalesce).
STAGE_INTERVALS: Histogram = Histogram(
    "remap_stage_intervals",
    "Number of intervals leaving each pipeline stage",
    ["stage"],
    buckets=(1, 4, 16, 64, 256, 1024, 4096),
)

# Errors that aborted a run, by kind.
ERRORS: Counter = Counter(
    "remap_errors_total",
    "Errors surfaced by the remapping core, by error kind",
    ["kind"],
)

# Completed runs, by seed mode.
RUNS: Counter = Counter(
    "remap_runs_total",
    "Completed remapping runs by seed mode",
    ["mode"],
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_stage_intervals(stage: str, count: int) -> None:
    """Observe the interval count leaving *stage*."""
    STAGE_INTERVALS.labels(stage=stage).observe(count)


def record_error(kind: str) -> None:
    """Increment the error counter for *kind* (exception class name)."""
    ERRORS.labels(kind=kind).inc()


def record_run(mode: str) -> None:
    RUNS.labels(mode=mode).inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("soil-to-fertilizer"):
            mapped = ...
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
