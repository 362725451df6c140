"""
Pipeline Fold: pushes intervals (or single values) through every table.

Stages run strictly in order; inside a stage every interval is mapped
independently and the concatenated pieces are coalesced before the next
stage:

    initial → table 1 → coalesce → table 2 → coalesce → … → table N
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from src.config import settings
from src.config.constants import INT64_MAX, INT64_MIN
from src.models.almanac_io import MapBlock
from src.models.interval import Interval
from src.models.table import TranslationTable
from src.remap.coalesce import coalesce, drop_empty
from src.remap.metrics import record_stage_intervals, timed_stage
from src.remap.range_mapper import map_interval
from src.remap.table import build_table, lookup_point, lookup_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pipeline:
    """Ordered, immutable sequence of translation tables."""

    tables: Tuple[TranslationTable, ...] = ()
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: Dict[str, int] = {}
        for position, table in enumerate(self.tables):
            # First occurrence wins for duplicate labels
            if table.name and table.name not in index:
                index[table.name] = position
        object.__setattr__(self, "_index", index)

    @property
    def names(self) -> List[str]:
        return [t.name for t in self.tables]

    def stage(self, name: str) -> TranslationTable:
        """Look up a stage by label. Raises KeyError if absent."""
        return self.tables[self._index[name]]

    def __len__(self) -> int:
        return len(self.tables)

    def __iter__(self) -> Iterator[TranslationTable]:
        return iter(self.tables)


def _block_parts(block: Any) -> Tuple[str, Iterable[Any]]:
    if isinstance(block, MapBlock):
        return block.name, block.entries
    if isinstance(block, dict):
        return block.get("name", ""), block.get("entries", [])
    return "", block


def build_pipeline(blocks: Iterable[Any]) -> Pipeline:
    """
    Build a Pipeline from table blocks in stage order.

    Each block may be a MapBlock, a {"name", "entries"} dict, or a bare list
    of rows / MappingEntry objects. Unnamed blocks are labelled stage-<n>.
    """
    tables = []
    for position, block in enumerate(blocks):
        name, entries = _block_parts(block)
        tables.append(build_table(entries, name=name or f"stage-{position + 1}"))
    return Pipeline(tables=tuple(tables))


# ======================================================================
# Range fold
# ======================================================================

def iter_stages(
    initial_intervals: Iterable[Interval],
    pipeline: Pipeline,
    coalesce_between_stages: Optional[bool] = None,
) -> Iterator[Tuple[TranslationTable, int, List[Interval]]]:
    """
    Yield (table, intervals_in, intervals_out) after each stage.

    Args:
        initial_intervals: Stage-0 working set.
        pipeline: Tables in stage order.
        coalesce_between_stages: Defaults to settings.COALESCE_BETWEEN_STAGES.
    """
    if coalesce_between_stages is None:
        coalesce_between_stages = settings.COALESCE_BETWEEN_STAGES
    normalize = coalesce if coalesce_between_stages else drop_empty

    current = normalize(initial_intervals)

    for table in pipeline:
        with timed_stage(table.name):
            mapped = [
                piece
                for interval in current
                for piece in map_interval(interval, table)
            ]
            intervals_in = len(current)
            current = normalize(mapped)

        logger.debug(
            "Stage '%s': %d intervals in, %d pieces, %d out",
            table.name,
            intervals_in,
            len(mapped),
            len(current),
        )
        record_stage_intervals(table.name, len(current))
        yield table, intervals_in, current


def run(
    initial_intervals: Iterable[Interval],
    pipeline: Pipeline,
    coalesce_between_stages: Optional[bool] = None,
) -> List[Interval]:
    """
    Fold *initial_intervals* through every stage of *pipeline*.

    Returns:
        Final interval collection (sorted and merged when coalescing is on).
    """
    if coalesce_between_stages is None:
        coalesce_between_stages = settings.COALESCE_BETWEEN_STAGES
    current = coalesce(initial_intervals) if coalesce_between_stages else drop_empty(initial_intervals)

    for _, _, current in iter_stages(current, pipeline, coalesce_between_stages):
        pass
    return current


# ======================================================================
# Point-wise variant
# ======================================================================

def _fits_int64(values: Iterable[int]) -> bool:
    return all(INT64_MIN <= v <= INT64_MAX for v in values)


def _table_fits_int64(table: TranslationTable) -> bool:
    return _fits_int64(
        v
        for e in table.entries
        for v in (e.source_start, e.source_end, e.target_start + e.length, e.offset)
    )


def run_points(
    values: Iterable[int],
    pipeline: Pipeline,
    vectorized: Optional[bool] = None,
) -> List[int]:
    """
    Push single values through every stage with the Point Mapper.

    The numpy path is used when *vectorized* (default:
    settings.VECTORIZED_POINT_LOOKUP) and every intermediate value fits in
    int64; otherwise each value is mapped with lookup_point().
    """
    if vectorized is None:
        vectorized = settings.VECTORIZED_POINT_LOOKUP
    current = [int(v) for v in values]

    for table in pipeline:
        with timed_stage(table.name):
            if vectorized and current and _fits_int64(current) and _table_fits_int64(table):
                current = lookup_points(table, current).tolist()
            else:
                current = [lookup_point(table, v) for v in current]
        logger.debug("Stage '%s': %d values mapped", table.name, len(current))

    return current


def trace_value(value: int, pipeline: Pipeline) -> List[int]:
    """Value after every stage, starting with the input itself."""
    trace = [value]
    for table in pipeline:
        trace.append(lookup_point(table, trace[-1]))
    return trace
