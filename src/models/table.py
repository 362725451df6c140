"""
TranslationTable: frozen, sorted, non-overlapping set of mapping entries.

src.remap.build_table sorts raw entries before constructing one; the table
itself refuses entries that are out of order or overlapping, since both
lookups bisect on source_start.
"""
from dataclasses import dataclass, field
from typing import Tuple

from src.models.errors import OverlapError
from src.models.mapping_entry import MappingEntry


@dataclass(frozen=True)
class TranslationTable:
    """One pipeline stage: values outside every entry map to themselves."""

    entries: Tuple[MappingEntry, ...] = ()
    name: str = ""
    source_starts: Tuple[int, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for previous, current in zip(self.entries, self.entries[1:]):
            if previous.source_start > current.source_start:
                raise ValueError(
                    f"TranslationTable '{self.name}' entries must be sorted by "
                    f"source_start: {previous!r} precedes {current!r}"
                )
            if previous.source_end > current.source_start:
                raise OverlapError(self.name, previous, current)

        # Bisection keys, derived once from the entries
        object.__setattr__(
            self, "source_starts", tuple(e.source_start for e in self.entries)
        )

    @property
    def is_identity(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        label = self.name or "<unnamed>"
        return f"TranslationTable('{label}', {len(self.entries)} entries)"
