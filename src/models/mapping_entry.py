"""
MappingEntry: one source-range-to-offset rule of a translation table.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MappingEntry:
    """Values in [source_start, source_end) are moved by (target_start - source_start)."""

    source_start: int
    source_end: int
    target_start: int

    def __post_init__(self) -> None:
        if self.source_start >= self.source_end:
            raise ValueError(
                f"MappingEntry source_start ({self.source_start}) must be "
                f"< source_end ({self.source_end})"
            )

    @classmethod
    def from_triple(cls, destination_start: int, source_start: int, length: int) -> "MappingEntry":
        """Build from the (destination_start, source_start, length) row layout."""
        return cls(source_start, source_start + length, destination_start)

    @property
    def length(self) -> int:
        return self.source_end - self.source_start

    @property
    def offset(self) -> int:
        return self.target_start - self.source_start

    def contains(self, value: int) -> bool:
        return self.source_start <= value < self.source_end

    def __repr__(self) -> str:
        return (
            f"MappingEntry([{self.source_start},{self.source_end}) "
            f"-> {self.target_start}, offset={self.offset:+d})"
        )
