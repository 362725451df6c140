"""
Interval: half-open integer range [start, end).
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """A half-open range of integers; empty when start == end."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @classmethod
    def from_start_length(cls, start: int, length: int) -> "Interval":
        return cls(start, start + length)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def shifted(self, offset: int) -> "Interval":
        """Return a new interval moved by *offset*."""
        return Interval(self.start + offset, self.end + offset)

    def __repr__(self) -> str:
        return f"Interval[{self.start},{self.end})"
