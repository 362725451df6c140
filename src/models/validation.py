"""
ValidationResult: outcome of almanac payload validation.

Errors make the payload unusable; warnings (empty tables, no seeds,
duplicate stage names) are logged and reported but do not stop a run.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from src.models.errors import ParseError


@dataclass
class ValidationResult:
    """Errors and warnings collected while checking one payload."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    data: Optional[dict] = None

    @classmethod
    def rejected(cls, errors: List[str], warnings: List[str]) -> "ValidationResult":
        return cls(valid=False, errors=errors, warnings=warnings)

    def raise_for_errors(self) -> dict:
        """Return the decoded payload, or raise ParseError carrying every error."""
        if not self.valid or self.data is None:
            raise ParseError(
                f"Almanac payload validation failed: {self.errors}",
                errors=list(self.errors),
            )
        return self.data
