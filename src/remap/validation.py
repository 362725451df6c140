"""
Validation: multi-stage check of the structured almanac payload.

Implements:
- JSON parse (payload may arrive as a string)
- Schema conformance (jsonschema strict)
- Business rules (positive entry lengths, seed pairs in range mode)
- Quality checks (empty tables, duplicate stage names)

Overlap between entries is checked later, in build_table().
"""
import json
import logging
from collections import Counter
from typing import List

from jsonschema import ValidationError, validate

from src.config.constants import RANGE_MODE
from src.config.schemas import ALMANAC_PAYLOAD_SCHEMA
from src.models.validation import ValidationResult

logger = logging.getLogger(__name__)


def validate_almanac_payload(
    payload: str | dict,
    mode: str | None = None,
) -> ValidationResult:
    """
    Multi-stage validation of the parser's structured output.

    Stages:
        1. JSON Parse
        2. Schema conformance
        3. Business rules
        4. Quality checks (warnings only)

    Args:
        payload: Dict or JSON string with "seeds" and "maps".
        mode: Seed mode; range mode additionally requires an even seed count.

    Returns:
        ValidationResult with valid flag, errors, warnings, and the decoded data.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Parse JSON
    # ------------------------------------------------------------------
    if isinstance(payload, dict):
        data = payload
    else:
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, TypeError) as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult.rejected(errors, warnings)

    # ------------------------------------------------------------------
    # Stage 2: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=data, schema=ALMANAC_PAYLOAD_SCHEMA["schema"])
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        errors.append(f"Schema violation at {location}: {e.message}")
        return ValidationResult.rejected(errors, warnings)

    # ------------------------------------------------------------------
    # Stage 3: Business rules
    # ------------------------------------------------------------------
    for position, block in enumerate(data["maps"]):
        label = block.get("name") or f"stage-{position + 1}"
        for row in block["entries"]:
            if row[2] <= 0:
                errors.append(f"Non-positive length {row[2]} in table '{label}': {row}")

    seeds = data["seeds"]
    if mode == RANGE_MODE:
        if len(seeds) % 2 != 0:
            errors.append(f"Range mode needs (start, length) pairs, got {len(seeds)} seeds")
        for length in seeds[1::2]:
            if length < 0:
                errors.append(f"Negative seed range length: {length}")

    # ------------------------------------------------------------------
    # Stage 4: Quality checks
    # ------------------------------------------------------------------
    if not seeds:
        warnings.append("No seeds: the minimum cannot be computed")

    for position, block in enumerate(data["maps"]):
        if not block["entries"]:
            label = block.get("name") or f"stage-{position + 1}"
            warnings.append(f"Table '{label}' is empty (identity stage)")

    name_counts = Counter(b["name"] for b in data["maps"] if b.get("name"))
    for name, count in sorted(name_counts.items()):
        if count > 1:
            warnings.append(
                f"Stage name '{name}' used {count} times; only the first is addressable by name"
            )

    for warning in warnings:
        logger.warning("Payload: %s", warning)

    valid = len(errors) == 0
    return ValidationResult(valid=valid, errors=errors, warnings=warnings, data=data)
