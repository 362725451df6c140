"""
Constants used across the remapping pipeline.
Versioned and pinned for determinism.
"""
from typing import List

# =============================================================================
# Seed interpretation modes
# =============================================================================
POINT_MODE: str = "point"
RANGE_MODE: str = "range"

SEED_MODES: List[str] = [POINT_MODE, RANGE_MODE]

# =============================================================================
# Vectorized lookup domain (numpy int64)
# =============================================================================
INT64_MIN: int = -(2 ** 63)
INT64_MAX: int = 2 ** 63 - 1

# =============================================================================
# Structured payload contract
# =============================================================================
PAYLOAD_SCHEMA_VERSION: str = "almanac-payload-v1"

# Arity of one table row: (destination_start, source_start, length)
ENTRY_ROW_ARITY: int = 3
