"""
Shared test fixtures for the remapping test suite.
"""
import json
import random

import pytest

from src.remap.pipeline import build_pipeline
from src.remap.table import build_table


# ==========================================================================
# Example almanac (7 stages)
# ==========================================================================

EXAMPLE_MAPS = [
    {"name": "seed-to-soil", "entries": [[50, 98, 2], [52, 50, 48]]},
    {"name": "soil-to-fertilizer", "entries": [[0, 15, 37], [37, 52, 2], [39, 0, 15]]},
    {"name": "fertilizer-to-water", "entries": [[49, 53, 8], [0, 11, 42], [42, 0, 7], [57, 7, 4]]},
    {"name": "water-to-light", "entries": [[88, 18, 7], [18, 25, 70]]},
    {"name": "light-to-temperature", "entries": [[45, 77, 23], [81, 45, 19], [68, 64, 13]]},
    {"name": "temperature-to-humidity", "entries": [[0, 69, 1], [1, 0, 69]]},
    {"name": "humidity-to-location", "entries": [[60, 56, 37], [56, 93, 4]]},
]


@pytest.fixture
def example_seeds():
    return [79, 14, 55, 13]


@pytest.fixture
def example_payload(example_seeds):
    return {
        "seeds": list(example_seeds),
        "maps": [
            {"name": block["name"], "entries": [list(r) for r in block["entries"]]}
            for block in EXAMPLE_MAPS
        ],
    }


@pytest.fixture
def example_payload_json(example_payload):
    return json.dumps(example_payload)


@pytest.fixture
def example_pipeline(example_payload):
    return build_pipeline(example_payload["maps"])


@pytest.fixture
def seed_to_soil():
    return build_table([[50, 98, 2], [52, 50, 48]], name="seed-to-soil")


# ==========================================================================
# Randomized tables
# ==========================================================================

def make_random_rows(rng: random.Random, domain: int = 200, max_entries: int = 6) -> list:
    """Non-overlapping (destination_start, source_start, length) rows in [0, domain)."""
    rows = []
    cursor = rng.randrange(0, 10)
    for _ in range(rng.randrange(0, max_entries + 1)):
        start = cursor + rng.randrange(0, 15)
        length = rng.randrange(1, 30)
        if start + length > domain:
            break
        rows.append([rng.randrange(0, domain), start, length])
        cursor = start + length
    rng.shuffle(rows)
    return rows


@pytest.fixture
def random_rows():
    return make_random_rows
