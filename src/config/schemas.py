"""
JSON Schema for the structured almanac payload.

The parsing collaborator hands the core a dict of this shape:

    {
        "seeds": [79, 14, 55, 13],
        "maps": [
            {"name": "seed-to-soil", "entries": [[50, 98, 2], [52, 50, 48]]},
            ...
        ]
    }

Each entry row is (destination_start, source_start, length).
"""
from src.config.constants import ENTRY_ROW_ARITY, PAYLOAD_SCHEMA_VERSION

ALMANAC_PAYLOAD_SCHEMA: dict = {
    "name": PAYLOAD_SCHEMA_VERSION,
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["seeds", "maps"],
        "properties": {
            "seeds": {
                "type": "array",
                "items": {"type": "integer"},
                "description": "Seed values, or (start, length) pairs in range mode",
            },
            "maps": {
                "type": "array",
                "description": "Ordered translation tables, one per pipeline stage",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["entries"],
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Stage label, e.g. 'seed-to-soil'",
                        },
                        "entries": {
                            "type": "array",
                            "items": {
                                "type": "array",
                                "minItems": ENTRY_ROW_ARITY,
                                "maxItems": ENTRY_ROW_ARITY,
                                "items": {"type": "integer"},
                            },
                        },
                    },
                },
            },
        },
    },
}
