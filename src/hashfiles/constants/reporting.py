"""Constants for stdout rendering of hash results."""

from __future__ import annotations

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

RESULT_JSON_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "required": ["algorithm", "byte_count", "digest", "file_count"],
    "properties": {
        "algorithm": {"enum": ["sha-1", "sha-256", "sha-384", "sha-512"]},
        "byte_count": {"type": "integer", "minimum": 0},
        "digest": {"type": "string", "pattern": "^[0-9a-f]+$"},
        "file_count": {"type": "integer", "minimum": 0},
    },
}
