"""Stdout rendering for hash results."""

from __future__ import annotations

import json

from hashfiles.constants.reporting import VALID_OUTPUT_FORMATS
from hashfiles.exceptions import ConfigError
from hashfiles.model import HashResult
from hashfiles.types import OutputFormat


def render_result(result: HashResult, output_format: OutputFormat = "text") -> str:
    """Render *result* as a bare digest line or a compact JSON object."""
    if output_format not in VALID_OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format: {output_format}. Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )
    if output_format == "json":
        return json.dumps(result.to_dict(), sort_keys=True)
    return result.digest
