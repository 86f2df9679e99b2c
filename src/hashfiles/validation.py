"""Preflight validation run by the CLI before hashing."""

from __future__ import annotations

from pathlib import Path

from hashfiles.config import validate_config_file
from hashfiles.constants.validation import CFG010
from hashfiles.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Return config problems in deterministic order, empty when valid."""
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_errors(errors)
