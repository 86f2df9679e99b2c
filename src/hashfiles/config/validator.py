"""Config file validation for hashfiles runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from hashfiles.constants.algorithms import SUPPORTED_ALGORITHMS
from hashfiles.constants.config import CONFIG_FILENAME
from hashfiles.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOLEAN_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from hashfiles.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a hashfiles.yaml file and return every problem found.

    Never raises; a missing default config file is not an error, a missing
    explicit one is.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    _validate_patterns(raw, path_str, errors)
    _validate_algorithm(raw, path_str, errors)
    _validate_batch_size(raw, path_str, errors)

    for key in BOOLEAN_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a boolean",
                )
            )

    return errors


def _validate_patterns(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    if "patterns" not in raw:
        return
    val = raw["patterns"]
    if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="patterns",
                message="invalid type for `patterns`",
                hint="expected a list of strings",
            )
        )
    elif val and any(not item for item in val):
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="patterns",
                message="`patterns` must not contain empty strings",
            )
        )


def _validate_algorithm(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    if "algorithm" not in raw:
        return
    val = raw["algorithm"]
    if not isinstance(val, str) or val not in SUPPORTED_ALGORITHMS:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="algorithm",
                message="unsupported value for `algorithm`",
                hint=f"expected one of: {', '.join(SUPPORTED_ALGORITHMS)}; got: {val!r}",
            )
        )


def _validate_batch_size(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    if "batch_size" not in raw:
        return
    val = raw["batch_size"]
    if isinstance(val, bool) or not isinstance(val, int):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="batch_size",
                message="invalid type for `batch_size`",
                hint="expected a positive integer",
            )
        )
    elif val <= 0:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="batch_size",
                message=f"`batch_size` must be a positive integer, got {val}",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
