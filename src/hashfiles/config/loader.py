"""Config loading and normalization for hashfiles runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from hashfiles.config.model import HashFilesConfig
from hashfiles.constants.algorithms import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from hashfiles.constants.config import CONFIG_FILENAME, DEFAULT_BATCH_SIZE, DEFAULT_PATTERNS
from hashfiles.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> HashFilesConfig:
    """Load config from ``hashfiles.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return HashFilesConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    patterns = _ensure_string_list(raw.get("patterns", list(DEFAULT_PATTERNS)), "patterns")
    if not patterns:
        patterns = list(DEFAULT_PATTERNS)

    algorithm = raw.get("algorithm", DEFAULT_ALGORITHM)
    if not isinstance(algorithm, str) or algorithm not in SUPPORTED_ALGORITHMS:
        raise ConfigError(f"algorithm must be one of {list(SUPPORTED_ALGORITHMS)}, got {algorithm!r}")

    batch_size = raw.get("batch_size", DEFAULT_BATCH_SIZE)
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
        raise ConfigError("batch_size must be a positive integer")

    return HashFilesConfig(
        patterns=tuple(patterns),
        algorithm=algorithm,
        batch_size=batch_size,
        exact_paths=_ensure_bool(raw.get("exact_paths", False), "exact_paths"),
        sync=_ensure_bool(raw.get("sync", False), "sync"),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
