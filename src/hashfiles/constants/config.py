"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "hashfiles.yaml"

DEFAULT_PATTERNS: tuple[str, ...] = ("./**",)
DEFAULT_BATCH_SIZE: int = 100
