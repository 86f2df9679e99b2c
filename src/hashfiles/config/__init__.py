"""Configuration loading and validation for hashfiles.

This package facade re-exports the public names so callers can use
``from hashfiles.config import ...``.
"""

from __future__ import annotations

from hashfiles.config.loader import load_config
from hashfiles.config.model import HashFilesConfig
from hashfiles.config.validator import _suggest_key, validate_config_file

__all__ = [
    "HashFilesConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
