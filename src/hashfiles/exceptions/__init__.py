"""Shared exception hierarchy for hashfiles."""

from __future__ import annotations

from .base import HashFilesError
from .config import ConfigError
from .hashing import InvalidAlgorithmError, ReadFailureError, ResolutionError

__all__ = [
    "ConfigError",
    "HashFilesError",
    "InvalidAlgorithmError",
    "ReadFailureError",
    "ResolutionError",
]
