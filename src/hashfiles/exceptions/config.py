"""Configuration-related exceptions."""

from __future__ import annotations

from hashfiles.exceptions.base import HashFilesError


class ConfigError(HashFilesError, ValueError):
    """Raised when hashing configuration is invalid."""
