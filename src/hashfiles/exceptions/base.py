"""Base exception for hashfiles."""

from __future__ import annotations


class HashFilesError(Exception):
    """Base class for all errors raised by hashfiles."""
