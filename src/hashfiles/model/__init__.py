"""Core data models for hashfiles."""

from .entities import FileContent, HashRequest, HashResult

__all__ = [
    "FileContent",
    "HashRequest",
    "HashResult",
]
