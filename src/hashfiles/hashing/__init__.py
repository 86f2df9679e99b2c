"""Resolve, read and digest pipeline."""

from __future__ import annotations

from typing import Any

__all__ = ["hash_files", "hash_files_sync", "run_hash", "run_hash_sync"]


def __getattr__(name: str) -> Any:
    """Lazily expose hashing APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import orchestrator

        return getattr(orchestrator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
