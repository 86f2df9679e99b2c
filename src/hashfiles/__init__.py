"""hashfiles: deterministic content fingerprints for sets of files."""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

__all__ = [
    "HashRequest",
    "HashResult",
    "__version__",
    "hash_files",
    "hash_files_sync",
    "run_hash",
    "run_hash_sync",
]


def __getattr__(name: str) -> Any:
    """Lazily expose the hashing API to keep CLI startup imports minimal."""
    if name in {"hash_files", "hash_files_sync", "run_hash", "run_hash_sync"}:
        from hashfiles.hashing import orchestrator

        return getattr(orchestrator, name)
    if name in {"HashRequest", "HashResult"}:
        from hashfiles import model

        return getattr(model, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
