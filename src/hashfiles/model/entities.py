"""Frozen dataclasses flowing through the hashing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from hashfiles.constants.algorithms import DEFAULT_ALGORITHM
from hashfiles.constants.config import DEFAULT_BATCH_SIZE, DEFAULT_PATTERNS
from hashfiles.types import JsonObject


@dataclass(frozen=True)
class HashRequest:
    """Options for one hashing call.

    ``patterns`` are glob patterns, or literal paths when ``exact_paths`` is
    set. Field values are checked by the hashing entry points before any
    file is touched, so an unsupported ``algorithm`` can still be carried
    here and rejected there.
    """

    patterns: tuple[str, ...] = DEFAULT_PATTERNS
    algorithm: str = DEFAULT_ALGORITHM
    batch_size: int = DEFAULT_BATCH_SIZE
    exact_paths: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.patterns, tuple):
            object.__setattr__(self, "patterns", tuple(self.patterns))


@dataclass(frozen=True)
class FileContent:
    """Raw bytes read from one selected file."""

    path: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class HashResult:
    """Digest plus the file selection it was computed over."""

    digest: str
    algorithm: str
    paths: tuple[str, ...]
    byte_count: int

    @property
    def file_count(self) -> int:
        return len(self.paths)

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping without the path list."""
        return {
            "algorithm": self.algorithm,
            "byte_count": self.byte_count,
            "digest": self.digest,
            "file_count": self.file_count,
        }
