"""Config data model for hashfiles runs."""

from __future__ import annotations

from dataclasses import dataclass

from hashfiles.constants.algorithms import DEFAULT_ALGORITHM
from hashfiles.constants.config import DEFAULT_BATCH_SIZE, DEFAULT_PATTERNS
from hashfiles.model import HashRequest


@dataclass(frozen=True)
class HashFilesConfig:
    """Resolved defaults from ``hashfiles.yaml``."""

    patterns: tuple[str, ...] = DEFAULT_PATTERNS
    algorithm: str = DEFAULT_ALGORITHM
    batch_size: int = DEFAULT_BATCH_SIZE
    exact_paths: bool = False
    sync: bool = False

    def to_request(
        self,
        *,
        patterns: tuple[str, ...] | None = None,
        algorithm: str | None = None,
        batch_size: int | None = None,
        exact_paths: bool | None = None,
    ) -> HashRequest:
        """Build a request, letting explicit (non-``None``) values win over config."""
        return HashRequest(
            patterns=patterns if patterns else self.patterns,
            algorithm=algorithm if algorithm is not None else self.algorithm,
            batch_size=batch_size if batch_size is not None else self.batch_size,
            exact_paths=exact_paths if exact_paths is not None else self.exact_paths,
        )
