"""Failures raised by the resolve, read and digest pipeline."""

from __future__ import annotations

from hashfiles.constants.algorithms import SUPPORTED_ALGORITHMS
from hashfiles.exceptions.base import HashFilesError


class InvalidAlgorithmError(HashFilesError, ValueError):
    """Raised when the requested digest algorithm is not supported."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"Invalid algorithm {algorithm!r}. Please use one of the following: {', '.join(SUPPORTED_ALGORITHMS)}"
        )


class ReadFailureError(HashFilesError):
    """Raised when a selected file could not be read."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read file {path}: {_describe(cause)}")


class ResolutionError(HashFilesError):
    """Raised when a pattern cannot be expanded into file paths."""

    def __init__(self, pattern: str, reason: str, cause: BaseException | None = None) -> None:
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"Failed to resolve pattern {pattern!r}: {reason}")


def _describe(cause: BaseException) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause) or type(cause).__name__
