"""File-level read primitive shared by both hashing variants."""

from __future__ import annotations

from pathlib import Path

from hashfiles.exceptions import ReadFailureError
from hashfiles.model import FileContent


def read_file_content(path: str) -> FileContent:
    """Read the full contents of *path*, wrapping OS errors as ``ReadFailureError``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ReadFailureError(path, exc) from exc
    return FileContent(path=path, data=data)
