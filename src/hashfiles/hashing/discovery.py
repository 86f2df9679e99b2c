"""Expansion of patterns and exact paths into an ordered file list."""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from hashfiles.constants.discovery import (
    GLOB_INCLUDE_HIDDEN,
    GLOB_RECURSIVE,
    NUL_CHARACTER,
)
from hashfiles.exceptions import ResolutionError

logger = logging.getLogger(__name__)


def resolve_paths(patterns: Iterable[str], exact_paths: bool) -> tuple[str, ...]:
    """Return a deduplicated, ascending tuple of file paths.

    With ``exact_paths`` every input is taken verbatim and nothing is checked
    on disk; a missing path fails later when it is read. Otherwise each
    pattern is glob-expanded and only regular files (or symlinks to them)
    are kept, as absolute paths. Dot-files and dot-directories match like any
    other entry. Both modes sort so that the same inputs in any order
    resolve identically.
    """
    if exact_paths:
        return tuple(sorted(set(patterns)))

    discovered: set[str] = set()
    for pattern in patterns:
        matches = expand_pattern(pattern)
        logger.debug("Pattern %r matched %d file(s)", pattern, len(matches))
        discovered.update(matches)
    return tuple(sorted(discovered))


def expand_pattern(pattern: str) -> set[str]:
    """Expand one glob pattern into absolute paths of regular files."""
    _check_pattern(pattern)
    matched: set[str] = set()
    try:
        for candidate in glob.iglob(
            pattern, recursive=GLOB_RECURSIVE, include_hidden=GLOB_INCLUDE_HIDDEN
        ):
            if Path(candidate).is_file():
                matched.add(os.path.abspath(candidate))
    except (OSError, ValueError) as exc:
        raise ResolutionError(pattern, str(exc), exc) from exc
    return matched


def _check_pattern(pattern: str) -> None:
    if not isinstance(pattern, str):
        raise ResolutionError(repr(pattern), "pattern must be a string")
    if not pattern:
        raise ResolutionError(pattern, "pattern is empty")
    if NUL_CHARACTER in pattern:
        raise ResolutionError(pattern, "pattern contains a NUL byte")
