"""Constants for pattern expansion."""

from __future__ import annotations

GLOB_RECURSIVE: bool = True
GLOB_INCLUDE_HIDDEN: bool = True
NUL_CHARACTER: str = "\x00"
