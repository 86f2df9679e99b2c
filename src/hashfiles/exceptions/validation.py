"""Structured validation records for config-file preflight."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem with a stable code and the offending field."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as a single human-readable line."""
        location = f"{self.path}:{self.field}" if self.field else self.path
        line = f"[{self.code}] {location} {self.message}"
        return f"{line} ({self.hint})" if self.hint else line


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, path, then field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
