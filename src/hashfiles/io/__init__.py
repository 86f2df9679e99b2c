"""Shared file I/O helpers."""

from .files import read_file_content

__all__ = ["read_file_content"]
