"""Rendering of hash results for stdout."""

from .stdout import render_result

__all__ = ["render_result"]
