"""Shared type aliases for hashfiles."""

from .common import JsonObject, JsonScalar, JsonValue, OutputFormat

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
