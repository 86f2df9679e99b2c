"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unsupported algorithm
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG010,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "algorithm",
        "batch_size",
        "exact_paths",
        "patterns",
        "sync",
    }
)

BOOLEAN_KEYS: tuple[str, ...] = ("exact_paths", "sync")
