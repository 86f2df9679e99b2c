"""Supported digest algorithms and their hashlib names."""

from __future__ import annotations

SUPPORTED_ALGORITHMS: tuple[str, ...] = ("sha-1", "sha-256", "sha-384", "sha-512")
DEFAULT_ALGORITHM: str = "sha-1"

HASHLIB_NAMES: dict[str, str] = {
    "sha-1": "sha1",
    "sha-256": "sha256",
    "sha-384": "sha384",
    "sha-512": "sha512",
}

DIGEST_HEX_LENGTHS: dict[str, int] = {
    "sha-1": 40,
    "sha-256": 64,
    "sha-384": 96,
    "sha-512": 128,
}
