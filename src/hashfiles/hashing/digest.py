"""Digest computation over concatenated file contents."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from hashfiles.constants.algorithms import DIGEST_HEX_LENGTHS, HASHLIB_NAMES
from hashfiles.exceptions import InvalidAlgorithmError
from hashfiles.model import FileContent


def is_supported_algorithm(algorithm: str) -> bool:
    return algorithm in HASHLIB_NAMES


def digest_hex_length(algorithm: str) -> int:
    """Return the hex digest length produced by *algorithm*."""
    if not is_supported_algorithm(algorithm):
        raise InvalidAlgorithmError(algorithm)
    return DIGEST_HEX_LENGTHS[algorithm]


def compute_digest(contents: Iterable[FileContent], algorithm: str) -> str:
    """Return the lowercase hex digest of all contents joined in the given order.

    Only raw bytes are hashed: no separators, lengths or path names.
    """
    hashlib_name = HASHLIB_NAMES.get(algorithm)
    if hashlib_name is None:
        raise InvalidAlgorithmError(algorithm)
    payload = b"".join(content.data for content in contents)
    return hashlib.new(hashlib_name, payload).hexdigest()
