"""Blocking and non-blocking entry points for hashing a set of files.

Both variants validate the request, resolve paths with the same resolver,
and feed contents in resolved order to the same digest function. They
differ only in how files are read, so they return identical digests for
identical inputs.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from hashfiles.exceptions import ConfigError, InvalidAlgorithmError
from hashfiles.hashing.digest import compute_digest, is_supported_algorithm
from hashfiles.hashing.discovery import resolve_paths
from hashfiles.hashing.reader import read_batched, read_sequential
from hashfiles.model import FileContent, HashRequest, HashResult

logger = logging.getLogger(__name__)


def validate_request(request: HashRequest) -> None:
    """Reject an unsupported algorithm or batch size before any I/O."""
    if not is_supported_algorithm(request.algorithm):
        raise InvalidAlgorithmError(request.algorithm)
    batch_size = request.batch_size
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
        raise ConfigError(f"batch_size must be a positive integer, got {batch_size!r}")


async def run_hash(request: HashRequest | None = None) -> HashResult:
    """Hash the selected files, reading each batch concurrently."""
    request = request or HashRequest()
    validate_request(request)
    paths = await asyncio.to_thread(resolve_paths, request.patterns, request.exact_paths)
    logger.info("Resolved %d file(s) for hashing", len(paths))
    contents = await read_batched(paths, request.batch_size)
    return _build_result(request, paths, contents)


def run_hash_sync(request: HashRequest | None = None) -> HashResult:
    """Hash the selected files, reading one file at a time."""
    request = request or HashRequest()
    validate_request(request)
    paths = resolve_paths(request.patterns, request.exact_paths)
    logger.info("Resolved %d file(s) for hashing", len(paths))
    contents = read_sequential(paths)
    return _build_result(request, paths, contents)


async def hash_files(request: HashRequest | None = None) -> str:
    """Return the hex digest of the selected files' combined contents."""
    result = await run_hash(request)
    return result.digest


def hash_files_sync(request: HashRequest | None = None) -> str:
    """Blocking counterpart of :func:`hash_files`."""
    return run_hash_sync(request).digest


def _build_result(request: HashRequest, paths: tuple[str, ...], contents: Sequence[FileContent]) -> HashResult:
    digest = compute_digest(contents, request.algorithm)
    byte_count = sum(len(content.data) for content in contents)
    logger.info("Computed %s over %d byte(s)", request.algorithm, byte_count)
    return HashResult(
        digest=digest,
        algorithm=request.algorithm,
        paths=paths,
        byte_count=byte_count,
    )
