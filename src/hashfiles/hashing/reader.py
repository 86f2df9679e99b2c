"""Batched and sequential readers over a resolved path list.

Both readers return contents in exactly the order of the input paths and
stop at the first failing path. The concurrent reader bounds the number of
in-flight reads to ``batch_size``: every read of a batch runs in a worker
thread, the batch is awaited as a whole, and only then does the next batch
start. A failed or cancelled read surfaces as ``ReadFailureError``, while
``SystemExit`` and ``KeyboardInterrupt`` raised in a worker propagate
unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Sequence

from hashfiles.exceptions import ConfigError, ReadFailureError
from hashfiles.io import read_file_content
from hashfiles.model import FileContent

logger = logging.getLogger(__name__)


def iter_batches(paths: Sequence[str], batch_size: int) -> Iterator[Sequence[str]]:
    """Yield consecutive slices of at most *batch_size* paths."""
    if batch_size < 1:
        raise ConfigError(f"batch_size must be a positive integer, got {batch_size}")
    for start in range(0, len(paths), batch_size):
        yield paths[start : start + batch_size]


async def read_batched(paths: Sequence[str], batch_size: int) -> list[FileContent]:
    """Read *paths* concurrently, one batch at a time."""
    contents: list[FileContent] = []
    for index, batch in enumerate(iter_batches(paths, batch_size)):
        logger.debug("Reading batch %d (%d file(s))", index, len(batch))
        results = await asyncio.gather(
            *(asyncio.to_thread(read_file_content, path) for path in batch),
            return_exceptions=True,
        )
        contents.extend(_settle_batch(batch, results))
    return contents


def read_sequential(paths: Sequence[str]) -> list[FileContent]:
    """Read *paths* one after another in order."""
    return [read_file_content(path) for path in paths]


def _settle_batch(batch: Sequence[str], results: list[FileContent | BaseException]) -> list[FileContent]:
    """Raise the first failure in path order, or return the batch contents."""
    settled: list[FileContent] = []
    for path, result in zip(batch, results, strict=True):
        if isinstance(result, ReadFailureError):
            raise result
        if isinstance(result, (Exception, asyncio.CancelledError)):
            raise ReadFailureError(path, result) from result
        if isinstance(result, BaseException):
            raise result
        settled.append(result)
    return settled
