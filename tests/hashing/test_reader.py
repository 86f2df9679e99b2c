"""Tests for batched and sequential file readers."""

from __future__ import annotations

import asyncio
import threading
import time
from pathlib import Path

import pytest

from hashfiles.exceptions import ConfigError, ReadFailureError
from hashfiles.hashing import reader
from hashfiles.hashing.reader import iter_batches, read_batched, read_sequential
from hashfiles.model import FileContent


def _write_files(root: Path, count: int) -> list[str]:
    paths = []
    for index in range(count):
        path = root / f"file_{index:02d}.txt"
        path.write_bytes(f"content-{index}".encode())
        paths.append(str(path))
    return paths


class _TrackingReader:
    """Stand-in read primitive that records calls, start/end events and peak concurrency."""

    def __init__(self, fail_on: frozenset[str] = frozenset(), delay: float = 0.02) -> None:
        self.fail_on = fail_on
        self.delay = delay
        self.calls: list[str] = []
        self.events: list[tuple[str, str]] = []
        self.in_flight = 0
        self.peak = 0
        self._lock = threading.Lock()

    def __call__(self, path: str) -> FileContent:
        with self._lock:
            self.calls.append(path)
            self.events.append(("start", path))
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
        try:
            time.sleep(self.delay)
            if path in self.fail_on:
                raise ReadFailureError(path, FileNotFoundError(2, "No such file or directory"))
            return FileContent(path=path, data=path.encode())
        finally:
            with self._lock:
                self.in_flight -= 1
                self.events.append(("end", path))


def test_iter_batches_preserves_order_and_bounds_size() -> None:
    batches = [list(batch) for batch in iter_batches(["a", "b", "c", "d", "e"], 2)]

    assert batches == [["a", "b"], ["c", "d"], ["e"]]


@pytest.mark.parametrize("batch_size", [0, -3])
def test_iter_batches_rejects_non_positive_size(batch_size: int) -> None:
    with pytest.raises(ConfigError, match="batch_size"):
        list(iter_batches(["a"], batch_size))


def test_read_sequential_preserves_order(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, 4)

    contents = read_sequential(paths)

    assert [content.path for content in contents] == paths
    assert contents[3].data == b"content-3"


def test_read_sequential_stops_at_first_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _TrackingReader(fail_on=frozenset({"b"}), delay=0)
    monkeypatch.setattr(reader, "read_file_content", fake)

    with pytest.raises(ReadFailureError) as exc_info:
        read_sequential(["a", "b", "c"])

    assert exc_info.value.path == "b"
    assert fake.calls == ["a", "b"]


@pytest.mark.asyncio
@pytest.mark.parametrize("batch_size", [1, 2, 3, 100])
async def test_read_batched_preserves_order(tmp_path: Path, batch_size: int) -> None:
    paths = _write_files(tmp_path, 7)

    contents = await read_batched(paths, batch_size)

    assert [content.path for content in contents] == paths
    assert [content.data for content in contents] == [f"content-{i}".encode() for i in range(7)]


@pytest.mark.asyncio
async def test_read_batched_empty_input() -> None:
    assert await read_batched([], 5) == []


@pytest.mark.asyncio
async def test_read_batched_bounds_concurrency(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _TrackingReader()
    monkeypatch.setattr(reader, "read_file_content", fake)
    paths = [f"p{i}" for i in range(7)]

    contents = await read_batched(paths, 3)

    assert [content.path for content in contents] == paths
    assert fake.peak == 3


@pytest.mark.asyncio
async def test_read_batched_runs_batches_strictly_in_sequence(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _TrackingReader()
    monkeypatch.setattr(reader, "read_file_content", fake)
    paths = [f"p{i}" for i in range(7)]
    batches = [paths[0:3], paths[3:6], paths[6:7]]

    await read_batched(paths, 3)

    position = {event: index for index, event in enumerate(fake.events)}
    for current, following in zip(batches, batches[1:]):
        last_end = max(position[("end", path)] for path in current)
        first_start = min(position[("start", path)] for path in following)
        assert last_end < first_start


@pytest.mark.asyncio
async def test_read_batched_does_not_start_next_batch_after_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _TrackingReader(fail_on=frozenset({"p1"}))
    monkeypatch.setattr(reader, "read_file_content", fake)

    with pytest.raises(ReadFailureError) as exc_info:
        await read_batched(["p0", "p1", "p2", "p3"], 2)

    assert exc_info.value.path == "p1"
    assert sorted(fake.calls) == ["p0", "p1"]


@pytest.mark.asyncio
async def test_read_batched_reports_first_failure_in_path_order(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _TrackingReader(fail_on=frozenset({"p1", "p2"}))
    monkeypatch.setattr(reader, "read_file_content", fake)

    with pytest.raises(ReadFailureError) as exc_info:
        await read_batched(["p0", "p1", "p2"], 10)

    assert exc_info.value.path == "p1"


@pytest.mark.asyncio
async def test_read_batched_wraps_unexpected_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _explode(path: str) -> FileContent:
        raise RuntimeError("device went away")

    monkeypatch.setattr(reader, "read_file_content", _explode)

    with pytest.raises(ReadFailureError, match="device went away") as exc_info:
        await read_batched(["only"], 4)

    assert exc_info.value.path == "only"
    assert isinstance(exc_info.value.cause, RuntimeError)


@pytest.mark.asyncio
async def test_read_batched_missing_file_fails(tmp_path: Path) -> None:
    paths = _write_files(tmp_path, 2) + [str(tmp_path / "zz_missing.txt")]

    with pytest.raises(ReadFailureError) as exc_info:
        await read_batched(paths, 2)

    assert exc_info.value.path == str(tmp_path / "zz_missing.txt")


@pytest.mark.parametrize(
    "interrupt",
    [SystemExit(3), KeyboardInterrupt()],
    ids=["system_exit", "keyboard_interrupt"],
)
def test_settle_batch_propagates_interpreter_exits_unwrapped(interrupt: BaseException) -> None:
    content = FileContent(path="a", data=b"a")

    with pytest.raises(type(interrupt)) as exc_info:
        reader._settle_batch(["a", "b"], [content, interrupt])

    assert exc_info.value is interrupt


def test_settle_batch_wraps_cancelled_read() -> None:
    with pytest.raises(ReadFailureError) as exc_info:
        reader._settle_batch(["a"], [asyncio.CancelledError()])

    assert exc_info.value.path == "a"
    assert isinstance(exc_info.value.cause, asyncio.CancelledError)
