"""Shared pytest fixtures for on-disk file trees."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree of files and an empty directory under *tmp_path*."""
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty_dir").mkdir()
    (root / "a.txt").write_bytes(b"abc")
    (root / "b.txt").write_bytes(b"def")
    (root / "sub" / "c.txt").write_bytes(b"ghi")
    (root / "sub" / "deeper" / "d.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture()
def abc_def_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two files whose contents concatenate to ``abcdef``."""
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_bytes(b"abc")
    second.write_bytes(b"def")
    return first, second
