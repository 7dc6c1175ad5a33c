"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


def _write_bytes(path: Path, size: int) -> Path:
    """Create a file of exactly ``size`` bytes, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file() -> Callable[[Path, int], Path]:
    """Return a factory creating files of a given size."""
    return _write_bytes


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for pattern tests.

    Layout::

        a.txt               10 bytes
        b.txt               14 bytes
        notes.md             5 bytes
        .hidden.txt          3 bytes
        docs/
        docs/c.txt           7 bytes
        docs/deep/d.txt      1 byte
        docs/deep/e.log     20 bytes
        dir.txt/            (directory named like a text file)
    """
    _write_bytes(tmp_path / "a.txt", 10)
    _write_bytes(tmp_path / "b.txt", 14)
    _write_bytes(tmp_path / "notes.md", 5)
    _write_bytes(tmp_path / ".hidden.txt", 3)
    _write_bytes(tmp_path / "docs" / "c.txt", 7)
    _write_bytes(tmp_path / "docs" / "deep" / "d.txt", 1)
    _write_bytes(tmp_path / "docs" / "deep" / "e.log", 20)
    (tmp_path / "dir.txt").mkdir()
    return tmp_path


@pytest.fixture
def in_sample_tree(sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the sample tree as working directory."""
    monkeypatch.chdir(sample_tree)
    return sample_tree
