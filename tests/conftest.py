"""Shared test fixtures for dupe_finder test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from dupe_finder.config import Settings


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture()
def test_settings() -> Settings:
    """Settings with defaults and a small concurrency limit."""
    return Settings(max_concurrent=4)


# ---------------------------------------------------------------------------
# Sample trees
# ---------------------------------------------------------------------------

@pytest.fixture()
def testdata(tmp_path: Path) -> Path:
    """Build a tree with duplicates inside and across directories.

    testdata/
        dir1/
            inter-same      "shared across dirs"
            intra-diff1     "first unique file"
            intra-diff2     "second unique file"
            intra-same1     "same content"
            intra-same2     "same content"
            sub/
                nested-same "same content"
        dir2/
            inter-diff      "only in dir2"
            inter-same      "shared across dirs"
    """
    top = tmp_path / "testdata"
    dir1 = top / "dir1"
    dir2 = top / "dir2"
    sub = dir1 / "sub"
    sub.mkdir(parents=True)
    dir2.mkdir()

    (dir1 / "inter-same").write_bytes(b"shared across dirs")
    (dir1 / "intra-diff1").write_bytes(b"first unique file")
    (dir1 / "intra-diff2").write_bytes(b"second unique file")
    (dir1 / "intra-same1").write_bytes(b"same content")
    (dir1 / "intra-same2").write_bytes(b"same content")
    (sub / "nested-same").write_bytes(b"same content")
    (dir2 / "inter-diff").write_bytes(b"only in dir2")
    (dir2 / "inter-same").write_bytes(b"shared across dirs")
    return top


@pytest.fixture()
def many_files(tmp_path: Path) -> list[Path]:
    """Forty files cycling through four distinct contents."""
    root = tmp_path / "many"
    root.mkdir()
    paths = []
    for i in range(40):
        p = root / f"f{i:02d}.bin"
        p.write_bytes(f"content-{i % 4}".encode() * 1000)
        paths.append(p)
    return paths
