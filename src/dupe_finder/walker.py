"""Recursive enumeration of regular files under one or more roots."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dupe_finder.errors import TraversalError

logger = logging.getLogger(__name__)


def sort_dir_contents(directory: str | Path) -> tuple[list[Path], list[Path]]:
    """Read one directory and split it into (regular files, subdirectories).

    Both lists are sorted by entry name. Symlinks and special files are skipped.
    """
    directory = Path(directory)
    files: list[Path] = []
    dirs: list[Path] = []
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
        for entry in entries:
            if entry.is_symlink():
                continue
            if entry.is_dir(follow_symlinks=False):
                dirs.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                files.append(Path(entry.path))
    except OSError as exc:
        raise TraversalError(directory, exc) from exc

    logger.debug("Read %s: %d files, %d dirs", directory, len(files), len(dirs))
    return files, dirs


def walk(roots: Iterable[str | Path]) -> list[Path]:
    """Return every regular file below *roots*.

    Roots are visited in argument order; inside a directory its files come
    first, then each subdirectory depth-first in name order. Paths that are
    textually identical are listed once. Any unreadable directory aborts the
    whole walk with TraversalError.
    """
    found: list[Path] = []
    seen: set[Path] = set()

    for root in roots:
        stack = [Path(root)]
        while stack:
            directory = stack.pop()
            files, dirs = sort_dir_contents(directory)
            for path in files:
                if path not in seen:
                    seen.add(path)
                    found.append(path)
            stack.extend(reversed(dirs))

    logger.info("Found %d files", len(found))
    return found
