"""Command-line root validation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from dupe_finder.errors import ValidationError


def validate_directories(paths: Sequence[str | Path]) -> None:
    """Check that *paths* is non-empty and every entry is an existing directory.

    Raises ValidationError naming the first offending path.
    """
    if not paths:
        raise ValidationError(None, "at least one directory is required")

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise ValidationError(path, "does not exist")
        if not path.is_dir():
            raise ValidationError(path, "is not a directory")
