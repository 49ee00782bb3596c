"""Value types shared by the walker, hashers and finders."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dupe_finder.errors import HashError

# Hex digest -> every path whose content produced it, in acceptance order.
Grouping = dict[str, list[Path]]


@dataclass(frozen=True)
class HashResult:
    """Outcome of hashing one file, tagged with its path.

    Exactly one of ``digest`` and ``error`` is set.
    """

    path: Path
    digest: str | None = None
    error: HashError | None = None

    def __post_init__(self) -> None:
        if (self.digest is None) == (self.error is None):
            raise ValueError("HashResult needs exactly one of digest or error")

    @property
    def ok(self) -> bool:
        return self.error is None


def add_to_grouping(grouping: Grouping, digest: str, path: Path) -> None:
    """Append *path* to the group for *digest*, creating the group if needed."""
    grouping.setdefault(digest, []).append(path)
