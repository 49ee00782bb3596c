"""Turn a grouping into the duplicate report shown to the user."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from dupe_finder.models import Grouping

logger = logging.getLogger(__name__)


@dataclass
class DuplicateGroup:
    """Paths sharing one digest, sorted for display."""

    digest: str
    paths: list[Path]

    @property
    def size_bytes(self) -> int:
        try:
            return self.paths[0].stat().st_size
        except OSError as exc:
            logger.warning("Cannot stat %s, counting it as 0 bytes: %s", self.paths[0], exc)
            return 0

    @property
    def wasted_bytes(self) -> int:
        """Bytes that could be reclaimed by keeping only one copy."""
        return self.size_bytes * (len(self.paths) - 1)


def duplicate_groups(grouping: Grouping, min_size: int = 2) -> list[DuplicateGroup]:
    """Keep groups with at least *min_size* paths, in a deterministic order."""
    groups = [
        DuplicateGroup(digest=digest, paths=sorted(paths))
        for digest, paths in grouping.items()
        if len(paths) >= min_size
    ]
    groups.sort(key=lambda g: (g.paths[0], g.digest))
    return groups


def grouping_to_json(groups: list[DuplicateGroup]) -> str:
    """Serialize groups as a JSON list of {digest, paths}."""
    payload = [
        {"digest": g.digest, "paths": [str(p) for p in g.paths]}
        for g in groups
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def print_groups(console: Console, groups: list[DuplicateGroup], root: Path | None = None) -> None:
    """Print each group as a digest header followed by one path per line."""
    for group in groups:
        console.print()
        console.print(
            f"[bold cyan]{group.digest[:12]}[/bold cyan] "
            f"[dim]({len(group.paths)} files, {_human_size(group.size_bytes)} each)[/dim]"
        )
        for path in group.paths:
            shown = os.path.relpath(path, root) if root is not None else str(path)
            console.print(f"  {shown}", markup=False, highlight=False, soft_wrap=True)


def _human_size(nbytes: int) -> str:
    """Convert bytes to a human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if nbytes < 1024:
            return f"{nbytes:.1f} {unit}"
        nbytes /= 1024  # type: ignore[assignment]
    return f"{nbytes:.1f} TB"
