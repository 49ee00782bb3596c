"""Orchestration: walk → hash → group."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from dupe_finder.config import Settings
from dupe_finder.finder import find_duplicates, find_duplicates_concurrently
from dupe_finder.models import Grouping
from dupe_finder.walker import walk

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Everything one scan produced."""

    files: list[Path] = field(default_factory=list)
    grouping: Grouping = field(default_factory=dict)
    duration_ms: int = 0


async def scan_directories(
    settings: Settings,
    roots: Sequence[str | Path],
    *,
    sequential: bool = False,
) -> ScanResult:
    """Walk *roots* and group every file found by content digest.

    TraversalError and HashError propagate unchanged; there is no partial result.
    """
    start = time.monotonic()

    files = await asyncio.to_thread(walk, roots)
    logger.info(
        "Hashing %d files (%s, %s)",
        len(files), settings.hash_algorithm,
        "sequential" if sequential else f"max_concurrent={settings.max_concurrent}",
    )

    if sequential:
        grouping = await asyncio.to_thread(
            find_duplicates,
            files,
            algorithm=settings.hash_algorithm,
            chunk_size=settings.chunk_size,
        )
    else:
        grouping = await find_duplicates_concurrently(
            files,
            algorithm=settings.hash_algorithm,
            chunk_size=settings.chunk_size,
            max_concurrent=settings.max_concurrent,
        )

    return ScanResult(
        files=files,
        grouping=grouping,
        duration_ms=int((time.monotonic() - start) * 1000),
    )
