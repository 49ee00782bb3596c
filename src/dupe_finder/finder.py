"""Turn a list of file paths into a digest -> paths grouping.

Two strategies produce the same grouping (up to path order inside a group):

* ``find_duplicates`` hashes one file after another and stops at the first
  failure.
* ``find_duplicates_concurrently`` starts one asyncio task per file. Each task
  hashes in a worker thread and puts exactly one ``HashResult`` on a shared
  queue. The aggregator always drains all N results, then either raises the
  first error it received or builds the grouping.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from pathlib import Path

from dupe_finder.errors import HashError
from dupe_finder.hasher import CHUNK_SIZE, DEFAULT_ALGORITHM, hash_file, new_hash
from dupe_finder.models import Grouping, HashResult, add_to_grouping

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT = 32


# ---------------------------------------------------------------------------
# Sequential
# ---------------------------------------------------------------------------


def find_duplicates(
    paths: Iterable[str | Path],
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
) -> Grouping:
    """Hash *paths* in order and group them by digest.

    The first HashError propagates; no partial grouping is ever returned.
    """
    start = time.monotonic()
    grouping: Grouping = {}
    count = 0

    for raw in paths:
        path = Path(raw)
        digest = hash_file(path, algorithm=algorithm, chunk_size=chunk_size)
        logger.debug("%s  %s", digest[:12], path)
        add_to_grouping(grouping, digest, path)
        count += 1

    logger.info(
        "Hashed %d files into %d groups in %.2fs",
        count, len(grouping), time.monotonic() - start,
    )
    return grouping


# ---------------------------------------------------------------------------
# Concurrent
# ---------------------------------------------------------------------------


async def hash_file_async(
    path: str | Path,
    results: asyncio.Queue[HashResult],
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
    semaphore: asyncio.Semaphore | None = None,
) -> None:
    """Hash one file off the event loop and put exactly one HashResult on *results*."""
    path = Path(path)
    try:
        if semaphore is None:
            digest = await asyncio.to_thread(
                hash_file, path, algorithm=algorithm, chunk_size=chunk_size,
            )
        else:
            async with semaphore:
                digest = await asyncio.to_thread(
                    hash_file, path, algorithm=algorithm, chunk_size=chunk_size,
                )
    except Exception as exc:
        error = exc if isinstance(exc, HashError) else HashError(path, exc)
        await results.put(HashResult(path=path, error=error))
        return
    await results.put(HashResult(path=path, digest=digest))


async def find_duplicates_concurrently(
    paths: Iterable[str | Path],
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
    max_concurrent: int = DEFAULT_MAX_CONCURRENT,
) -> Grouping:
    """Hash *paths* in parallel and group them by digest.

    Every task is drained even after a failure. If any file failed, the first
    error received is raised and no grouping is returned.
    """
    paths = [Path(p) for p in paths]
    if not paths:
        return {}
    if max_concurrent < 1:
        raise ValueError("max_concurrent must be at least 1")
    # Reject a bad algorithm before any task is started.
    new_hash(algorithm)

    start = time.monotonic()
    # Unbounded so a finished task never waits on the aggregator.
    results: asyncio.Queue[HashResult] = asyncio.Queue()
    semaphore = asyncio.Semaphore(max_concurrent)
    tasks = [
        asyncio.create_task(
            hash_file_async(
                path, results,
                algorithm=algorithm, chunk_size=chunk_size, semaphore=semaphore,
            )
        )
        for path in paths
    ]

    # Phase 1: collect all N results, whatever they are.
    collected: list[HashResult] = []
    first_error: HashError | None = None
    for _ in range(len(tasks)):
        result = await results.get()
        collected.append(result)
        if result.error is not None:
            if first_error is None:
                first_error = result.error
            logger.warning("Hash failed for %s: %s", result.path, result.error.cause)

    await asyncio.gather(*tasks)

    # Phase 2: decide.
    if first_error is not None:
        raise first_error

    grouping: Grouping = {}
    for result in collected:
        add_to_grouping(grouping, result.digest, result.path)  # type: ignore[arg-type]

    logger.info(
        "Hashed %d files into %d groups in %.2fs (max_concurrent=%d)",
        len(collected), len(grouping), time.monotonic() - start, max_concurrent,
    )
    return grouping
