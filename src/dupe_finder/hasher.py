"""Streaming file hashing for content comparison."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

from dupe_finder.errors import HashError

CHUNK_SIZE = 8192
DEFAULT_ALGORITHM = "sha256"
SUPPORTED_ALGORITHMS = ("sha256", "sha512", "sha3_256", "blake2b")


def new_hash(algorithm: str = DEFAULT_ALGORITHM) -> Any:
    """Return a fresh digest object, rejecting non-cryptographic choices."""
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(
            f"Unsupported hash algorithm '{algorithm}' "
            f"(choose from {', '.join(SUPPORTED_ALGORITHMS)})"
        )
    return hashlib.new(algorithm)


def hash_file(
    path: str | Path,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """Compute the hex digest of a file, reading in chunks.

    Raises HashError if the file cannot be opened or a read fails partway.
    """
    h = new_hash(algorithm)
    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                h.update(chunk)
    except (OSError, ValueError) as exc:
        raise HashError(Path(path), exc) from exc
    return h.hexdigest()
