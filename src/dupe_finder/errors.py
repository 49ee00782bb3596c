"""Exception types raised by the duplicate-detection engine."""

from __future__ import annotations

from pathlib import Path


class DupeFinderError(Exception):
    """Base class for every failure the engine reports to its caller."""


class ValidationError(DupeFinderError):
    """Raised when a command-line root is missing or not a directory."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(reason)
        else:
            super().__init__(f"{path}: {reason}")


class TraversalError(DupeFinderError):
    """Raised when a directory cannot be read during a walk."""

    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause}")


class HashError(DupeFinderError):
    """Raised when a file cannot be opened or fully read for hashing."""

    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot hash {path}: {cause}")
