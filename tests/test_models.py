"""Tests for dupe_finder.models and dupe_finder.errors."""

from __future__ import annotations

from pathlib import Path

import pytest

from dupe_finder.errors import DupeFinderError, HashError, TraversalError, ValidationError
from dupe_finder.models import HashResult, add_to_grouping


def test_hash_result_success():
    r = HashResult(path=Path("a"), digest="ff")
    assert r.ok
    assert r.error is None


def test_hash_result_failure():
    err = HashError(Path("a"), "boom")
    r = HashResult(path=Path("a"), error=err)
    assert not r.ok
    assert r.digest is None


def test_hash_result_needs_exactly_one_outcome():
    with pytest.raises(ValueError):
        HashResult(path=Path("a"))
    with pytest.raises(ValueError):
        HashResult(path=Path("a"), digest="ff", error=HashError(Path("a"), "boom"))


def test_add_to_grouping_appends_in_order():
    grouping: dict[str, list[Path]] = {}
    add_to_grouping(grouping, "aa", Path("1"))
    add_to_grouping(grouping, "bb", Path("2"))
    add_to_grouping(grouping, "aa", Path("3"))
    assert grouping == {"aa": [Path("1"), Path("3")], "bb": [Path("2")]}


def test_errors_share_base_class():
    for exc in (
        ValidationError(None, "empty"),
        TraversalError(Path("d"), "denied"),
        HashError(Path("f"), "gone"),
    ):
        assert isinstance(exc, DupeFinderError)


def test_error_messages():
    assert str(ValidationError(None, "at least one directory is required")) == (
        "at least one directory is required"
    )
    assert str(ValidationError(Path("x"), "does not exist")) == "x: does not exist"
    assert "denied" in str(TraversalError(Path("d"), "denied"))
    assert str(HashError(Path("f"), "gone")) == "Cannot hash f: gone"
