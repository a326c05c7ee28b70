"""Pytest configuration and fixtures."""

from collections import Counter
from typing import Any

import pytest

from rowcursor.backends.memory import MemoryResultHandle
from rowcursor.protocols import Row


class SpyHandle:
    """Memory handle that records every call made to it."""

    def __init__(self, columns: list[str], rows: list[list[Any]]) -> None:
        self.inner = MemoryResultHandle(columns, rows)
        self.calls: Counter[str] = Counter()
        self.fail_release = False

    def fetch_row(self, index: int) -> Row:
        self.calls["fetch_row"] += 1
        return self.inner.fetch_row(index)

    def fetch_column(self, field: str) -> list[Any]:
        self.calls["fetch_column"] += 1
        return self.inner.fetch_column(field)

    def count_rows(self) -> int:
        self.calls["count_rows"] += 1
        return self.inner.count_rows()

    def release(self) -> None:
        self.calls["release"] += 1
        if self.fail_release:
            raise RuntimeError("release failed")
        self.inner.release()


@pytest.fixture
def make_handle():
    """Factory for spy handles."""

    def factory(columns: list[str] | None = None, rows: list[list[Any]] | None = None) -> SpyHandle:
        return SpyHandle(columns or ["name"], rows or [])

    return factory


@pytest.fixture
def names_handle(make_handle):
    """Three-row handle with a single ``name`` column."""
    return make_handle(["name"], [["a"], ["b"], ["c"]])


@pytest.fixture
def empty_handle(make_handle):
    """Handle over an empty result."""
    return make_handle(["name"], [])


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary for testing."""
    return {
        "logging": {"level": "DEBUG", "format": "text"},
        "database": {"backend": "sqlite", "path": ":memory:"},
    }
