"""Shared pytest fixtures for cache tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from pathcache.cache import CacheContext


class FakeHost:
    """In-memory host where ``layout`` maps each name to the directories holding it."""

    def __init__(
        self,
        layout: dict[str, set[str]] | None = None,
        *,
        suffixes: tuple[str, ...] = (".ext",),
        passthrough: set[str] | None = None,
    ) -> None:
        self.layout = {name: set(dirs) for name, dirs in (layout or {}).items()}
        self.suffixes = suffixes
        self.passthrough = passthrough or set()
        self.search_calls: list[tuple[list[str], str, tuple[str, ...]]] = []
        self.locate_calls: list[tuple[str, tuple[str, ...]]] = []
        self.search_error: Exception | None = None

    def current_suffixes(self) -> tuple[str, ...]:
        return self.suffixes

    def default_search(self, candidates: list[str], name: str, suffixes: Sequence[str]) -> list[str]:
        self.search_calls.append((list(candidates), name, tuple(suffixes)))
        if self.search_error is not None:
            raise self.search_error
        if name in self.passthrough:
            return candidates
        present = self.layout.get(name, set())
        return [directory for directory in candidates if directory in present]

    def locate_first_match(self, name: str, directories: Sequence[str], suffixes: Sequence[str]) -> str | None:
        self.locate_calls.append((name, tuple(directories)))
        present = self.layout.get(name, set())
        for directory in directories:
            if directory in present:
                return f"{directory}/{name}{suffixes[0]}"
        return None


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    """Return a cache file location inside the test's temp directory."""
    return tmp_path / "cache" / "pathcache.json"


@pytest.fixture
def fake_host() -> FakeHost:
    """Return a host where ``foo`` lives in ``/b`` and ``bar`` in ``/a`` and ``/c``."""
    return FakeHost({"foo": {"/b"}, "bar": {"/a", "/c"}})


@pytest.fixture
def context(fake_host: FakeHost, cache_path: Path) -> CacheContext:
    """Return an empty cache context backed by ``fake_host``."""
    return CacheContext(host=fake_host, cache_path=cache_path)
