"""Process-wide cache state owned by a single context object."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pathcache.cache.resolver import resolve
from pathcache.cache.store import PrefixStore
from pathcache.cache.validator import ExistenceMemo
from pathcache.host import Host
from pathcache.model import ResolveStats


@dataclass
class CacheContext:
    """Owns the store, the existence memo, and the dirty flag.

    Not thread-safe. Callers sharing a context across threads must serialize
    every call through one lock.
    """

    host: Host
    cache_path: Path
    store: PrefixStore = field(default_factory=PrefixStore)
    memo: ExistenceMemo = field(default_factory=ExistenceMemo)
    dirty: bool = False
    write_on_exit: bool = True
    installed: bool = False
    stats: ResolveStats = field(default_factory=ResolveStats)

    def mark_dirty(self) -> None:
        self.dirty = True

    def filter(self, candidates: list[str], name: str, suffixes: Sequence[str]) -> list[str]:
        """Drop-in replacement for ``Host.default_search`` backed by this cache."""
        return resolve(self, name, candidates, suffixes)
