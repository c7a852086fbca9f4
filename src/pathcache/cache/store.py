"""In-memory name to cache entry mapping."""

from __future__ import annotations

from collections.abc import Iterator

from pathcache.model import UNKNOWN, CacheEntry
from pathcache.utils import is_cacheable_name


class PrefixStore:
    """Unique-key mapping from bare file names to cache entries.

    Storing ``UNKNOWN`` removes the key, so iteration only ever yields
    tombstones and found entries.
    """

    def __init__(self, entries: dict[str, CacheEntry] | None = None) -> None:
        self._entries: dict[str, CacheEntry] = {}
        for name, entry in (entries or {}).items():
            self.insert(name, entry)

    def lookup(self, name: str) -> CacheEntry:
        """Return the entry for ``name`` or ``UNKNOWN``."""
        return self._entries.get(name, UNKNOWN)

    def insert(self, name: str, entry: CacheEntry) -> PrefixStore:
        """Record ``entry`` for ``name`` in place and return the store."""
        if not is_cacheable_name(name):
            raise ValueError(f"Cache keys must be non-empty and free of path separators: {name!r}")
        if entry.is_unknown:
            self._entries.pop(name, None)
        else:
            self._entries[name] = entry
        return self

    def iterate(self) -> Iterator[tuple[str, CacheEntry]]:
        """Yield ``(name, entry)`` pairs in name order."""
        for name in sorted(self._entries):
            yield name, self._entries[name]

    def clear(self) -> None:
        self._entries.clear()

    def to_dict(self) -> dict[str, CacheEntry]:
        return dict(self.iterate())

    def __iter__(self) -> Iterator[tuple[str, CacheEntry]]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrefixStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"PrefixStore({self.to_dict()!r})"
