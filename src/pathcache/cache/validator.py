"""Cheap in-memory validation of stored cache entries."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from pathcache.model import CacheEntry


class ExistenceMemo:
    """Directories confirmed present in some candidate list during this run.

    Grows monotonically and never expires: a directory removed from disk after
    being memoized is still trusted until the owning context is discarded.
    """

    def __init__(self) -> None:
        self._directories: set[str] = set()

    def add(self, directory: str) -> None:
        self._directories.add(directory)

    def __contains__(self, directory: object) -> bool:
        return directory in self._directories

    def __len__(self) -> int:
        return len(self._directories)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._directories))


def validate_entry(entry: CacheEntry, candidates: Sequence[str], memo: ExistenceMemo) -> bool:
    """Return True when ``entry`` can be served without searching.

    Tombstones are always trusted. A found entry is trusted only when each of
    its directories is memoized or appears in ``candidates``; candidate
    matches are memoized even if a later directory fails the check.
    """
    if entry.is_unknown:
        return False
    if entry.is_tombstone:
        return True

    for directory in entry.directories:
        if directory in memo:
            continue
        if directory in candidates:
            memo.add(directory)
            continue
        return False
    return True
