"""Cache entry and statistics models."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pathcache.types import EntryKind


@dataclass(frozen=True)
class CacheEntry:
    """Stored lookup result for a single name.

    ``unknown`` means nothing is recorded. ``tombstone`` records that the name
    matched no directory in any candidate list seen so far. ``found`` holds the
    directories containing the name, most preferred first.
    """

    kind: EntryKind
    directories: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind == "found" and not self.directories:
            raise ValueError("found entries need at least one directory; use TOMBSTONE")
        if self.kind != "found" and self.directories:
            raise ValueError(f"{self.kind} entries cannot carry directories")

    @property
    def is_unknown(self) -> bool:
        return self.kind == "unknown"

    @property
    def is_tombstone(self) -> bool:
        return self.kind == "tombstone"


UNKNOWN = CacheEntry("unknown")
TOMBSTONE = CacheEntry("tombstone")


def found(directories: Iterable[str]) -> CacheEntry:
    """Build an entry for ``directories``; an empty sequence yields ``TOMBSTONE``."""
    ordered = tuple(directories)
    if not ordered:
        return TOMBSTONE
    return CacheEntry("found", ordered)


@dataclass
class ResolveStats:
    """Per-context counters for resolver outcomes."""

    hits: int = 0
    misses: int = 0
    invalidations: int = 0
    bypasses: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "invalidations": self.invalidations,
            "bypasses": self.bypasses,
        }
