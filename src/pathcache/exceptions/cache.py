"""Cache persistence exceptions."""

from __future__ import annotations

from pathlib import Path

from pathcache.exceptions.base import PathCacheError


class CacheWriteError(PathCacheError):
    """Raised when the cache file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write cache file {path}: {reason}")
        self.path = path
        self.reason = reason
