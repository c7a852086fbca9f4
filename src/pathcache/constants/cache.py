"""Cache file naming and versioning constants."""

from __future__ import annotations

CACHE_FILENAME: str = "pathcache.json"
CACHE_VERSION: int = 1
CACHE_TEMP_PREFIX: str = ".pathcache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
