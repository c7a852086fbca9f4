"""Shared exception hierarchy for pathcache."""

from __future__ import annotations

from .base import PathCacheError
from .cache import CacheWriteError
from .config import ConfigError

__all__ = [
    "CacheWriteError",
    "ConfigError",
    "PathCacheError",
]
