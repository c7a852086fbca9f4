"""Configuration-related exceptions."""

from __future__ import annotations

from pathcache.exceptions.base import PathCacheError


class ConfigError(PathCacheError, ValueError):
    """Raised when pathcache configuration is invalid."""
