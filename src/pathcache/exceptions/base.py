"""Base exception for pathcache."""

from __future__ import annotations


class PathCacheError(Exception):
    """Base class for all pathcache errors."""
