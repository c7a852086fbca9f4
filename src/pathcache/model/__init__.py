"""Core data models for pathcache."""

from .entities import TOMBSTONE, UNKNOWN, CacheEntry, ResolveStats, found

__all__ = [
    "TOMBSTONE",
    "UNKNOWN",
    "CacheEntry",
    "ResolveStats",
    "found",
]
