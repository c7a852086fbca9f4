"""Shared type aliases for pathcache."""

from .cache import CachePayload, StoredDirectories
from .common import EntryKind, JsonObject, JsonScalar, JsonValue

__all__ = [
    "CachePayload",
    "EntryKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "StoredDirectories",
]
