"""Typed cache payload structures."""

from __future__ import annotations

from typing import TypeAlias, TypedDict

# ``None`` marks a tombstone; a list holds directories in shadowing order.
StoredDirectories: TypeAlias = list[str] | None


class CachePayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    entries: dict[str, StoredDirectories]
