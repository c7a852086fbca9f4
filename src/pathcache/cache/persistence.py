"""Cache loading and persistence for the prefix store."""

from __future__ import annotations

import logging
from pathlib import Path

from pathcache.cache.store import PrefixStore
from pathcache.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, CACHE_VERSION
from pathcache.io import load_json_file, write_json_atomic
from pathcache.model import TOMBSTONE, CacheEntry, found
from pathcache.types import CachePayload, StoredDirectories
from pathcache.utils import is_cacheable_name

logger = logging.getLogger(__name__)


def load_store(cache_path: Path) -> PrefixStore:
    """Load the cache file if valid, otherwise return an empty store.

    Never raises: a missing, unreadable, or malformed file is treated as an
    empty cache.
    """
    try:
        payload = load_json_file(cache_path)
    except FileNotFoundError:
        logger.debug("No cache file at %s", cache_path)
        return PrefixStore()
    except (OSError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring unreadable cache file %s: %s", cache_path, exc)
        return PrefixStore()

    if not isinstance(payload, dict):
        logger.debug("Ignoring cache file %s: payload is not an object", cache_path)
        return PrefixStore()

    version = payload.get("version")
    if version != CACHE_VERSION:
        logger.debug("Ignoring cache file %s: unsupported version %r", cache_path, version)
        return PrefixStore()

    raw_entries = payload.get("entries")
    if not isinstance(raw_entries, dict):
        logger.debug("Ignoring cache file %s: entries is not an object", cache_path)
        return PrefixStore()

    store = PrefixStore()
    for name, value in raw_entries.items():
        entry = _decode_entry(name, value)
        if entry is None:
            logger.debug("Skipping malformed cache entry: %r", name)
            continue
        store.insert(name, entry)
    return store


def save_store(cache_path: Path, store: PrefixStore) -> None:
    """Persist the store to disk atomically."""
    write_json_atomic(
        path=cache_path,
        payload=encode_store(store),
        temp_prefix=CACHE_TEMP_PREFIX,
        temp_suffix=CACHE_TEMP_SUFFIX,
    )


def encode_store(store: PrefixStore) -> CachePayload:
    """Return the JSON payload for ``store``."""
    entries: dict[str, StoredDirectories] = {}
    for name, entry in store:
        entries[name] = None if entry.is_tombstone else list(entry.directories)
    return {
        "version": CACHE_VERSION,
        "entries": entries,
    }


def _decode_entry(name: object, value: object) -> CacheEntry | None:
    if not isinstance(name, str) or not is_cacheable_name(name):
        return None

    if value is None:
        return TOMBSTONE
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return found(value)
