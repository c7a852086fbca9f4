"""Lookup cache: storage, validation, resolution, compaction, and lifecycle."""

from .compactor import compact
from .context import CacheContext
from .lifecycle import clear_cache, load_context, setup, write_cache, write_cache_at_exit
from .persistence import load_store, save_store
from .resolver import resolve
from .store import PrefixStore
from .validator import ExistenceMemo, validate_entry

__all__ = [
    "CacheContext",
    "ExistenceMemo",
    "PrefixStore",
    "clear_cache",
    "compact",
    "load_context",
    "load_store",
    "resolve",
    "save_store",
    "setup",
    "validate_entry",
    "write_cache",
    "write_cache_at_exit",
]
