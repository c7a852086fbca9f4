"""Load, write, clear, and host wiring for a cache context."""

from __future__ import annotations

import logging
from pathlib import Path

from pathcache.cache.compactor import compact
from pathcache.cache.context import CacheContext
from pathcache.cache.persistence import load_store, save_store
from pathcache.cache.store import PrefixStore
from pathcache.exceptions import CacheWriteError
from pathcache.host import ExtensionPoints, Host

logger = logging.getLogger(__name__)


def load_context(host: Host, cache_path: Path, *, write_on_exit: bool = True) -> CacheContext:
    """Create a context populated from the cache file at ``cache_path``."""
    store = load_store(cache_path)
    logger.debug("Loaded %d cache entries from %s", len(store), cache_path)
    return CacheContext(host=host, cache_path=cache_path, store=store, write_on_exit=write_on_exit)


def write_cache(context: CacheContext) -> bool:
    """Compact and persist the store when it holds unsaved changes.

    Returns True when the file was written. On failure the dirty flag is kept
    and ``CacheWriteError`` is raised.
    """
    if not context.dirty or len(context.store) == 0:
        return False

    compacted = compact(context.store, context.host, context.host.current_suffixes())
    _persist(context.cache_path, compacted)
    context.dirty = False
    logger.info("Wrote %d cache entries to %s", len(compacted), context.cache_path)
    return True


def write_cache_at_exit(context: CacheContext) -> None:
    """Exit-hook variant of ``write_cache`` that logs failures instead of raising."""
    try:
        write_cache(context)
    except CacheWriteError as exc:
        logger.warning("%s", exc)


def clear_cache(context: CacheContext) -> None:
    """Empty the store and overwrite the cache file right away."""
    context.store = PrefixStore()
    context.dirty = False
    _persist(context.cache_path, context.store)
    logger.info("Cleared cache at %s", context.cache_path)


def setup(context: CacheContext) -> bool:
    """Install the cache as the host's filter and schedule the exit write.

    Returns False without changing anything when the host lacks the needed
    extension points. Repeated calls on an installed context change nothing.
    """
    if context.installed:
        return True

    host = context.host
    if not isinstance(host, ExtensionPoints):
        logger.debug("Host %s exposes no extension points; cache not installed", type(host).__name__)
        return False

    host.install_filter(context.filter)
    if context.write_on_exit:
        host.register_exit_hook(lambda: write_cache_at_exit(context))
    context.installed = True
    return True


def _persist(cache_path: Path, store: PrefixStore) -> None:
    try:
        save_store(cache_path, store)
    except OSError as exc:
        raise CacheWriteError(cache_path, str(exc)) from exc
