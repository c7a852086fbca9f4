"""Cached name-to-directory resolution."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pathcache.cache.validator import validate_entry
from pathcache.model import UNKNOWN, found
from pathcache.utils import is_cacheable_name

if TYPE_CHECKING:
    from pathcache.cache.context import CacheContext

logger = logging.getLogger(__name__)


def resolve(
    context: CacheContext,
    name: str,
    candidates: list[str],
    suffixes: Sequence[str],
) -> list[str]:
    """Return the directories in ``candidates`` that hold ``name``.

    Serves validated entries from the cache. On a miss the host search runs
    against the unfiltered ``candidates`` and its answer is stored, unless the
    host returned ``candidates`` itself, which means the result must not be
    cached. Host errors propagate unchanged.
    """
    if not is_cacheable_name(name):
        context.stats.bypasses += 1
        return candidates

    entry = context.store.lookup(name)
    if not entry.is_unknown:
        if validate_entry(entry, candidates, context.memo):
            context.stats.hits += 1
            logger.debug("Cache hit: %s -> %s", name, list(entry.directories))
            return list(entry.directories)

        # Clear before searching so a failing search leaves no stale entry.
        context.store.insert(name, UNKNOWN)
        context.mark_dirty()
        context.stats.invalidations += 1
        logger.debug("Cache entry invalidated: %s", name)

    result = context.host.default_search(candidates, name, suffixes)
    if result is candidates:
        context.stats.bypasses += 1
        logger.debug("Search for %s is not cacheable", name)
        return candidates

    directories = list(result)
    context.store.insert(name, found(directories))
    context.mark_dirty()
    context.stats.misses += 1
    logger.debug("Cache miss: %s -> %s", name, directories)
    return directories
