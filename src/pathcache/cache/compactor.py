"""Pre-persist compaction of the prefix store."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from pathcache.cache.store import PrefixStore
from pathcache.host import Host
from pathcache.model import found

logger = logging.getLogger(__name__)


def compact(store: PrefixStore, host: Host, suffixes: Sequence[str]) -> PrefixStore:
    """Return a fresh store holding one verified directory per surviving name.

    Tombstones are dropped, as are names that no longer resolve to a file in
    their stored directories. When two names land in the same directory the
    first in iteration order wins. ``store`` itself is left untouched.
    """
    compacted = PrefixStore()
    claimed: set[str] = set()

    for name, entry in store:
        if entry.is_unknown or entry.is_tombstone:
            continue

        located = host.locate_first_match(name, entry.directories, suffixes)
        if located is None:
            logger.debug("Dropping %s: no longer found in %s", name, list(entry.directories))
            continue

        directory = _owning_directory(located, entry.directories)
        if directory in claimed:
            logger.debug("Dropping %s: %s already claimed", name, directory)
            continue

        claimed.add(directory)
        compacted.insert(name, found([directory]))

    return compacted


def _owning_directory(located: str, directories: Sequence[str]) -> str:
    """Return the stored directory spelling that produced ``located``."""
    basename = os.path.basename(located)
    for directory in directories:
        if os.path.join(directory, basename) == located:
            return directory
    return os.path.dirname(located)
