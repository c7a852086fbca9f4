"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pathcache.cache import CacheContext, clear_cache, compact, load_context, write_cache
from pathcache.config import PathCacheConfig
from pathcache.constants.branding import TOMBSTONE_LABEL
from pathcache.host import FilesystemHost
from pathcache.model import CacheEntry


def format_entry(name: str, entry: CacheEntry) -> str:
    """Render one cache entry as ``name: dir1, dir2``."""
    if entry.is_tombstone:
        return f"{name}: {TOMBSTONE_LABEL}"
    return f"{name}: {', '.join(entry.directories)}"


def open_context(config: PathCacheConfig, suffixes: Sequence[str] | None = None) -> CacheContext:
    """Load the configured cache behind a filesystem host."""
    host = FilesystemHost(suffixes if suffixes is not None else config.suffixes)
    return load_context(host, config.cache_path, write_on_exit=config.write_on_exit)


def handle_resolve(args: argparse.Namespace, config: PathCacheConfig) -> int:
    """Resolve a name against candidate directories and save what was learned."""
    suffixes = tuple(args.suffix) if args.suffix else config.suffixes
    context = open_context(config, suffixes)

    for directory in context.filter(list(args.dir), args.name, suffixes):
        print(directory)

    write_cache(context)
    if args.verbose:
        stats = context.stats.to_dict()
        print(" ".join(f"{key}={value}" for key, value in stats.items()), file=sys.stderr)
    return 0


def handle_show(args: argparse.Namespace, config: PathCacheConfig) -> int:
    """Print every stored entry."""
    context = open_context(config)
    for name, entry in context.store:
        print(format_entry(name, entry))
    if args.verbose:
        print(f"{len(context.store)} entries in {context.cache_path}", file=sys.stderr)
    return 0


def handle_clear(args: argparse.Namespace, config: PathCacheConfig) -> int:
    """Erase the cache file."""
    context = open_context(config)
    clear_cache(context)
    print(f"Cleared {context.cache_path}")
    return 0


def handle_compact(args: argparse.Namespace, config: PathCacheConfig) -> int:
    """Print what compaction would persist without writing it."""
    context = open_context(config)
    compacted = compact(context.store, context.host, context.host.current_suffixes())
    for name, entry in compacted:
        print(format_entry(name, entry))
    if args.verbose:
        dropped = len(context.store) - len(compacted)
        print(f"{len(compacted)} kept, {dropped} dropped", file=sys.stderr)
    return 0
