"""Configuration defaults, filenames, and environment variables."""

from __future__ import annotations

from pathcache.constants.cache import CACHE_FILENAME

CONFIG_FILENAME: str = "pathcache.yaml"
CONFIG_DIRNAME: str = "pathcache"
CONFIG_DIR_ENV: str = "PATHCACHE_CONFIG_DIR"
XDG_CONFIG_HOME_ENV: str = "XDG_CONFIG_HOME"

DEFAULT_CACHE_FILENAME: str = CACHE_FILENAME
DEFAULT_SUFFIXES: tuple[str, ...] = (".py",)
DEFAULT_WRITE_ON_EXIT: bool = True

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"cache_dir", "cache_filename", "suffixes", "write_on_exit"})
