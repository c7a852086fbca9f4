"""Configuration loading and normalization for pathcache."""

from __future__ import annotations

from pathcache.config.loader import load_config
from pathcache.config.model import PathCacheConfig
from pathcache.config.paths import default_config_dir

__all__ = [
    "PathCacheConfig",
    "default_config_dir",
    "load_config",
]
