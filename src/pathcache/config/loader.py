"""Config loading and normalization for pathcache."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from pathcache.config.model import PathCacheConfig
from pathcache.config.paths import default_config_dir
from pathcache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CACHE_FILENAME,
    DEFAULT_SUFFIXES,
    DEFAULT_WRITE_ON_EXIT,
)
from pathcache.exceptions import ConfigError
from pathcache.utils import has_path_separator


def load_config(config_path: Path | None = None) -> PathCacheConfig:
    """Load and validate settings from ``pathcache.yaml`` or an explicit path."""
    path = config_path if config_path is not None else default_config_dir() / CONFIG_FILENAME
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return PathCacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(str(key) for key in unknown)}")

    cache_dir_raw = raw.get("cache_dir")
    cache_dir: Path | None = None
    if cache_dir_raw is not None:
        if not isinstance(cache_dir_raw, str) or not cache_dir_raw.strip():
            raise ConfigError("cache_dir must be a non-empty string")
        cache_dir = Path(cache_dir_raw).expanduser()
        if not cache_dir.is_absolute():
            cache_dir = path.parent / cache_dir

    cache_filename = raw.get("cache_filename", DEFAULT_CACHE_FILENAME)
    if not isinstance(cache_filename, str) or not cache_filename.strip():
        raise ConfigError("cache_filename must be a non-empty string")
    if has_path_separator(cache_filename):
        raise ConfigError("cache_filename must not contain a path separator")

    write_on_exit = raw.get("write_on_exit", DEFAULT_WRITE_ON_EXIT)
    if not isinstance(write_on_exit, bool):
        raise ConfigError("write_on_exit must be a boolean")

    return PathCacheConfig(
        cache_dir=cache_dir,
        cache_filename=cache_filename,
        suffixes=_ensure_suffixes(raw.get("suffixes", list(DEFAULT_SUFFIXES))),
        write_on_exit=write_on_exit,
    )


def _ensure_suffixes(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError("suffixes must be a list of strings")
    suffixes: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigError("suffixes must be a list of strings")
        if has_path_separator(item):
            raise ConfigError(f"suffixes must not contain a path separator: {item!r}")
        if item not in suffixes:
            suffixes.append(item)
    if not suffixes:
        raise ConfigError("suffixes must not be empty")
    return tuple(suffixes)
