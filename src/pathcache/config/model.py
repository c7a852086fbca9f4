"""Config data model for pathcache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pathcache.config.paths import default_config_dir
from pathcache.constants.config import DEFAULT_CACHE_FILENAME, DEFAULT_SUFFIXES, DEFAULT_WRITE_ON_EXIT


@dataclass(frozen=True)
class PathCacheConfig:
    """Resolved cache settings."""

    cache_dir: Path | None = None
    cache_filename: str = DEFAULT_CACHE_FILENAME
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    write_on_exit: bool = DEFAULT_WRITE_ON_EXIT

    @property
    def cache_path(self) -> Path:
        """Location of the persisted cache file."""
        directory = self.cache_dir if self.cache_dir is not None else default_config_dir()
        return directory / self.cache_filename
