"""Per-user configuration directory discovery."""

from __future__ import annotations

import os
from pathlib import Path

from pathcache.constants.config import CONFIG_DIR_ENV, CONFIG_DIRNAME, XDG_CONFIG_HOME_ENV


def default_config_dir() -> Path:
    """Return the per-user directory holding the config and cache files."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    xdg_home = os.environ.get(XDG_CONFIG_HOME_ENV)
    if xdg_home:
        return Path(xdg_home).expanduser() / CONFIG_DIRNAME

    return Path.home() / ".config" / CONFIG_DIRNAME
