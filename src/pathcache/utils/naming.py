"""Name inspection helpers."""

from __future__ import annotations

import os


def has_path_separator(name: str) -> bool:
    """Return True when ``name`` contains a directory separator for this platform."""
    if os.sep in name:
        return True
    return os.altsep is not None and os.altsep in name


def is_cacheable_name(name: str) -> bool:
    """Return True when ``name`` is a bare, non-empty file name usable as a cache key."""
    return bool(name) and not has_path_separator(name)
