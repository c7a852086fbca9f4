"""Utility helpers."""

from .naming import has_path_separator, is_cacheable_name

__all__ = ["has_path_separator", "is_cacheable_name"]
