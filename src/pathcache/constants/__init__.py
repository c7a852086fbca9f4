"""Shared constants for pathcache."""
