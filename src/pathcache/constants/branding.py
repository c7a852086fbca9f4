"""User-facing CLI strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "pathcache: persistent name-to-directory lookup cache.\n"
    "Remembers which search-path directory holds a file and revalidates cheaply on reuse."
)
TOMBSTONE_LABEL: str = "<none>"
