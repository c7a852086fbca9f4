"""Host collaborators consumed by the cache and a filesystem-backed default."""

from __future__ import annotations

import atexit
import os
from collections.abc import Callable, Sequence
from typing import Protocol, TypeAlias, runtime_checkable

from pathcache.constants.config import DEFAULT_SUFFIXES

FilterFunction: TypeAlias = Callable[[list[str], str, Sequence[str]], list[str]]
ExitHook: TypeAlias = Callable[[], None]


class Host(Protocol):
    """Authoritative search operations the cache delegates to."""

    def default_search(self, candidates: list[str], name: str, suffixes: Sequence[str]) -> list[str]:
        """Return the candidate directories holding ``name``, or ``candidates`` itself to opt out of caching."""
        ...

    def locate_first_match(self, name: str, directories: Sequence[str], suffixes: Sequence[str]) -> str | None:
        """Return the first file matching ``name`` in directory order, if any."""
        ...

    def current_suffixes(self) -> tuple[str, ...]: ...


@runtime_checkable
class ExtensionPoints(Protocol):
    """Optional hooks a host exposes so the cache can wire itself in."""

    def install_filter(self, function: FilterFunction) -> None: ...

    def register_exit_hook(self, hook: ExitHook) -> None: ...


class FilesystemHost:
    """Search directories on the local filesystem.

    ``filter`` is the entry point callers use; it dispatches to whatever
    filter function was installed, falling back to the uncached search.
    """

    def __init__(
        self,
        suffixes: Sequence[str] = DEFAULT_SUFFIXES,
        *,
        exit_registrar: Callable[[ExitHook], object] = atexit.register,
    ) -> None:
        self._suffixes = tuple(suffixes)
        self._exit_registrar = exit_registrar
        self._filter: FilterFunction | None = None

    def current_suffixes(self) -> tuple[str, ...]:
        return self._suffixes

    def default_search(self, candidates: list[str], name: str, suffixes: Sequence[str]) -> list[str]:
        # An empty suffix makes any entry named ``name`` a match, so the
        # answer does not depend on the name alone and must not be filtered.
        if "" in suffixes:
            return candidates
        return [
            directory
            for directory in candidates
            if any(os.path.isfile(os.path.join(directory, name + suffix)) for suffix in suffixes)
        ]

    def locate_first_match(self, name: str, directories: Sequence[str], suffixes: Sequence[str]) -> str | None:
        for directory in directories:
            for suffix in suffixes:
                path = os.path.join(directory, name + suffix)
                if os.path.isfile(path):
                    return path
        return None

    def install_filter(self, function: FilterFunction) -> None:
        self._filter = function

    def register_exit_hook(self, hook: ExitHook) -> None:
        self._exit_registrar(hook)

    def filter(self, candidates: list[str], name: str, suffixes: Sequence[str] | None = None) -> list[str]:
        """Return the directories of ``candidates`` worth searching for ``name``."""
        effective_suffixes = self._suffixes if suffixes is None else tuple(suffixes)
        function = self._filter or self.default_search
        return function(candidates, name, effective_suffixes)
