"""Tests for the filesystem-backed host."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathcache.host import ExtensionPoints, FilesystemHost


@pytest.fixture
def search_path(tmp_path: Path) -> list[str]:
    """Create three directories; ``mod.py`` lives in the second and third."""
    directories = []
    for label in ("first", "second", "third"):
        directory = tmp_path / label
        directory.mkdir()
        directories.append(str(directory))
    (tmp_path / "second" / "mod.py").write_text("", encoding="utf-8")
    (tmp_path / "third" / "mod.pyc").write_bytes(b"")
    (tmp_path / "first" / "pkg.py").mkdir()
    return directories


def test_default_search_returns_matching_directories_in_order(search_path: list[str]) -> None:
    host = FilesystemHost()

    assert host.default_search(search_path, "mod", (".py", ".pyc")) == search_path[1:]
    assert host.default_search(search_path, "mod", (".py",)) == [search_path[1]]


def test_default_search_ignores_directories_named_like_files(search_path: list[str]) -> None:
    host = FilesystemHost()

    assert host.default_search(search_path, "pkg", (".py",)) == []


def test_default_search_with_empty_suffix_returns_candidates_itself(search_path: list[str]) -> None:
    host = FilesystemHost()

    assert host.default_search(search_path, "mod", (".py", "")) is search_path


def test_locate_first_match_honors_directory_then_suffix_order(search_path: list[str]) -> None:
    host = FilesystemHost()

    assert host.locate_first_match("mod", search_path, (".pyc", ".py")) == str(Path(search_path[1]) / "mod.py")
    assert host.locate_first_match("mod", search_path[2:], (".py", ".pyc")) == str(
        Path(search_path[2]) / "mod.pyc"
    )
    assert host.locate_first_match("absent", search_path, (".py",)) is None


def test_filter_uses_default_search_until_a_filter_is_installed(search_path: list[str]) -> None:
    host = FilesystemHost((".py",))
    calls: list[str] = []

    assert host.filter(search_path, "mod") == [search_path[1]]

    def recording_filter(candidates: list[str], name: str, suffixes: tuple[str, ...]) -> list[str]:
        calls.append(name)
        return candidates[:1]

    host.install_filter(recording_filter)

    assert host.filter(search_path, "mod") == search_path[:1]
    assert calls == ["mod"]


def test_filesystem_host_exposes_extension_points() -> None:
    hooks: list = []
    host = FilesystemHost(exit_registrar=hooks.append)

    host.register_exit_hook(print)

    assert isinstance(host, ExtensionPoints)
    assert hooks == [print]
