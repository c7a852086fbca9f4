"""Tests for cache read/write behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pathcache.cache import PrefixStore, load_store, save_store
from pathcache.model import TOMBSTONE, found


def test_store_roundtrip_preserves_found_and_tombstones(cache_path: Path) -> None:
    store = PrefixStore(
        {
            "foo.ext": found(["/b", "/a"]),
            "gone.ext": TOMBSTONE,
        }
    )

    save_store(cache_path, store)
    loaded = load_store(cache_path)

    assert loaded == store
    assert loaded.lookup("gone.ext") is TOMBSTONE
    assert loaded.lookup("foo.ext").directories == ("/b", "/a")


def test_saved_file_is_readable_json(cache_path: Path) -> None:
    save_store(cache_path, PrefixStore({"foo": found(["/b"]), "bar": TOMBSTONE}))

    payload = json.loads(cache_path.read_text(encoding="utf-8"))

    assert payload == {"version": 1, "entries": {"bar": None, "foo": ["/b"]}}


def test_load_missing_file_returns_empty_store(tmp_path: Path) -> None:
    loaded = load_store(tmp_path / "absent.json")

    assert len(loaded) == 0


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        '{"version": 999, "entries": {}}',
        '{"version": 1, "entries": "bad"}',
        "\udcff",
    ],
)
def test_load_corrupt_file_falls_back_to_empty(cache_path: Path, content: str) -> None:
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text(content, encoding="utf-8", errors="surrogateescape")

    loaded = load_store(cache_path)

    assert len(loaded) == 0


def test_load_skips_malformed_entries(cache_path: Path) -> None:
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text(
        json.dumps(
            {
                "version": 1,
                "entries": {
                    "good": ["/a"],
                    "empty": [],
                    "": ["/a"],
                    "numbers": [1, 2],
                    "nested/name": ["/a"],
                    "scalar": "/a",
                },
            }
        ),
        encoding="utf-8",
    )

    loaded = load_store(cache_path)

    assert loaded.to_dict() == {"empty": TOMBSTONE, "good": found(["/a"])}


def test_save_replaces_existing_file_without_leftovers(cache_path: Path) -> None:
    save_store(cache_path, PrefixStore({"foo": found(["/a"])}))
    save_store(cache_path, PrefixStore({"bar": found(["/b"])}))

    leftovers = [item.name for item in cache_path.parent.iterdir() if item != cache_path]

    assert leftovers == []
    assert load_store(cache_path).to_dict() == {"bar": found(["/b"])}


def test_load_deeply_nested_file_falls_back_to_empty(cache_path: Path) -> None:
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text("[" * 200000, encoding="utf-8")

    loaded = load_store(cache_path)

    assert len(loaded) == 0


def test_load_unreachable_path_falls_back_to_empty(tmp_path: Path) -> None:
    loaded = load_store(tmp_path / ("a" * 300))

    assert len(loaded) == 0


def test_load_directory_in_place_of_file_falls_back_to_empty(cache_path: Path) -> None:
    cache_path.mkdir(parents=True)

    loaded = load_store(cache_path)

    assert len(loaded) == 0
