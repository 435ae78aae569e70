"""Tests for the file cache and the list name table."""

import json
import threading

import pytest

from voclist.errors import ListNameNotCached
from voclist.utils import cache
from voclist.utils.list_cache import ListNameCache


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(cache.config, "CACHE_DIR", tmp_path)
    return tmp_path


def test_cache_round_trip(cache_dir):
    assert cache.cache_set("autocomplete_v1_test", [{"word": "test"}])
    assert cache.cache_get("autocomplete_v1_test") == [{"word": "test"}]


def test_cache_miss(cache_dir):
    assert cache.cache_get("missing") is None


def test_cache_expired_entry_is_removed(cache_dir):
    cache.cache_set("old", "value")
    assert cache.cache_get("old", max_age=0) is None
    assert not cache.get_cache_path("old").exists()


def test_cache_corrupted_entry_is_removed(cache_dir):
    path = cache.get_cache_path("broken")
    path.write_text("{not json", encoding="utf-8")

    assert cache.cache_get("broken") is None
    assert not path.exists()


def test_cache_entry_without_timestamp_is_removed(cache_dir):
    path = cache.get_cache_path("stamped")
    path.write_text(json.dumps({"value": 1}), encoding="utf-8")
    assert cache.cache_get("stamped") is None


def test_cache_unserializable_value(cache_dir):
    assert not cache.cache_set("bad", object())
    assert cache.cache_get("bad") is None


def test_cache_clear(cache_dir):
    cache.cache_set("a", 1)
    cache.cache_set("b", 2)

    assert cache.cache_clear("a") == 1
    assert cache.cache_clear("a") == 0
    assert cache.cache_clear() == 1
    assert cache.cache_get("b") is None


def test_list_names():
    names = ListNameCache()
    names.remember(2137002, "In The Wild")

    assert names.get("2137002") == "In The Wild"
    assert names.get_or_none(2137002) == "In The Wild"
    assert 2137002 in names
    assert len(names) == 1
    assert names.snapshot() == {"2137002": "In The Wild"}


def test_list_names_unknown_id():
    names = ListNameCache()
    assert names.get_or_none(1) is None
    with pytest.raises(ListNameNotCached) as excinfo:
        names.get(1)
    assert excinfo.value.list_id == 1
    assert "not found in cache" in str(excinfo.value)


def test_list_names_concurrent_writers():
    names = ListNameCache()

    def fill(offset):
        for i in range(200):
            names.remember(offset + i, f"list {offset + i}")

    threads = [threading.Thread(target=fill, args=(n * 1000,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(names) == 800
