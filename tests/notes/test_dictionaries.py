from __future__ import annotations

import pytest

from cheatsheets.notes import dictionaries


def test_missing_key_semantics() -> None:
    data = {"a": 1}
    with pytest.raises(KeyError):
        data["b"]
    assert data.get("b") is None
    assert data.get("b", 5) == 5


def test_counter_helpers() -> None:
    assert dictionaries.top_k_frequent("aabbbc", 1) == ["b"]
    assert dictionaries.is_anagram("dusty", "study")
    assert not dictionaries.is_anagram("aab", "abb")


def test_grouping_and_merging() -> None:
    assert dictionaries.group_anagrams(["ab", "ba", "c"]) == [["ab", "ba"], ["c"]]
    assert dictionaries.merge_right_wins({"k": 1}, {"k": 2, "j": 3}) == {"k": 2, "j": 3}
    assert dictionaries.invert({"a": 1, "b": 1}) == {1: "b"}


def test_two_sum() -> None:
    assert dictionaries.two_sum([3, 2, 4], 6) == [1, 2]
    assert dictionaries.two_sum([3, 3], 6) == [0, 1]


def test_lru_cache_refreshes_on_get_and_put() -> None:
    cache: dictionaries.LRUCache[str, int] = dictionaries.LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert cache.keys() == ["a", "c"]
    assert cache.get("a") == 10
    assert cache.get("b") is None


def test_lru_cache_default_separates_miss_from_stored_none() -> None:
    cache: dictionaries.LRUCache[str, int | None] = dictionaries.LRUCache(2)
    cache.put("empty", None)
    missing = object()
    assert cache.get("empty", missing) is None
    assert cache.get("absent", missing) is missing
    assert cache.keys() == ["empty"]


def test_lru_cache_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        dictionaries.LRUCache(0)
