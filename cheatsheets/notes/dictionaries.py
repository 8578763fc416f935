"""
Cheat sheet for `dict` and the `collections` mapping helpers.

Lookup semantics worth memorising:

* ``d[key]`` raises ``KeyError`` for a missing key.
* ``d.get(key)`` returns ``None`` (or the supplied default) instead.
* ``defaultdict`` calls its factory and *stores* the result on a missing key.
* ``Counter`` returns ``0`` for a missing key without storing it.
"""

from __future__ import annotations

from collections import Counter, OrderedDict, defaultdict
from collections.abc import Hashable, Iterable, Mapping
from typing import Generic, TypeVar

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "dictionaries"

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    groups: defaultdict[tuple[str, ...], list[str]] = defaultdict(list)
    for word in words:
        groups[tuple(sorted(word))].append(word)
    return list(groups.values())


def top_k_frequent(items: Iterable[K], k: int) -> list[K]:
    return [item for item, _ in Counter(items).most_common(k)]


def is_anagram(left: str, right: str) -> bool:
    return Counter(left) == Counter(right)


def merge_right_wins(left: Mapping[K, V], right: Mapping[K, V]) -> dict[K, V]:
    return dict(left) | dict(right)


def invert(mapping: Mapping[K, V]) -> dict[V, K]:
    # Later keys win when values repeat.
    return {value: key for key, value in mapping.items()}


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    index_of: dict[int, int] = {}
    for index, num in enumerate(nums):
        if target - num in index_of:
            return [index_of[target - num], index]
        index_of[num] = index
    return []


class LRUCache(Generic[K, V]):
    """Least-recently-used cache on top of OrderedDict."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()

    def get(self, key: K, default: V | None = None) -> V | None:
        """Like dict.get: a miss returns `default`, so a stored None is indistinguishable without one."""
        if key not in self._entries:
            return default
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: K, value: V) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def keys(self) -> list[K]:
        return list(self._entries)


def collect_checks() -> list[NoteCheck]:
    prices = {"apple": 3, "pear": 5}

    defaults: dict[str, list[int]] = {}
    defaults.setdefault("a", []).append(1)
    defaults.setdefault("a", []).append(2)

    auto: defaultdict[str, int] = defaultdict(int)
    auto["missing"] += 1

    counts = Counter("abracadabra")
    peeked = counts["z"]

    ordered = {"b": 1, "a": 2}
    ordered["c"] = 3

    stack_like = {"x": 1, "y": 2}
    last_item = stack_like.popitem()

    cache: LRUCache[str, int] = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)

    return [
        expect_raises(TOPIC, "subscript_missing_key_raises", lambda: prices["kiwi"], KeyError),
        expect_equal(TOPIC, "get_missing_key_returns_none", prices.get("kiwi"), None),
        expect_equal(TOPIC, "get_with_default", prices.get("kiwi", 0), 0),
        expect_equal(TOPIC, "pop_with_default_does_not_raise", dict(prices).pop("kiwi", None), None),
        expect_raises(TOPIC, "pop_without_default_raises", lambda: dict(prices).pop("kiwi"), KeyError),
        expect_equal(TOPIC, "setdefault_returns_stored_value", defaults, {"a": [1, 2]}),
        expect_equal(TOPIC, "defaultdict_stores_factory_value", dict(auto), {"missing": 1}),
        expect_equal(TOPIC, "counter_missing_key_is_zero", peeked, 0),
        expect_true(TOPIC, "counter_lookup_does_not_insert", "z" not in counts),
        expect_equal(TOPIC, "counter_most_common", counts.most_common(2), [("a", 5), ("b", 2)]),
        expect_equal(TOPIC, "top_k_frequent", top_k_frequent([1, 1, 1, 2, 2, 3], 2), [1, 2]),
        expect_equal(TOPIC, "counter_equality_detects_anagrams", (is_anagram("listen", "silent"), is_anagram("rat", "car")), (True, False)),
        expect_equal(
            TOPIC,
            "defaultdict_groups_anagrams",
            group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"]),
            [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]],
        ),
        expect_equal(TOPIC, "merge_operator_right_side_wins", merge_right_wins({"a": 1, "b": 2}, {"b": 3}), {"a": 1, "b": 3}),
        expect_equal(TOPIC, "insertion_order_is_preserved", list(ordered), ["b", "a", "c"]),
        expect_equal(TOPIC, "popitem_removes_last_inserted", last_item, ("y", 2)),
        expect_equal(TOPIC, "invert_mapping", invert({"a": 1, "b": 2}), {1: "a", 2: "b"}),
        expect_equal(TOPIC, "comprehension_with_filter", {k: v for k, v in prices.items() if v > 4}, {"pear": 5}),
        expect_equal(TOPIC, "two_sum_via_value_index", two_sum([2, 7, 11, 15], 9), [0, 1]),
        expect_equal(TOPIC, "two_sum_without_answer", two_sum([1, 2], 10), []),
        expect_raises(TOPIC, "unhashable_key_raises", lambda: {["a"]: 1}, TypeError),
        expect_raises(TOPIC, "resize_during_iteration_raises", _mutate_while_iterating, RuntimeError),
        expect_equal(TOPIC, "ordered_dict_lru_evicts_oldest", cache.keys(), ["a", "c"]),
        expect_equal(TOPIC, "lru_get_missing_returns_none", cache.get("b"), None),
        expect_equal(TOPIC, "lru_get_missing_returns_default", cache.get("b", -1), -1),
    ]


def _mutate_while_iterating() -> None:
    data = {"a": 1, "b": 2}
    for key in data:
        data[key + "_copy"] = 0
