"""
Cheat sheet for the third-party `sortedcontainers` package.

SortedList, SortedDict and SortedSet keep their contents ordered on every
mutation, which makes ``bisect``-style queries and order statistics O(log n)
without re-sorting. Methods that would break the ordering (``append``,
``insert``, ``__setitem__``) raise ``NotImplementedError`` on SortedList.
"""

from __future__ import annotations

from collections.abc import Sequence

from sortedcontainers import SortedDict, SortedKeyList, SortedList, SortedSet

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises

TOPIC = "sorted_containers"


def window_medians(nums: Sequence[float], k: int) -> list[float]:
    """Median of every length-`k` window, maintained with a SortedList."""

    if k <= 0:
        raise ValueError("k must be positive")
    window = SortedList(nums[:k])
    medians: list[float] = []
    for i in range(k, len(nums) + 1):
        if k % 2:
            medians.append(window[k // 2])
        else:
            medians.append((window[k // 2 - 1] + window[k // 2]) / 2)
        if i == len(nums):
            break
        window.remove(nums[i - k])
        window.add(nums[i])
    return medians


def collect_checks() -> list[NoteCheck]:
    numbers = SortedList([5, 1, 4])
    numbers.add(3)
    numbers.update([2, 6])

    discarded = SortedList([1, 2])
    discarded.discard(9)

    descending = SortedKeyList([1, 3, 2], key=lambda value: -value)

    scores = SortedDict({"carol": 3, "alice": 1, "bob": 2})
    scores["aaron"] = 0

    tags = SortedSet(["b", "a", "c", "a"])

    return [
        expect_equal(TOPIC, "sorted_list_orders_on_add", list(numbers), [1, 2, 3, 4, 5, 6]),
        expect_equal(TOPIC, "sorted_list_supports_negative_index", numbers[-1], 6),
        expect_equal(TOPIC, "sorted_list_bisect_left", numbers.bisect_left(4), 3),
        expect_equal(TOPIC, "sorted_list_irange_is_inclusive", list(numbers.irange(2, 4)), [2, 3, 4]),
        expect_equal(TOPIC, "sorted_list_index", numbers.index(5), 4),
        expect_equal(TOPIC, "sorted_list_keeps_duplicates", list(SortedList([2, 1, 2])), [1, 2, 2]),
        expect_raises(TOPIC, "sorted_list_remove_missing_raises", lambda: SortedList([1]).remove(9), ValueError),
        expect_equal(TOPIC, "sorted_list_discard_missing_is_silent", list(discarded), [1, 2]),
        expect_raises(TOPIC, "sorted_list_append_not_supported", lambda: SortedList().append(1), NotImplementedError),
        expect_equal(TOPIC, "sorted_list_pop_defaults_to_largest", SortedList([3, 1, 2]).pop(), 3),
        expect_equal(TOPIC, "sorted_key_list_orders_by_key", list(descending), [3, 2, 1]),
        expect_equal(TOPIC, "sorted_list_with_key_builds_key_list", type(SortedList([1], key=abs)), SortedKeyList),
        expect_equal(TOPIC, "sorted_dict_iterates_keys_in_order", list(scores), ["aaron", "alice", "bob", "carol"]),
        expect_equal(TOPIC, "sorted_dict_peekitem_defaults_to_last", scores.peekitem(), ("carol", 3)),
        expect_equal(TOPIC, "sorted_dict_peekitem_first", scores.peekitem(0), ("aaron", 0)),
        expect_equal(TOPIC, "sorted_dict_bisect_left_on_keys", scores.bisect_left("b"), 2),
        expect_equal(TOPIC, "sorted_dict_irange_over_keys", list(scores.irange("alice", "bob")), ["alice", "bob"]),
        expect_raises(TOPIC, "sorted_dict_missing_key_raises", lambda: scores["zed"], KeyError),
        expect_equal(TOPIC, "sorted_set_drops_duplicates_and_orders", list(tags), ["a", "b", "c"]),
        expect_equal(TOPIC, "sorted_set_indexing", (tags[0], tags[-1]), ("a", "c")),
        expect_equal(TOPIC, "sorted_set_algebra_stays_sorted", list(tags | {"0", "z"}), ["0", "a", "b", "c", "z"]),
        expect_equal(
            TOPIC,
            "running_median_with_sorted_list",
            window_medians([1, 3, -1, -3, 5, 3, 6, 7], 3),
            [1, -1, -1, 3, 5, 6],
        ),
        expect_equal(TOPIC, "running_median_even_window", window_medians([1, 2, 3, 4], 2), [1.5, 2.5, 3.5]),
    ]
