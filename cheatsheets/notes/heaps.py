"""
Cheat sheet for `heapq`.
`heapq` maintains a min-heap inside a plain list; heap[0] is always the smallest item.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises

TOPIC = "heaps"


def heap_sort(values: Iterable[int]) -> list[int]:
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def top_k(nums: Iterable[int], k: int) -> list[int]:
    return heapq.nlargest(k, nums)


def kth_largest(nums: Iterable[int], k: int) -> int:
    return heapq.nlargest(k, nums)[-1]


def k_closest_to_origin(points: Iterable[tuple[int, int]], k: int) -> list[tuple[int, int]]:
    return heapq.nsmallest(k, points, key=lambda p: p[0] ** 2 + p[1] ** 2)


def max_heap_pop_order(values: Iterable[int]) -> list[int]:
    # heapq has no max-heap; push negated keys.
    heap = [-value for value in values]
    heapq.heapify(heap)
    return [-heapq.heappop(heap) for _ in range(len(heap))]


def merge_sorted(*runs: Iterable[int]) -> list[int]:
    return list(heapq.merge(*runs))


def schedule_order(tasks: Iterable[tuple[int, str]]) -> list[str]:
    """Pop tasks by priority; the sequence counter keeps equal priorities in insertion order."""

    counter = itertools.count()
    heap: list[tuple[int, int, str]] = []
    for priority, name in tasks:
        heapq.heappush(heap, (priority, next(counter), name))
    return [heapq.heappop(heap)[2] for _ in range(len(heap))]


def collect_checks() -> list[NoteCheck]:
    heap = [5, 3, 8, 1]
    heapq.heapify(heap)

    pushpop_heap = [2, 4, 6]
    pushpop_result = heapq.heappushpop(pushpop_heap, 1)
    replace_heap = [2, 4, 6]
    replace_result = heapq.heapreplace(replace_heap, 1)

    return [
        expect_equal(TOPIC, "min_heap_pops_smallest_first", heap_sort([5, 1, 4, 2, 3]), [1, 2, 3, 4, 5]),
        expect_equal(TOPIC, "heapify_puts_minimum_at_index_zero", heap[0], 1),
        expect_equal(TOPIC, "nlargest_returns_descending", top_k([3, 1, 4, 1, 5, 9, 2, 6], 3), [9, 6, 5]),
        expect_equal(TOPIC, "nsmallest_returns_ascending", heapq.nsmallest(2, [3, 1, 4, 1, 5]), [1, 1]),
        expect_equal(TOPIC, "kth_largest_via_nlargest", kth_largest([3, 2, 1, 5, 6, 4], 2), 5),
        expect_equal(
            TOPIC,
            "nsmallest_with_key",
            k_closest_to_origin([(1, 3), (-2, 2), (5, 8), (0, 1)], 2),
            [(0, 1), (-2, 2)],
        ),
        expect_equal(TOPIC, "max_heap_by_negation", max_heap_pop_order([2, 7, 4]), [7, 4, 2]),
        expect_equal(TOPIC, "merge_lazily_merges_sorted_runs", merge_sorted([1, 4, 7], [2, 5], [3, 6]), [1, 2, 3, 4, 5, 6, 7]),
        expect_equal(
            TOPIC,
            "tuple_priorities_with_counter_are_stable",
            schedule_order([(2, "write"), (1, "plan"), (2, "review"), (1, "research")]),
            ["plan", "research", "write", "review"],
        ),
        expect_equal(TOPIC, "heappushpop_returns_new_item_when_smaller", pushpop_result, 1),
        expect_equal(TOPIC, "heappushpop_leaves_heap_unchanged_for_small_item", pushpop_heap, [2, 4, 6]),
        expect_equal(TOPIC, "heapreplace_pops_before_pushing", replace_result, 2),
        expect_equal(TOPIC, "heapreplace_keeps_new_item", replace_heap[0], 1),
        expect_raises(TOPIC, "pop_from_empty_heap_raises", lambda: heapq.heappop([]), IndexError),
    ]
