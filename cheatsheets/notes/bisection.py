"""
Cheat sheet for `bisect`.
All functions assume the sequence is already sorted; bisect does not check.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence

from cheatsheets.notes.base import NoteCheck, expect_equal

TOPIC = "bisection"

GRADE_BREAKPOINTS = (60, 70, 80, 90)
GRADES = "FDCBA"


def index_of(ordered: Sequence[int], value: int) -> int:
    """Leftmost index of `value`, or -1 when absent."""

    position = bisect.bisect_left(ordered, value)
    if position != len(ordered) and ordered[position] == value:
        return position
    return -1


def insert_sorted(ordered: list[int], value: int) -> list[int]:
    bisect.insort(ordered, value)
    return ordered


def grade(score: int) -> str:
    return GRADES[bisect.bisect(GRADE_BREAKPOINTS, score)]


def count_in_range(ordered: Sequence[int], low: int, high: int) -> int:
    """Number of values with low <= value <= high."""

    return bisect.bisect_right(ordered, high) - bisect.bisect_left(ordered, low)


def longest_increasing_tails(nums: Iterable[int]) -> list[int]:
    # tails[i] is the smallest tail of any increasing subsequence of length i + 1.
    tails: list[int] = []
    for num in nums:
        position = bisect.bisect_left(tails, num)
        if position == len(tails):
            tails.append(num)
        else:
            tails[position] = num
    return tails


def binary_search(nums: Sequence[int], target: int) -> int:
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def collect_checks() -> list[NoteCheck]:
    ordered = [1, 2, 4, 4, 4, 7]
    records = [("ann", 31), ("bob", 42), ("cid", 57)]
    return [
        expect_equal(TOPIC, "bisect_left_returns_leftmost_insertion_point", bisect.bisect_left(ordered, 4), 2),
        expect_equal(TOPIC, "bisect_right_returns_rightmost_insertion_point", bisect.bisect_right(ordered, 4), 5),
        expect_equal(TOPIC, "bisect_is_bisect_right", bisect.bisect(ordered, 4), 5),
        expect_equal(TOPIC, "insertion_point_for_absent_value", bisect.bisect_left(ordered, 5), 5),
        expect_equal(TOPIC, "insertion_point_past_end", bisect.bisect_left(ordered, 99), len(ordered)),
        expect_equal(TOPIC, "bisect_lookup_finds_leftmost_match", index_of(ordered, 4), 2),
        expect_equal(TOPIC, "bisect_lookup_missing_returns_sentinel", index_of(ordered, 3), -1),
        expect_equal(TOPIC, "insort_keeps_order", insert_sorted([1, 3, 5], 4), [1, 3, 4, 5]),
        expect_equal(TOPIC, "breakpoint_table_lookup", [grade(s) for s in (33, 99, 77, 70, 89, 90, 100)], ["F", "A", "C", "C", "B", "A", "A"]),
        expect_equal(TOPIC, "count_values_in_closed_range", count_in_range(ordered, 2, 4), 4),
        expect_equal(TOPIC, "longest_increasing_tails", longest_increasing_tails([10, 9, 2, 5, 3, 7, 101, 18]), [2, 3, 7, 18]),
        expect_equal(TOPIC, "hand_written_binary_search", binary_search([1, 3, 5, 7, 9], 7), 3),
        expect_equal(TOPIC, "hand_written_binary_search_missing", binary_search([1, 3, 5, 7, 9], 4), -1),
        expect_equal(TOPIC, "bisect_with_key", bisect.bisect_left(records, 42, key=lambda r: r[1]), 1),
        expect_equal(TOPIC, "lo_hi_restrict_search", bisect.bisect_left(ordered, 4, lo=3), 3),
    ]
