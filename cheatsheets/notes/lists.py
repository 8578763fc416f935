"""
Cheat sheet for `list`.
Mutation methods return None and change the list in place; slicing always builds a new list.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "lists"

T = TypeVar("T")


def left_rotate(items: list[T], steps: int) -> list[T]:
    if not items:
        return []
    steps %= len(items)
    return items[steps:] + items[:steps]


def sort_by_key(records: list[T], key: Callable[[T], Any]) -> list[T]:
    # list.sort is stable: equal keys keep their input order.
    ordered = list(records)
    ordered.sort(key=key)
    return ordered


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    if size <= 0:
        raise ValueError("size must be positive")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def transpose(rows: list[list[T]]) -> list[list[T]]:
    return [list(column) for column in zip(*rows)]


def mutation_walkthrough() -> list[int]:
    numbers = [1, 2, 3]
    numbers.append(4)
    numbers.extend([5, 6])
    numbers.insert(0, 0)
    numbers.pop()
    numbers.remove(3)
    return numbers


def collect_checks() -> list[NoteCheck]:
    original = [3, 1, 2]
    sorted_copy = sorted(original)

    shared_rows = [[0] * 2] * 2
    shared_rows[0][0] = 9
    independent_rows = [[0] * 2 for _ in range(2)]
    independent_rows[0][0] = 9

    shallow = [1, 2, 3]
    alias = shallow
    copy = shallow[:]
    shallow.append(4)

    trimmed = [0, 1, 2, 3, 4, 5]
    del trimmed[1:3]

    return [
        expect_equal(TOPIC, "mutation_methods_change_list_in_place", mutation_walkthrough(), [0, 1, 2, 4, 5]),
        expect_equal(TOPIC, "append_returns_none", [].append(1), None),
        expect_equal(TOPIC, "left_rotation_by_slicing", left_rotate([1, 2, 3, 4, 5], 2), [3, 4, 5, 1, 2]),
        expect_equal(TOPIC, "left_rotation_wraps_step_count", left_rotate([1, 2, 3], 4), [2, 3, 1]),
        expect_equal(TOPIC, "negative_step_slice_reverses", [1, 2, 3][::-1], [3, 2, 1]),
        expect_equal(TOPIC, "slice_past_end_is_clamped", [1, 2, 3][1:10], [2, 3]),
        expect_raises(TOPIC, "index_past_end_raises", lambda: [1, 2, 3][10], IndexError),
        expect_equal(TOPIC, "slice_copy_is_independent", copy, [1, 2, 3]),
        expect_true(TOPIC, "assignment_aliases_the_same_list", alias is shallow and alias == [1, 2, 3, 4]),
        expect_equal(TOPIC, "sorted_returns_new_list", (original, sorted_copy), ([3, 1, 2], [1, 2, 3])),
        expect_equal(TOPIC, "sort_returns_none", [2, 1].sort(), None),
        expect_equal(
            TOPIC,
            "sort_is_stable",
            sort_by_key([("b", 1), ("a", 2), ("c", 1)], key=lambda r: r[1]),
            [("b", 1), ("c", 1), ("a", 2)],
        ),
        expect_equal(TOPIC, "sort_descending", sorted([3, 1, 2], reverse=True), [3, 2, 1]),
        expect_raises(TOPIC, "remove_missing_value_raises", lambda: [1, 2].remove(3), ValueError),
        expect_raises(TOPIC, "index_of_missing_value_raises", lambda: [1, 2].index(3), ValueError),
        expect_raises(TOPIC, "pop_from_empty_list_raises", lambda: [].pop(), IndexError),
        expect_equal(TOPIC, "remove_deletes_first_occurrence", _removed_first([1, 2, 1]), [2, 1]),
        expect_equal(TOPIC, "multiplied_rows_share_one_list", shared_rows, [[9, 0], [9, 0]]),
        expect_equal(TOPIC, "comprehension_rows_are_independent", independent_rows, [[9, 0], [0, 0]]),
        expect_equal(TOPIC, "chunk_keeps_short_tail", chunk([1, 2, 3, 4, 5], 2), [[1, 2], [3, 4], [5]]),
        expect_equal(TOPIC, "zip_star_transposes", transpose([[1, 2, 3], [4, 5, 6]]), [[1, 4], [2, 5], [3, 6]]),
        expect_equal(TOPIC, "zip_stops_at_shortest", list(zip([1, 2, 3], "ab")), [(1, "a"), (2, "b")]),
        expect_equal(TOPIC, "enumerate_with_start", list(enumerate("ab", start=1)), [(1, "a"), (2, "b")]),
        expect_equal(TOPIC, "del_slice_removes_range", trimmed, [0, 3, 4, 5]),
        expect_equal(TOPIC, "star_unpacking", _head_tail([1, 2, 3, 4]), (1, [2, 3, 4])),
        expect_equal(TOPIC, "comprehension_with_filter", [x * x for x in range(6) if x % 2 == 0], [0, 4, 16]),
    ]


def _removed_first(items: list[int]) -> list[int]:
    items.remove(1)
    return items


def _head_tail(items: list[int]) -> tuple[int, list[int]]:
    head, *tail = items
    return head, tail
