"""
Cheat sheet for `set` and `frozenset`.
Members are unique and hashable; iteration order of a set is not defined, so results are compared as sets or sorted.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises, expect_true

TOPIC = "sets"

H = TypeVar("H", bound=Hashable)


def unique_in_order(items: Iterable[H]) -> list[H]:
    # dict keeps insertion order, a set would not.
    return list(dict.fromkeys(items))


def seen_twice(items: Iterable[H]) -> list[H]:
    seen: set[H] = set()
    repeated: list[H] = []
    for item in items:
        if item in seen and item not in repeated:
            repeated.append(item)
        seen.add(item)
    return repeated


def collect_checks() -> list[NoteCheck]:
    left = {1, 2, 3}
    right = {3, 4}

    discarded = {1, 2}
    discarded.discard(5)

    by_pair = {frozenset({"a", "b"}): "edge"}

    return [
        expect_equal(TOPIC, "set_drops_duplicates", {1, 1, 2}, {1, 2}),
        expect_equal(TOPIC, "dict_fromkeys_dedupes_in_order", unique_in_order([3, 1, 3, 2, 1]), [3, 1, 2]),
        expect_equal(TOPIC, "union", left | right, {1, 2, 3, 4}),
        expect_equal(TOPIC, "intersection", left & right, {3}),
        expect_equal(TOPIC, "difference", left - right, {1, 2}),
        expect_equal(TOPIC, "symmetric_difference", left ^ right, {1, 2, 4}),
        expect_equal(TOPIC, "union_method_accepts_any_iterable", left.union([9]), {1, 2, 3, 9}),
        expect_raises(TOPIC, "union_operator_requires_sets", lambda: left | [9], TypeError),  # type: ignore[operator]
        expect_raises(TOPIC, "remove_missing_member_raises", lambda: set().remove(5), KeyError),
        expect_equal(TOPIC, "discard_missing_member_is_silent", discarded, {1, 2}),
        expect_raises(TOPIC, "pop_from_empty_set_raises", lambda: set().pop(), KeyError),
        expect_raises(TOPIC, "unhashable_member_raises", lambda: {[1, 2]}, TypeError),
        expect_equal(TOPIC, "frozenset_is_hashable_and_order_free", by_pair[frozenset({"b", "a"})], "edge"),
        expect_raises(TOPIC, "frozenset_is_immutable", lambda: frozenset({1}).add(2), AttributeError),  # type: ignore[attr-defined]
        expect_true(TOPIC, "subset_operator", {1, 2} <= left and not {1, 5} <= left),
        expect_true(TOPIC, "proper_subset_operator", {1, 2} < left and not left < left),
        expect_true(TOPIC, "isdisjoint", {1, 2}.isdisjoint({3}) and not left.isdisjoint(right)),
        expect_true(TOPIC, "membership_test", 2 in left and 5 not in left),
        expect_equal(TOPIC, "empty_braces_make_a_dict", type({}), dict),
        expect_equal(TOPIC, "set_comprehension", {x % 3 for x in range(10)}, {0, 1, 2}),
        expect_equal(TOPIC, "first_repeats_via_seen_set", seen_twice("abcabca"), ["a", "b", "c"]),
        expect_equal(TOPIC, "sorted_set_for_stable_output", sorted({"b", "c", "a"}), ["a", "b", "c"]),
    ]
