"""
Cheat sheet for `collections.deque`.
O(1) appends and pops at both ends: the same object serves as a FIFO queue or a LIFO stack.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from datetime import datetime, timedelta
from typing import TypeVar

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises

TOPIC = "deques"

T = TypeVar("T")
N = TypeVar("N", bound=Hashable)


def fifo_order(items: Iterable[T]) -> list[T]:
    queue: deque[T] = deque()
    for item in items:
        queue.append(item)
    return [queue.popleft() for _ in range(len(queue))]


def lifo_order(items: Iterable[T]) -> list[T]:
    stack: deque[T] = deque()
    for item in items:
        stack.append(item)
    return [stack.pop() for _ in range(len(stack))]


def last_n(items: Iterable[T], n: int) -> list[T]:
    return list(deque(items, maxlen=n))


def bfs_order(graph: Mapping[N, Sequence[N]], start: N) -> list[N]:
    visited = {start}
    queue = deque([start])
    order: list[N] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbor in graph.get(vertex, ()):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def events_in_window(timestamps: Iterable[datetime], window: timedelta) -> int:
    """Return the largest number of events that fall within any `window` span.

    Timestamps must be sorted ascending.
    """

    recent: deque[datetime] = deque()
    busiest = 0
    for ts in timestamps:
        recent.append(ts)
        while ts - recent[0] > window:
            recent.popleft()
        busiest = max(busiest, len(recent))
    return busiest


def collect_checks() -> list[NoteCheck]:
    rotated_right = deque([1, 2, 3, 4])
    rotated_right.rotate(1)
    rotated_left = deque([1, 2, 3, 4])
    rotated_left.rotate(-1)

    left_extended: deque[int] = deque()
    left_extended.extendleft([1, 2, 3])

    bounded = deque([1, 2, 3], maxlen=3)
    bounded.appendleft(0)

    start = datetime(2024, 1, 1, 12, 0, 0)
    logins = [start + timedelta(seconds=s) for s in (0, 10, 20, 90, 95, 100, 110)]

    graph = {"a": ["b", "c"], "b": ["d"], "c": ["d", "e"], "d": [], "e": ["a"]}

    return [
        expect_equal(TOPIC, "append_popleft_is_fifo", fifo_order("abc"), ["a", "b", "c"]),
        expect_equal(TOPIC, "append_pop_is_lifo", lifo_order("abc"), ["c", "b", "a"]),
        expect_equal(TOPIC, "maxlen_keeps_last_items", last_n(range(10), 3), [7, 8, 9]),
        expect_equal(TOPIC, "appendleft_on_full_deque_drops_right_end", list(bounded), [0, 1, 2]),
        expect_equal(TOPIC, "rotate_positive_moves_right", list(rotated_right), [4, 1, 2, 3]),
        expect_equal(TOPIC, "rotate_negative_moves_left", list(rotated_left), [2, 3, 4, 1]),
        expect_equal(TOPIC, "extendleft_reverses_input", list(left_extended), [3, 2, 1]),
        expect_equal(TOPIC, "index_access_at_ends", (deque("xyz")[0], deque("xyz")[-1]), ("x", "z")),
        expect_raises(TOPIC, "popleft_from_empty_deque_raises", lambda: deque().popleft(), IndexError),
        expect_raises(TOPIC, "pop_from_empty_deque_raises", lambda: deque().pop(), IndexError),
        expect_equal(TOPIC, "bfs_visits_by_distance", bfs_order(graph, "a"), ["a", "b", "c", "d", "e"]),
        expect_equal(TOPIC, "sliding_window_counts_recent_events", events_in_window(logins, timedelta(seconds=30)), 4),
    ]
