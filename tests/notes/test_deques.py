from __future__ import annotations

from datetime import datetime, timedelta

from cheatsheets.notes import deques


def test_fifo_and_lifo() -> None:
    assert deques.fifo_order([1, 2, 3]) == [1, 2, 3]
    assert deques.lifo_order([1, 2, 3]) == [3, 2, 1]


def test_last_n() -> None:
    assert deques.last_n("abcdef", 2) == ["e", "f"]
    assert deques.last_n("ab", 5) == ["a", "b"]


def test_bfs_handles_missing_adjacency() -> None:
    graph = {1: [2, 3], 2: [4]}
    assert deques.bfs_order(graph, 1) == [1, 2, 3, 4]


def test_events_in_window() -> None:
    start = datetime(2024, 3, 1)
    stamps = [start + timedelta(minutes=m) for m in (0, 1, 2, 10, 11)]
    assert deques.events_in_window(stamps, timedelta(minutes=2)) == 3
    assert deques.events_in_window([], timedelta(minutes=2)) == 0
