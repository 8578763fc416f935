"""
Shared check primitives for the cheat-sheet notes.
Every topic module restates documented library behaviour as NoteCheck rows built with these helpers.
The runner only depends on this contract, so topics stay independent of each other.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class NoteCheck:
    topic: str
    check_name: str
    passed: bool
    expected: Any
    actual: Any

    def to_row(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "check_name": self.check_name,
            "passed": self.passed,
            "expected": repr(self.expected),
            "actual": repr(self.actual),
        }


class NoteModule(Protocol):
    TOPIC: str

    def collect_checks(self, **params: Any) -> list[NoteCheck]: ...


def expect_equal(topic: str, check_name: str, actual: Any, expected: Any) -> NoteCheck:
    return NoteCheck(
        topic=topic,
        check_name=check_name,
        passed=bool(actual == expected),
        expected=expected,
        actual=actual,
    )


def expect_true(topic: str, check_name: str, condition: bool, *, detail: Any = None) -> NoteCheck:
    return NoteCheck(
        topic=topic,
        check_name=check_name,
        passed=bool(condition),
        expected=True,
        actual=detail if detail is not None else bool(condition),
    )


def expect_raises(
    topic: str,
    check_name: str,
    func: Callable[[], Any],
    exc_type: type[BaseException],
) -> NoteCheck:
    """Call `func` and record whether it raised `exc_type`.

    Exceptions of any other type are not caught.
    """

    try:
        func()
    except exc_type as exc:
        return NoteCheck(
            topic=topic,
            check_name=check_name,
            passed=True,
            expected=exc_type.__name__,
            actual=type(exc).__name__,
        )
    return NoteCheck(
        topic=topic,
        check_name=check_name,
        passed=False,
        expected=exc_type.__name__,
        actual="no exception",
    )
