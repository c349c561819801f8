"""Recursion drills: counting, repeating and reversing."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def count_from(start: int, stop: int) -> list[int]:
    """Return the numbers from start up to, but not including, stop."""
    if start > stop:
        raise ValueError(f"start {start} is past stop {stop}")
    return list(range(start, stop))


def greetings(n: int) -> list[str]:
    """Return n greetings."""
    return ["Hello"] * max(n, 0)


def count_up(n: int) -> list[int]:
    """Return 0 through n."""
    return list(range(n + 1))


def count_down(n: int) -> list[int]:
    """Return n down to 0."""
    return list(range(n, -1, -1))


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse items in place by swapping ends towards the middle."""
    items[:] = items[::-1]


def reverse_recursive(items: MutableSequence[Any]) -> None:
    """Reverse items in place by recursively swapping the outermost pair."""

    def swap(left: int, right: int) -> None:
        if left >= right:
            return
        items[left], items[right] = items[right], items[left]
        swap(left + 1, right - 1)

    swap(0, len(items) - 1)