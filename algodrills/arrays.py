"""Array drills: extremes, order checks, rotation, search and set-like merges."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from itertools import groupby, pairwise
from operator import xor
from typing import Any


def largest(items: Iterable[Any]) -> Any:
    """Return the largest item; raises ValueError for no items."""
    values = list(items)
    if not values:
        raise ValueError("no items to compare")
    return max(values)


def second_largest(items: Iterable[Any]) -> Any:
    """Return the item that comes second when sorted from largest down.

    Repeated values count separately, so [5, 5] gives 5. Raises ValueError
    for fewer than two items.
    """
    top = heapq.nlargest(2, items)
    if len(top) < 2:
        raise ValueError("need at least two items")
    return top[1]


def second_smallest(items: Iterable[Any]) -> Any:
    """Return the item that comes second when sorted from smallest up.

    Repeated values count separately. Raises ValueError for fewer than two items.
    """
    bottom = heapq.nsmallest(2, items)
    if len(bottom) < 2:
        raise ValueError("need at least two items")
    return bottom[1]


def is_sorted(items: Iterable[Any]) -> bool:
    """Return True if the items never decrease."""
    return all(a <= b for a, b in pairwise(items))


def remove_duplicates(items: MutableSequence[Any]) -> int:
    """Collapse runs of equal adjacent items in place and return the new length."""
    items[:] = [key for key, _ in groupby(items)]
    return len(items)


def rotate_left(items: MutableSequence[Any]) -> None:
    """Rotate items one place to the left, in place."""
    if items:
        items[:] = [*items[1:], items[0]]


def rotate_left_by(items: MutableSequence[Any], d: int) -> None:
    """Rotate items d places to the left, in place.

    Raises ValueError unless 0 <= d <= len(items).
    """
    if not 0 <= d <= len(items):
        raise ValueError(f"shift {d} is outside 0..{len(items)}")
    items[:] = [*items[d:], *items[:d]]


def linear_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of the first item equal to target, or -1 if absent."""
    return next((i for i, item in enumerate(items) if item == target), -1)


def move_zeroes(items: MutableSequence[Any]) -> None:
    """Move every zero to the end in place, keeping the other items in order."""
    kept = [item for item in items if item != 0]
    items[:] = kept + [0] * (len(items) - len(kept))


def union_sorted(a: Iterable[Any], b: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list without repeats."""
    return [key for key, _ in groupby(heapq.merge(a, b))]


def missing_number(items: Iterable[int], n: int) -> int:
    """Return the number from 1..n absent from items; 0 if none is missing."""
    return n * (n + 1) // 2 - sum(items)


def max_consecutive_ones(items: Iterable[int]) -> int:
    """Length of the longest run of ones.

    Only a zero ends a run; other values neither extend nor break it.
    """
    best = run = 0
    for item in items:
        if item == 1:
            run += 1
        elif item == 0:
            best = max(best, run)
            run = 0
    return max(best, run)


def single_number(items: Sequence[int]) -> int:
    """Return the one value that is not paired, when every other value appears twice."""
    return reduce(xor, items, 0)