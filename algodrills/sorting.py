"""Sorting drills: classic in-place sorts plus permutations and bit counts."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from typing import Any


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by bubbling, stopping early once a pass makes no swap."""
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by sliding each item left into its place."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            _swap(items, j, j - 1)
            j -= 1


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining item to the front."""
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        _swap(items, smallest, i)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by recursive halving and merging."""

    def merge(low: int, mid: int, high: int) -> None:
        left = items[low : mid + 1]
        right = items[mid + 1 : high + 1]
        merged = []
        li = ri = 0
        while li < len(left) and ri < len(right):
            if left[li] <= right[ri]:
                merged.append(left[li])
                li += 1
            else:
                merged.append(right[ri])
                ri += 1
        merged.extend(left[li:])
        merged.extend(right[ri:])
        items[low : high + 1] = merged

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        mid = (low + high) // 2
        sort(low, mid)
        sort(mid + 1, high)
        merge(low, mid, high)

    sort(0, len(items) - 1)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by partitioning around the first item of each range."""

    def partition(low: int, high: int) -> int:
        pivot = items[low]
        i, j = low, high
        while i < j:
            while items[i] <= pivot and i <= high - 1:
                i += 1
            while items[j] > pivot and j >= low + 1:
                j -= 1
            if i < j:
                _swap(items, i, j)
        _swap(items, low, j)
        return j

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        p = partition(low, high)
        sort(low, p - 1)
        sort(p + 1, high)

    sort(0, len(items) - 1)


def recursive_bubble_sort(items: MutableSequence[Any]) -> None:
    """Bubble sort where each pass recurses on the unsorted prefix."""

    def bubble(n: int) -> None:
        if n <= 1:
            return
        swapped = False
        for i in range(n - 1):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
                swapped = True
        if swapped:
            bubble(n - 1)

    bubble(len(items))


def recursive_insertion_sort(items: MutableSequence[Any]) -> None:
    """Insertion sort where each step recurses on the next item."""
    n = len(items)

    def insert(i: int) -> None:
        if i >= n:
            return
        j = i
        while j > 0 and items[j] < items[j - 1]:
            _swap(items, j, j - 1)
            j -= 1
        insert(i + 1)

    insert(1)


def _next_permutation(chars: list[str]) -> bool:
    """Advance chars to the next lexicographic permutation; False at the last."""
    i = len(chars) - 2
    while i >= 0 and chars[i] >= chars[i + 1]:
        i -= 1
    if i < 0:
        chars.reverse()
        return False
    j = len(chars) - 1
    while chars[j] <= chars[i]:
        j -= 1
    chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1 :] = reversed(chars[i + 1 :])
    return True


def permutations_in_order(s: str) -> Iterator[str]:
    """Yield s and every lexicographically greater arrangement of its characters."""
    chars = list(s)
    yield s
    while _next_permutation(chars):
        yield "".join(chars)


def popcount(n: int) -> int:
    """Number of set bits in the binary form of a non-negative n."""
    if n < 0:
        raise ValueError(f"popcount needs a non-negative number, got {n}")
    return n.bit_count()