"""Subarray drills: pair sums, sign arrangement, profits, runs and sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate


def two_sum(items: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of two items summing to target, or None.

    The pair with the smallest possible j is found.
    """
    seen: dict[int, int] = {}
    for j, value in enumerate(items):
        partner = target - value
        if partner in seen:
            return seen[partner], j
        seen[value] = j
    return None


def two_sum_sorted(items: Iterable[int], target: int) -> tuple[int, int] | None:
    """Two-pointer pair search; indices refer to the items in ascending order.

    Returns None when no pair sums to target.
    """
    ordered = sorted(items)
    i, j = 0, len(ordered) - 1
    while i < j:
        total = ordered[i] + ordered[j]
        if total == target:
            return i, j
        if total > target:
            j -= 1
        else:
            i += 1
    return None


def alternate_signs(items: Sequence[int]) -> list[int]:
    """Place positives at even indices and the rest at odd ones, keeping order.

    Raises ValueError unless there are as many positives as other values.
    """
    positives = [x for x in items if x > 0]
    others = [x for x in items if x <= 0]
    if len(positives) != len(others):
        raise ValueError("need as many positive values as non-positive ones")
    return [x for pair in zip(positives, others) for x in pair]


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from buying once and selling later; 0 when no gain is possible."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def longest_subarray_with_sum(items: Iterable[int], k: int) -> int:
    """Length of the longest contiguous run summing to k; 0 if there is none."""
    first_seen = {0: -1}
    total = best = 0
    for i, value in enumerate(items):
        total += value
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, i - start)
        first_seen.setdefault(total, i)
    return best


def longest_positive_subarray_with_sum(items: Sequence[int], k: int) -> int:
    """Sliding-window version of the longest run summing to k.

    Works for non-negative items only; raises ValueError for a negative one.
    """
    if any(x < 0 for x in items):
        raise ValueError("items must not be negative")
    left = total = best = 0
    for right, value in enumerate(items):
        total += value
        while total > k and left <= right:
            total -= items[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def majority_element(items: Sequence[int]) -> int | None:
    """Return the value occurring more than len(items) // 2 times, or None."""
    counts: Counter[int] = Counter()
    half = len(items) // 2
    for value in items:
        counts[value] += 1
        if counts[value] > half:
            return value
    return None


def majority_vote(items: Iterable[int]) -> int:
    """Boyer-Moore vote: the majority value if one exists, else some candidate.

    Raises ValueError for no items.
    """
    candidate = None
    count = 0
    seen_any = False
    for value in items:
        seen_any = True
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if not seen_any:
        raise ValueError("no items to vote on")
    return candidate


def max_subarray(items: Sequence[int]) -> tuple[int, list[int]]:
    """Return the largest contiguous sum and the first run that reaches it.

    Raises ValueError for no items.
    """
    if not items:
        raise ValueError("no items")
    best: int | None = None
    span = (0, 0)
    for start in range(len(items)):
        for stop, total in enumerate(accumulate(items[start:]), start=start + 1):
            if best is None or total > best:
                best, span = total, (start, stop)
    return best, list(items[span[0] : span[1]])


def max_subarray_sum_clamped(items: Iterable[int]) -> int:
    """Running-sum maximum that never goes below 0.

    The running sum restarts when it plus the current item falls below zero.
    """
    total = best = 0
    for value in items:
        total += value
        best = max(best, total)
        if total + value < 0:
            total = 0
    return best


def sort_colors(items: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in one pass.

    Raises ValueError for any other value.
    """
    if any(x not in (0, 1, 2) for x in items):
        raise ValueError("only 0, 1 and 2 can be sorted")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1