"""Frequency counting drills: hash maps and fixed-size count tables."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

K = TypeVar("K", bound=Hashable)

ASCII_SIZE = 128


def count_frequencies(values: Iterable[K]) -> dict[K, int]:
    """Count how often each value occurs, keyed in order of first appearance."""
    return dict(Counter(values))


def count_bounded(values: Iterable[int], max_value: int) -> list[int]:
    """Count values into a table indexed 0..max_value.

    Raises ValueError for a value outside that range.
    """
    if max_value < 0:
        raise ValueError(f"max_value must not be negative, got {max_value}")
    counts = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} is outside 0..{max_value}")
        counts[value] += 1
    return counts


def count_letters(s: str) -> dict[str, int]:
    """Count each lowercase ASCII letter of s, listing all 26 letters in order.

    Raises ValueError for any other character.
    """
    counts = dict.fromkeys(string.ascii_lowercase, 0)
    for char in s:
        if char not in counts:
            raise ValueError(f"{char!r} is not a lowercase ASCII letter")
        counts[char] += 1
    return counts


def count_ascii(s: str) -> list[int]:
    """Count the characters of s into a table indexed by ASCII code.

    Raises ValueError for a character outside the ASCII range.
    """
    counts = [0] * ASCII_SIZE
    for char in s:
        code = ord(char)
        if code >= ASCII_SIZE:
            raise ValueError(f"{char!r} is not an ASCII character")
        counts[code] += 1
    return counts


def sorted_frequencies(values: Iterable[K]) -> list[tuple[K, int]]:
    """Return (value, count) pairs in ascending order of value."""
    return sorted(Counter(values).items())


def highest_and_lowest_frequency(values: Iterable[K]) -> tuple[K, K]:
    """Return the most frequent and the least frequent value.

    Among equally frequent values the smallest is taken as most frequent and
    the largest as least frequent. Raises ValueError for no values.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("no values to count")
    highest = max(counts.values())
    lowest = min(counts.values())
    most = min(value for value, count in counts.items() if count == highest)
    least = max(value for value, count in counts.items() if count == lowest)
    return most, least