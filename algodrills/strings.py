"""String drills: common prefixes, reversal and palindromes."""

from __future__ import annotations

import string
from collections.abc import MutableSequence, Sequence

# ASCII letters plus the control characters with code points 0 to 9.
_KEPT = frozenset(string.ascii_letters) | frozenset(chr(code) for code in range(10))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string; empty for no strings."""
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def reverse_chars(chars: MutableSequence[str]) -> None:
    """Reverse a mutable sequence of characters in place."""
    chars[:] = chars[::-1]


def is_alnum_palindrome(s: str) -> bool:
    """Palindrome check over the kept characters of s, ignoring case.

    Only ASCII letters and the control characters U+0000 to U+0009 are kept;
    everything else, digits included, is skipped.
    """
    kept = "".join(c for c in s if c in _KEPT).lower()
    return kept == kept[::-1]


def is_palindrome(s: str) -> bool:
    """Return True if s reads the same backwards, character for character."""
    return s == s[::-1]