"""Algorithm drills grouped by topic: numbers, strings, recursion, hashing,
sorting, arrays, subarrays and text patterns."""

__version__ = "0.1.0"
__all__ = [
    "numbers",
    "strings",
    "recursion",
    "hashing",
    "sorting",
    "patterns",
    "arrays",
    "subarrays",
]