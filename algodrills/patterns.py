"""Text patterns of stars, digits and letters, printed by row."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Sequence

_Builder = Callable[[int], Iterator[str]]
_PATTERNS: dict[int, tuple[int, _Builder]] = {}


def _pattern(number: int, default_size: int = 5) -> Callable[[_Builder], _Builder]:
    def register(builder: _Builder) -> _Builder:
        _PATTERNS[number] = (default_size, builder)
        return builder

    return register


def _letters(start: int, count: int) -> str:
    return "".join(chr(ord("A") + start + k) for k in range(count))


@_pattern(1)
def _square(n: int) -> Iterator[str]:
    for _ in range(n):
        yield "*" * n


@_pattern(2)
def _star_triangle(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "*" * i


@_pattern(3)
def _counting_triangle(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield "".join(str(j) for j in range(1, i + 1))


@_pattern(4)
def _row_number_triangle(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield str(i) * i


@_pattern(5)
def _inverted_star_triangle(n: int) -> Iterator[str]:
    for i in range(n, 0, -1):
        yield "*" * i


@_pattern(6)
def _inverted_counting_triangle(n: int) -> Iterator[str]:
    for i in range(n, 0, -1):
        yield "".join(str(j) for j in range(1, i + 1))


@_pattern(8)
def _inverted_pyramid(n: int) -> Iterator[str]:
    for i in range(n):
        yield " " * i + "*" * (2 * n - 1 - 2 * i)


@_pattern(9)
def _diamond(n: int) -> Iterator[str]:
    for i in range(n):
        yield " " * (n - i) + "*" * (2 * i + 1)
    for i in range(n):
        yield " " * (i + 1) + "*" * (2 * n - 2 * i - 1)


@_pattern(10)
def _arrow(n: int) -> Iterator[str]:
    for i in range(2 * n - 1):
        yield "*" * (i + 1 if i < n else 2 * n - 1 - i)


@_pattern(11)
def _binary_triangle(n: int) -> Iterator[str]:
    for i in range(n):
        yield "".join("1" if (i + j) % 2 == 0 else "0" for j in range(i + 1))


@_pattern(12, default_size=4)
def _number_crown(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        up = "".join(str(j) for j in range(1, i + 1))
        down = "".join(str(j) for j in range(i, 0, -1))
        yield up + " " * (2 * (n - i)) + down


@_pattern(13)
def _floyd_triangle(n: int) -> Iterator[str]:
    value = 1
    for i in range(1, n + 1):
        yield "".join(f" {value + k}" for k in range(i))
        value += i


@_pattern(14)
def _letter_triangle(n: int) -> Iterator[str]:
    for i in range(1, n + 1):
        yield _letters(0, i)


@_pattern(15)
def _inverted_letter_triangle(n: int) -> Iterator[str]:
    for i in range(n, 0, -1):
        yield _letters(0, i)


@_pattern(16)
def _row_letter_triangle(n: int) -> Iterator[str]:
    for i in range(n):
        yield chr(ord("A") + i) * (i + 1)


@_pattern(17)
def _letter_pyramid(n: int) -> Iterator[str]:
    for i in range(n):
        rising = _letters(0, i + 1)
        yield " " * (n - i - 1) + rising + rising[-2::-1]


@_pattern(18)
def _trailing_letters(n: int) -> Iterator[str]:
    for i in range(n):
        yield "".join(f" {letter}" for letter in _letters(n - 1 - i, i + 1))


@_pattern(19)
def _hollow_diamond(n: int) -> Iterator[str]:
    for i in range(n):
        yield "*" * (n - i) + " " * (2 * i) + "*" * (n - i)
    for i in range(n):
        yield "*" * (i + 1) + " " * (2 * (n - 1) - 2 * i) + "*" * (i + 1)


@_pattern(20)
def _butterfly(n: int) -> Iterator[str]:
    for i in range(2 * n - 1):
        if i < n:
            width, gap = i + 1, 2 * n - 2 * (i + 1)
        else:
            width, gap = 2 * n - (i + 1), 2 * (i - n + 1)
        yield "*" * width + " " * gap + "*" * width


@_pattern(21)
def _hollow_square(n: int) -> Iterator[str]:
    for i in range(n):
        if i in (0, n - 1):
            yield "*" * n
        else:
            yield "".join("*" if j in (0, n - 1) else " " for j in range(n))


@_pattern(22, default_size=4)
def _concentric_squares(n: int) -> Iterator[str]:
    side = 2 * n - 1
    for i in range(side):
        yield "".join(
            str(n - min(i, side - 1 - i, j, side - 1 - j)) for j in range(side)
        )


def available() -> list[int]:
    """Numbers of the patterns that can be rendered."""
    return sorted(_PATTERNS)


def render(number: int, size: int | None = None) -> str:
    """Render pattern `number`, each row ending in a newline.

    Without a size the pattern's own default is used. Raises ValueError for an
    unknown pattern or a negative size.
    """
    try:
        default_size, builder = _PATTERNS[number]
    except KeyError:
        raise ValueError(f"no pattern numbered {number}") from None
    if size is None:
        size = default_size
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return "".join(f"{line}\n" for line in builder(size))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one pattern to standard output."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("number", type=int, choices=available(), help="pattern number")
    parser.add_argument("--size", type=int, default=None, help="pattern size")
    args = parser.parse_args(argv)
    try:
        text = render(args.number, args.size)
    except ValueError as exc:
        parser.error(str(exc))
    print(text, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())