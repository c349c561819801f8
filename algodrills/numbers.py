"""Integer drills: digits, divisors, GCD, primes, factorials, Fibonacci."""

from __future__ import annotations

import math
from functools import cache

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers: {n}")


def _require_positive(*values: int) -> None:
    for value in values:
        if value <= 0:
            raise ValueError(f"expected a positive number, got {value}")


def is_armstrong(n: int) -> bool:
    """Return True if n equals the sum of its digits each raised to the digit count."""
    _require_non_negative(n, "an Armstrong check")
    digits = str(n)
    power = len(digits)
    return n == sum(int(d) ** power for d in digits)


def proper_divisors(n: int) -> list[int]:
    """Return the divisors of n below n, in ascending order."""
    return [i for i in range(1, n // 2 + 1) if n % i == 0]


def divisors(n: int) -> list[int]:
    """Return all divisors of n, found in pairs up to its square root.

    Each divisor i is followed by its partner n // i, so the list is not sorted.
    """
    if n <= 0:
        return []
    found: list[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.append(i)
            if i != n // i:
                found.append(n // i)
    return found


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor by testing every candidate from 1 upwards."""
    _require_positive(a, b)
    return max(i for i in range(1, min(a, b) + 1) if a % i == 0 and b % i == 0)


def gcd_descending(a: int, b: int) -> int:
    """Greatest common divisor by testing candidates downwards from the smaller number.

    Falls back to 1 when no candidate exists.
    """
    return next(
        (i for i in range(min(a, b), 0, -1) if a % i == 0 and b % i == 0),
        1,
    )


def gcd_subtraction(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction."""
    _require_positive(a, b)
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by the remainder form of Euclid's algorithm."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def count_digits(n: int) -> int:
    """Count the decimal digits of n by repeated division; zero has none."""
    n = abs(n)
    count = 0
    while n:
        n //= 10
        count += 1
    return count


def count_digits_log(n: int) -> int:
    """Count the decimal digits of a positive n with a base-10 logarithm."""
    _require_positive(n)
    return int(math.log10(n) + 1)


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal text of n reads the same backwards."""
    text = str(n)
    return text == text[::-1]


def is_palindrome_number_bounded(n: int) -> bool:
    """Palindrome check by digit reversal within a signed 32-bit range.

    Negative numbers are never palindromes; a reversal that would overflow
    the range is reported as not a palindrome.
    """
    remaining, reversed_value = n, 0
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        if INT_MAX // 10 - digit < reversed_value:
            return False
        reversed_value = reversed_value * 10 + digit
    return n == reversed_value


def reverse_integer(n: int) -> int:
    """Reverse the digits of n, returning 0 when the result leaves the 32-bit range."""
    result = reverse_number(n)
    if not INT_MIN <= result <= INT_MAX:
        return 0
    return result


def is_prime(n: int) -> bool:
    """Trial division up to the square root of n.

    Numbers below 4 have no candidate divisor to test and are reported prime.
    """
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def factorial(n: int) -> int:
    """Product of 1..n; numbers below 2 give 1."""
    return math.prod(range(2, n + 1))


def factorial_recursive(n: int) -> int:
    """Factorial by direct recursion."""
    _require_non_negative(n, "factorial")
    if n == 0:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, computed iteratively; n below 2 gives n."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


@cache
def fibonacci_recursive(n: int) -> int:
    """The n-th Fibonacci number by recursion; n below 2 gives n."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_sequence(n: int) -> list[int]:
    """The Fibonacci numbers from index 0 through n."""
    _require_non_negative(n, "a Fibonacci sequence")
    sequence = [0]
    if n >= 1:
        sequence.append(1)
    while len(sequence) <= n:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence


def sum_to(n: int) -> int:
    """Sum of the integers 1..n."""
    _require_non_negative(n, "sum_to")
    return n * (n + 1) // 2