"""Classic recursive integer functions, computed without deep recursion."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return ``n!``; values of ``n`` at or below 1 give 1."""
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` at or below 1 give ``n``."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(terms: int) -> list[int]:
    """Return the first ``terms`` Fibonacci numbers, starting from 0."""
    series: list[int] = []
    previous, current = 0, 1
    for _ in range(terms):
        series.append(previous)
        previous, current = current, previous + current
    return series


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm.

    The remainder keeps the sign of the dividend, so the sign of the result
    follows the inputs as in the step ``gcd(b, a % b)`` on machine integers.
    """
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def power(base: int, exp: int) -> int:
    """Return ``base`` raised to the non-negative integer ``exp``."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exp):
        result *= base
    return result