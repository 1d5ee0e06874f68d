"""Small counting helpers: number runs, factorial, Fibonacci terms and sums."""

from __future__ import annotations


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def ascending(n: int) -> list[int]:
    """Return the numbers 1..n in increasing order (empty when n < 1)."""
    return list(range(1, n + 1))


def descending(n: int) -> list[int]:
    """Return the numbers n..1 in decreasing order (empty when n < 1)."""
    return list(range(n, 0, -1))


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    _require_non_negative(n)
    result = 1
    for factor in range(n, 0, -1):
        result *= factor
    return result


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first n Fibonacci numbers, starting from 0."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return terms


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n for a non-negative integer n."""
    _require_non_negative(n)
    return sum(range(1, n + 1))