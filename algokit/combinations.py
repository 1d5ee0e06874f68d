"""Combination searches: k-of-n choices and combination-sum variants."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def combine(n: int, k: int) -> list[list[int]]:
    """Return every k-element combination of 1..n in lexicographic order."""

    def walk(start: int, chosen: list[int]) -> Iterator[list[int]]:
        if len(chosen) == k:
            yield chosen
            return
        if start > n:
            return
        yield from walk(start + 1, [*chosen, start])
        yield from walk(start + 1, chosen)

    return list(walk(1, []))


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return combinations of candidates, each usable any number of times, summing to target.

    Candidates must be positive; each combination lists values in candidate order.
    """
    items = list(candidates)
    if any(value <= 0 for value in items):
        raise ValueError("candidates must be positive integers")

    def walk(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        if start >= len(items) or remaining < 0:
            return
        value = items[start]
        if value <= remaining:
            yield from walk(start, remaining - value, [*chosen, value])
        yield from walk(start + 1, remaining, chosen)

    return list(walk(0, target, []))


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return distinct combinations using each candidate at most once that sum to target."""
    items = sorted(candidates)

    def walk(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        previous = None
        for position, value in enumerate(items[start:], start):
            if position > start and value == previous:
                continue
            previous = value
            if value <= remaining:
                yield from walk(position + 1, remaining - value, [*chosen, value])

    return list(walk(0, target, []))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every set of k distinct digits 1..9 that sums to n, ascending."""

    def walk(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0 and len(chosen) == k:
            yield chosen
            return
        for digit in range(start, 10):
            if digit <= remaining:
                yield from walk(digit + 1, remaining - digit, [*chosen, digit])

    return list(walk(1, n, []))