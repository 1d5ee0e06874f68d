"""Permutation generation and k-th permutation lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of nums, by position order.

    Values are tracked by identity of value, so repeated values never
    appear together and an input with duplicates yields no permutations.
    """
    items = list(nums)

    def walk(chosen: list[int], used: frozenset[int]) -> Iterator[list[int]]:
        if len(chosen) == len(items):
            yield chosen
            return
        for value in items:
            if value not in used:
                yield from walk([*chosen, value], used | {value})

    return list(walk([], frozenset()))


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct orderings of a multiset in lexicographic order."""
    items = sorted(nums)
    used = [False] * len(items)

    def walk(chosen: list[int]) -> Iterator[list[int]]:
        if len(chosen) == len(items):
            yield chosen
            return
        for position, value in enumerate(items):
            if used[position]:
                continue
            if position > 0 and value == items[position - 1] and not used[position - 1]:
                continue
            used[position] = True
            yield from walk([*chosen, value])
            used[position] = False

    return list(walk([]))


def kth_permutation(n: int, k: int) -> str:
    """Return the k-th (1-based) lexicographic permutation of 1..n as a string."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    block = 1
    for factor in range(1, n):
        block *= factor
    if not 1 <= k <= block * n:
        raise ValueError(f"k must be between 1 and {block * n}, got {k}")

    digits = list(range(1, n + 1))
    index = k - 1
    parts: list[str] = []
    while digits:
        pick, index = divmod(index, block)
        parts.append(str(digits.pop(pick)))
        if digits:
            block //= len(digits)
    return "".join(parts)