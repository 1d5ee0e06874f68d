"""Subset enumeration and subset-sum queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_UNSET = object()


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return every subset, those containing an element listed before those without it."""
    result: list[list[int]] = [[]]
    for value in reversed(list(nums)):
        result = [[value, *rest] for rest in result] + result
    return result


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct subsets of a multiset, each sorted, in lexicographic order."""
    items = sorted(nums)

    def walk(start: int, prefix: list[int]) -> Iterator[list[int]]:
        yield prefix
        previous = _UNSET
        for position, value in enumerate(items[start:], start):
            if value == previous:
                continue
            previous = value
            yield from walk(position + 1, [*prefix, value])

    return list(walk(0, []))


def _all_sums(nums: Iterable[int]) -> list[int]:
    sums = [0]
    for value in reversed(list(nums)):
        sums = [value + rest for rest in sums] + sums
    return sums


def subset_sums(nums: Iterable[int]) -> list[int]:
    """Return the sums of all subsets, sorted in ascending order."""
    return sorted(_all_sums(nums))


def has_subsequence_sum(nums: Iterable[int], k: int) -> bool:
    """Tell whether some subsequence (possibly empty) sums to k."""
    return any(total == k for total in _all_sums(nums))


def count_subsequences_with_sum(nums: Iterable[int], k: int) -> int:
    """Count the subsequences (possibly empty) whose sum is k."""
    return sum(1 for total in _all_sums(nums) if total == k)