"""One-dimensional dynamic programming: stairs, Fibonacci, frog jumps, house robbing."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def climb_stairs(n: int) -> int:
    """Return how many ways n steps can be climbed taking one or two at a time."""
    _require_non_negative(n)
    before, ways = 0, 1
    for _ in range(n):
        before, ways = ways, ways + before
    return ways


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    _require_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def frog_jump(heights: Sequence[int]) -> int:
    """Return the least energy to hop from the first stone to the last.

    Each hop goes one or two stones forward and costs the height difference.
    """
    if not heights:
        raise ValueError("heights must not be empty")
    cost_two_back = math.inf
    cost_one_back = 0
    for i in range(1, len(heights)):
        one_step = cost_one_back + abs(heights[i] - heights[i - 1])
        two_step = (
            cost_two_back + abs(heights[i] - heights[i - 2]) if i > 1 else math.inf
        )
        cost_two_back, cost_one_back = cost_one_back, min(one_step, two_step)
    return int(cost_one_back)


def rob(nums: Iterable[int]) -> int:
    """Return the largest total from values no two of which are adjacent."""
    values = list(nums)
    if not values:
        return 0
    two_back, one_back = 0, values[0]
    for value in values[1:]:
        two_back, one_back = one_back, max(value + two_back, one_back)
    return one_back