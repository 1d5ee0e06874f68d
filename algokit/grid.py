"""Grid and table dynamic programming: path sums, path counts and training schedules."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

_TASKS = 3


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a path falling from the top row to the bottom.

    Each step goes to the cell directly below or diagonally below it.
    """
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be a non-empty square grid")
    below = list(matrix[-1])
    for row in reversed(matrix[:-1]):
        below = [
            value + min(below[max(col - 1, 0) : col + 2]) for col, value in enumerate(row)
        ]
    return min(below)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a path from top-left to bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    above: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for col, value in enumerate(row):
            options = []
            if above is not None:
                options.append(above[col])
            if current:
                options.append(current[-1])
            current.append(value + min(options) if options else value)
        above = current
    return above[-1]


def ninja_training(points: Sequence[Sequence[int]]) -> int:
    """Return the most points over all days, never doing the same task two days running.

    Each day offers three tasks with the points listed for that day.
    """
    if not points:
        raise ValueError("points must cover at least one day")
    if any(len(day) != _TASKS for day in points):
        raise ValueError(f"each day must list exactly {_TASKS} task scores")
    first = points[0]
    # best[last] is the best total when task `last` may not be chosen next (3: none barred).
    best = [
        max(score for task, score in enumerate(first) if task != last)
        for last in range(_TASKS + 1)
    ]
    for day in points[1:]:
        best = [
            max(day[task] + best[task] for task in range(_TASKS) if task != last)
            for last in range(_TASKS + 1)
        ]
    return best[_TASKS]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum of a triangle of numbers."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    if any(len(row) != depth + 1 for depth, row in enumerate(triangle)):
        raise ValueError("row i of the triangle must hold i + 1 numbers")
    below = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        below = [value + min(below[j], below[j + 1]) for j, value in enumerate(row)]
    return below[0]


def unique_paths(m: int, n: int) -> int:
    """Return how many right/down paths cross an m by n grid corner to corner."""
    if m < 1 or n < 1:
        raise ValueError(f"grid dimensions must be positive, got {m}x{n}")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return how many right/down paths cross the grid avoiding cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    above = [0] * len(grid[0])
    for r, row in enumerate(grid):
        current: list[int] = []
        for c, cell in enumerate(row):
            if cell == 1:
                count = 0
            elif r == 0 and c == 0:
                count = 1
            else:
                count = above[c] + (current[-1] if current else 0)
            current.append(count)
        above = current
    return above[-1]