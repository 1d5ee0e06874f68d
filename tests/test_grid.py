import math

import pytest

from algokit.grid import (
    min_falling_path_sum,
    min_path_sum,
    minimum_total,
    ninja_training,
    unique_paths,
    unique_paths_with_obstacles,
)

SQUARES = [
    [[2, 1, 3], [6, 5, 4], [7, 8, 9]],
    [[-19, 57], [-40, -5]],
    [[1, 2, 3, 4], [4, 3, 2, 1], [1, 1, 1, 1], [9, 0, 9, 0]],
]


def test_min_falling_path_single_cell():
    assert min_falling_path_sum([[-8]]) == -8


@pytest.mark.parametrize("size,value", [(1, 4), (3, 2), (5, -1)])
def test_min_falling_path_constant_matrix(size, value):
    matrix = [[value] * size for _ in range(size)]
    assert min_falling_path_sum(matrix) == size * value


@pytest.mark.parametrize("matrix", SQUARES)
def test_min_falling_path_bounds(matrix):
    result = min_falling_path_sum(matrix)
    assert result >= sum(min(row) for row in matrix)
    for col in range(len(matrix)):
        assert result <= sum(row[col] for row in matrix)


def test_min_falling_path_rejects_non_square():
    with pytest.raises(ValueError):
        min_falling_path_sum([[1, 2, 3], [4, 5, 6]])


def test_min_falling_path_rejects_empty():
    with pytest.raises(ValueError):
        min_falling_path_sum([])


def test_min_path_sum_single_cell():
    assert min_path_sum([[5]]) == 5


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4), (5, 2)])
def test_min_path_sum_ones(rows, cols):
    grid = [[1] * cols for _ in range(rows)]
    assert min_path_sum(grid) == rows + cols - 1


def test_min_path_sum_single_row_and_column():
    assert min_path_sum([[3, 1, 4, 1, 5]]) == 3 + 1 + 4 + 1 + 5
    assert min_path_sum([[3], [1], [4]]) == 3 + 1 + 4


@pytest.mark.parametrize("grid", [[[1, 3, 1], [1, 5, 1], [4, 2, 1]], [[1, 2, 3], [4, 5, 6]]])
def test_min_path_sum_bounded_by_border_paths(grid):
    result = min_path_sum(grid)
    along_top = sum(grid[0]) + sum(row[-1] for row in grid[1:])
    along_left = sum(row[0] for row in grid) + sum(grid[-1][1:])
    assert result <= min(along_top, along_left)
    assert result >= grid[0][0] + grid[-1][-1]


def test_min_path_sum_rejects_empty():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_ninja_training_single_day_takes_best_task():
    assert ninja_training([[10, 40, 70]]) == 70


@pytest.mark.parametrize("days,score", [(1, 5), (4, 5), (7, 2)])
def test_ninja_training_equal_scores(days, score):
    assert ninja_training([[score] * 3 for _ in range(days)]) == days * score


@pytest.mark.parametrize(
    "points",
    [
        [[10, 40, 70], [20, 50, 80], [30, 60, 90]],
        [[1, 2, 5], [3, 1, 1], [3, 3, 3]],
        [[18, 11, 19], [4, 13, 7], [1, 8, 13]],
    ],
)
def test_ninja_training_bounds(points):
    result = ninja_training(points)
    assert result <= sum(max(day) for day in points)
    assert result >= sum(min(day) for day in points)


def test_ninja_training_avoids_repeating_best_task():
    points = [[0, 0, 9], [0, 0, 9]]
    assert ninja_training(points) == 9


def test_ninja_training_rejects_empty():
    with pytest.raises(ValueError):
        ninja_training([])


def test_ninja_training_rejects_wrong_width():
    with pytest.raises(ValueError):
        ninja_training([[1, 2]])


def test_minimum_total_single_row():
    assert minimum_total([[-10]]) == -10


@pytest.mark.parametrize("depth", [1, 2, 5, 8])
def test_minimum_total_ones(depth):
    triangle = [[1] * (i + 1) for i in range(depth)]
    assert minimum_total(triangle) == depth


@pytest.mark.parametrize(
    "triangle",
    [[[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]], [[1], [2, 3]], [[5], [-1, 9], [7, 2, -4]]],
)
def test_minimum_total_bounds(triangle):
    result = minimum_total(triangle)
    assert result >= sum(min(row) for row in triangle)
    assert result <= sum(row[0] for row in triangle)
    assert result <= sum(row[-1] for row in triangle)


def test_minimum_total_rejects_empty():
    with pytest.raises(ValueError):
        minimum_total([])


def test_minimum_total_rejects_malformed_rows():
    with pytest.raises(ValueError):
        minimum_total([[1], [2, 3, 4]])


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


@pytest.mark.parametrize("m,n", [(1, 1), (2, 2), (3, 2), (5, 9), (10, 10)])
def test_unique_paths_binomial(m, n):
    assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)


@pytest.mark.parametrize("m,n", [(2, 5), (4, 7), (6, 3)])
def test_unique_paths_symmetric(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)


@pytest.mark.parametrize("k", [1, 4, 12])
def test_unique_paths_single_line(k):
    assert unique_paths(1, k) == 1
    assert unique_paths(k, 1) == 1


@pytest.mark.parametrize("m,n", [(0, 3), (3, 0), (-1, 2)])
def test_unique_paths_rejects_bad_sizes(m, n):
    with pytest.raises(ValueError):
        unique_paths(m, n)


def test_obstacles_example():
    assert unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 2


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4), (3, 6)])
def test_obstacles_free_grid_matches_unique_paths(rows, cols):
    grid = [[0] * cols for _ in range(rows)]
    assert unique_paths_with_obstacles(grid) == unique_paths(rows, cols)


def test_obstacles_blocked_start_or_end():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_obstacles_blocking_wall():
    grid = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    assert unique_paths_with_obstacles(grid) == 0


def test_obstacles_never_exceed_free_count():
    grid = [[0, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 0, 0]]
    result = unique_paths_with_obstacles(grid)
    assert 0 < result < unique_paths(4, 4)


def test_obstacles_rejects_empty():
    with pytest.raises(ValueError):
        unique_paths_with_obstacles([])