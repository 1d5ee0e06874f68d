"""Board searches: N-queens, sudoku, maze paths and grid word search."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_DIGITS = "123456789"
_EMPTY = "."
# Moves tried from the maze exit, in this order.
_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _queen_placements(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the row of the queen in each column, columns filled left to right."""
    rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    chosen: list[int] = []

    def walk(col: int) -> Iterator[tuple[int, ...]]:
        if col == n:
            yield tuple(chosen)
            return
        for row in range(n):
            if row in rows or row + col in rising or col - row in falling:
                continue
            rows.add(row)
            rising.add(row + col)
            falling.add(col - row)
            chosen.append(row)
            yield from walk(col + 1)
            chosen.pop()
            rows.discard(row)
            rising.discard(row + col)
            falling.discard(col - row)

    return walk(0)


def _check_queens(n: int) -> None:
    if n < 1:
        raise ValueError(f"board size must be at least 1, got {n}")


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, drawn as rows of 'Q' and '.'."""
    _check_queens(n)
    boards = []
    for placement in _queen_placements(n):
        column_of_row = {row: col for col, row in enumerate(placement)}
        boards.append(
            ["." * column_of_row[row] + "Q" + "." * (n - column_of_row[row] - 1) for row in range(n)]
        )
    return boards


def total_n_queens(n: int) -> int:
    """Return how many ways n non-attacking queens fit on an n by n board."""
    _check_queens(n)
    return sum(1 for _ in _queen_placements(n))


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the '.' cells of a 9x9 board in place; return whether a solution was found.

    When no solution exists the board is left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")

    empties = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == _EMPTY]

    def allowed(r: int, c: int, digit: str) -> bool:
        top, left = 3 * (r // 3), 3 * (c // 3)
        return (
            digit not in board[r]
            and all(row[c] != digit for row in board)
            and all(
                board[top + dr][left + dc] != digit for dr in range(3) for dc in range(3)
            )
        )

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        for digit in _DIGITS:
            if allowed(r, c, digit):
                board[r][c] = digit
                if fill(position + 1):
                    return True
                board[r][c] = _EMPTY
        return False

    return fill(0)


def find_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return the routes through a square maze of open (1) and closed cells.

    The search walks back from the bottom-right exit to the top-left entrance,
    trying the moves D, L, R, U in that order; each route is that walk's move
    letters listed from the entrance end.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("the maze must be a non-empty square grid")
    if grid[0][0] == 0 or grid[n - 1][n - 1] == 0:
        return []

    visited: set[tuple[int, int]] = set()

    def walk(row: int, col: int, moves: str) -> Iterator[str]:
        if row == 0 and col == 0:
            yield moves[::-1]
            return
        visited.add((row, col))
        for letter, dr, dc in _MAZE_MOVES:
            r, c = row + dr, col + dc
            if 0 <= r < n and 0 <= c < n and (r, c) not in visited and grid[r][c] == 1:
                yield from walk(r, c, moves + letter)
        visited.discard((row, col))

    return list(walk(n - 1, n - 1, ""))


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be traced through edge-adjacent cells, each used once."""
    if not word or not board:
        return False
    used: set[tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < len(board) and 0 <= c < len(board[r])):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(trace(r + dr, c + dc, index + 1) for dr, dc in _STEPS)
        used.discard((r, c))
        return found

    return any(
        trace(r, c, 0)
        for r, row in enumerate(board)
        for c, cell in enumerate(row)
        if cell == word[0]
    )