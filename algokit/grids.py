"""Search and backtracking problems on two-dimensional grids."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_DIGITS = "123456789"


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest 4-connected island possible after turning at most
    one water cell (0) into land."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    height, width = len(grid), len(grid[0])
    labels = [[0] * width for _ in range(height)]
    sizes: dict[int, int] = {}

    def neighbours(r: int, c: int):
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                yield nr, nc

    for r, c in product(range(height), range(width)):
        if not grid[r][c] or labels[r][c]:
            continue
        label = len(sizes) + 1
        labels[r][c] = label
        stack = [(r, c)]
        size = 0
        while stack:
            cr, cc = stack.pop()
            size += 1
            for nr, nc in neighbours(cr, cc):
                if grid[nr][nc] and not labels[nr][nc]:
                    labels[nr][nc] = label
                    stack.append((nr, nc))
        sizes[label] = size

    best = max(sizes.values(), default=0)
    for r, c in product(range(height), range(width)):
        if grid[r][c]:
            continue
        touching = {labels[nr][nc] for nr, nc in neighbours(r, c) if labels[nr][nc]}
        best = max(best, 1 + sum(sizes[label] for label in touching))
    return best


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of *n* non-attacking queens on an n x n board.

    Each board is a list of rows drawn with 'Q' and '.'.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return solutions


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9 x 9 sudoku whose blanks are '.'.

    Raises ValueError for a malformed board or one with no solution.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 x 9")
    grid = [list(row) for row in board]
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    blanks: list[tuple[int, int]] = []
    for r, c in product(range(9), range(9)):
        cell = grid[r][c]
        if cell == ".":
            blanks.append((r, c))
        elif cell in _DIGITS and len(cell) == 1:
            rows[r].add(cell)
            cols[c].add(cell)
            boxes[r // 3 * 3 + c // 3].add(cell)
        else:
            raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")

    def fill(index: int) -> bool:
        if index == len(blanks):
            return True
        r, c = blanks[index]
        box = boxes[r // 3 * 3 + c // 3]
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in box:
                continue
            grid[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            box.add(digit)
            if fill(index + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            box.discard(digit)
            grid[r][c] = "."
        return False

    if not fill(0):
        raise ValueError("board has no solution")
    return grid