"""Dense matrix operations on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from numbers import Rational

Matrix = Sequence[Sequence[int]]


def _width(matrix: Matrix) -> int:
    """Return the column count of *matrix*, rejecting ragged rows."""
    if not matrix:
        return 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows must have the same length")
    return width


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product of *a* and *b*."""
    inner = _width(a)
    width = _width(b)
    if inner != len(b):
        raise ValueError(
            f"cannot multiply a matrix with {inner} columns by one with {len(b)} rows"
        )
    columns = list(zip(*b)) if b else [()] * width
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def staircase_search(matrix: Matrix, target: int) -> bool:
    """Return whether *target* is in a matrix whose rows and columns ascend.

    The search starts at the top-right corner and moves left or down.
    """
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def rank(matrix: Matrix) -> int:
    """Return the rank of *matrix*, computed exactly by row reduction."""
    width = _width(matrix)
    rows = [
        [Fraction(value) if isinstance(value, (Rational, float)) else Fraction(str(value))
         for value in row]
        for row in matrix
    ]
    pivots = 0
    for col in range(width):
        if pivots == len(rows):
            break
        pivot = next((i for i in range(pivots, len(rows)) if rows[i][col]), None)
        if pivot is None:
            continue
        rows[pivots], rows[pivot] = rows[pivot], rows[pivots]
        lead = rows[pivots]
        for i, row in enumerate(rows):
            if i != pivots and row[col]:
                factor = row[col] / lead[col]
                rows[i] = [x - factor * y for x, y in zip(row, lead)]
        pivots += 1
    return pivots


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements of *matrix* read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    height, width = len(matrix), _width(matrix)
    seen: set[tuple[int, int]] = set()
    result: list[int] = []
    x = y = 0
    dx, dy = 0, 1
    for _ in range(height * width):
        result.append(matrix[x][y])
        seen.add((x, y))
        nx, ny = x + dx, y + dy
        if not (0 <= nx < height and 0 <= ny < width) or (nx, ny) in seen:
            dx, dy = dy, -dx
            nx, ny = x + dx, y + dy
        x, y = nx, ny
    return result


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of *matrix*."""
    _width(matrix)
    return [list(column) for column in zip(*matrix)]