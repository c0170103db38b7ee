"""Drills on rectangular matrices given as sequences of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = Sequence[Sequence[Any]]


def _require_rectangular(matrix: Matrix) -> None:
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("all rows must have the same length")


def rotate_image(matrix: Matrix) -> list[list[Any]]:
    """The matrix turned a quarter turn clockwise."""
    _require_rectangular(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix: Matrix) -> list[Any]:
    """Elements read clockwise in a spiral from the top-left corner."""
    _require_rectangular(matrix)
    if not matrix:
        return []
    total = len(matrix) * len(matrix[0])
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[Any] = []
    while len(result) < total:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
        bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
        left += 1
    return result[:total]


def wave_order(matrix: Matrix) -> list[Any]:
    """Elements read column by column, down the even columns and up the odd ones."""
    _require_rectangular(matrix)
    result: list[Any] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(column if index % 2 == 0 else reversed(column))
    return result


def row_sums(matrix: Matrix) -> list[Any]:
    """Sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[Any]:
    """Sum of each column."""
    _require_rectangular(matrix)
    return [sum(column) for column in zip(*matrix)]


def total_sum(matrix: Matrix) -> Any:
    """Sum of every element."""
    return sum(sum(row) for row in matrix)


def largest_row_sum(matrix: Matrix) -> tuple[int, Any]:
    """``(index, sum)`` of the row with the largest sum; the first one on ties."""
    if not matrix:
        raise ValueError("an empty matrix has no rows")
    sums = row_sums(matrix)
    best = max(range(len(sums)), key=sums.__getitem__)
    return best, sums[best]


def format_matrix(matrix: Matrix) -> str:
    """Rows as lines of space-separated values, each line ending in a newline."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in matrix)