"""Small matrix exercises: sums, products and triangle marking."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = Sequence[Sequence[Any]]


def row_sums(matrix: Matrix) -> list:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list:
    """Return the sum of each column."""
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("rows have different lengths")
    return [sum(column) for column in zip(*matrix)]


def best_index(values: Sequence) -> int:
    """Return the index of the first largest value."""
    if not values:
        raise ValueError("no values to compare")
    best = 0
    for index, value in enumerate(values):
        if value > values[best]:
            best = index
    return best


def multiply(left: Matrix, right: Matrix) -> list[list]:
    """Return the matrix product of ``left`` and ``right``."""
    inner = len(right)
    if any(len(row) != inner for row in left):
        raise ValueError("columns of the first matrix must equal rows of the second")
    if len({len(row) for row in right}) > 1:
        raise ValueError("rows of the second matrix have different lengths")
    columns = list(zip(*right))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in left
    ]


def _require_square(matrix: Matrix) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")


def mark_upper(matrix: Matrix, symbol: Any = "*") -> list[list]:
    """Return a copy with every entry above the diagonal replaced by ``symbol``."""
    _require_square(matrix)
    return [
        [symbol if col > row else value for col, value in enumerate(values)]
        for row, values in enumerate(matrix)
    ]


def mark_lower(matrix: Matrix, symbol: Any = "#") -> list[list]:
    """Return a copy with every entry below the diagonal replaced by ``symbol``."""
    _require_square(matrix)
    return [
        [symbol if col < row else value for col, value in enumerate(values)]
        for row, values in enumerate(matrix)
    ]