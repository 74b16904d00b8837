"""Generators of combinatorial structures: queen placements, trees, Pascal rows."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Queens are placed column by column, trying rows from top to bottom; each
    board is a list of row strings of ``'Q'`` and ``'.'``.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(
                ["".join("Q" if r == row else "." for r in rows_by_column) for row in range(n)]
            )
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            rows_by_column.append(row)
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            place(col + 1)
            rows_by_column.pop()
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return solutions


def _trees(start: int, end: int) -> list[Optional[TreeNode]]:
    if start > end:
        return [None]
    return [
        TreeNode(root, left, right)
        for root in range(start, end + 1)
        for left in _trees(start, root - 1)
        for right in _trees(root + 1, end)
    ]


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally distinct binary search tree holding 1..n."""
    return _trees(1, n)


def _pascal_rows() -> Iterator[list[int]]:
    row = [1]
    while True:
        yield row
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    return list(islice(_pascal_rows(), num_rows))


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    return next(islice(_pascal_rows(), row_index, None))