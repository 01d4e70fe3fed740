"""Fill a square grid with 1..n*n along an inward anticlockwise spiral."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum


class _Direction(Enum):
    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3


def _ring_offset(n: int, value: int) -> int:
    """How many rings in from the edge the walk is when placing ``value``."""
    remaining = n * n - value
    offset = 1
    for inner in range(n - 2, 0, -2):
        if remaining > inner * inner:
            break
        offset += 1
    return offset


def _step(col: int, row: int, direction: _Direction, n: int, value: int):
    offset = _ring_offset(n, value)
    if direction is _Direction.DOWN:
        row += 1
        if row == n - offset:
            direction = _Direction.LEFT
    elif direction is _Direction.LEFT:
        col -= 1
        if col == offset - 1:
            direction = _Direction.UP
    elif direction is _Direction.UP:
        row -= 1
        if row == offset - 1:
            direction = _Direction.RIGHT
    else:
        col += 1
        if col == n - offset:
            direction = _Direction.DOWN
    return col, row, direction


def spiral(n: int) -> list[list[int]]:
    """Return an n x n grid as rows, starting with 1 in the top-right corner."""
    if n < 0:
        raise ValueError("size must not be negative")
    grid = [[0] * n for _ in range(n)]
    col, row, direction = n - 1, 0, _Direction.DOWN
    for value in range(1, n * n + 1):
        grid[row][col] = value
        if value < n * n:
            col, row, direction = _step(col, row, direction, n, value + 1)
    return grid


def format_spiral(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid as zero-padded two-digit numbers, one row per line."""
    return "".join(
        "".join(f"{value:02d} " for value in row) + "\n" for row in grid
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        n = int(args[0])
        grid = spiral(n)
    except ValueError:
        return 1
    sys.stdout.write(format_spiral(grid))
    return 0