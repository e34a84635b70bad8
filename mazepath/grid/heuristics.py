from __future__ import annotations

import math

from .coords import Point

_DIAGONAL_EXTRA = math.sqrt(2) - 1.0


def manhattan(a: Point, b: Point) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def chebyshev(a: Point, b: Point) -> int:
    return max(abs(a.row - b.row), abs(a.col - b.col))


def octile(a: Point, b: Point) -> float:
    # Exact distance on an open 8-connected grid with sqrt(2) diagonals.
    d_row = abs(a.row - b.row)
    d_col = abs(a.col - b.col)
    return max(d_row, d_col) + _DIAGONAL_EXTRA * min(d_row, d_col)
