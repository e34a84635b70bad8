from __future__ import annotations

from collections.abc import Iterable

from .coords import Point

_ORTHOGONAL_DIRS = (
    (+1, 0),
    (-1, 0),
    (0, +1),
    (0, -1),
)

_DIAGONAL_DIRS = (
    (+1, +1),
    (+1, -1),
    (-1, +1),
    (-1, -1),
)


def neighbors_4(p: Point) -> Iterable[Point]:
    for d_row, d_col in _ORTHOGONAL_DIRS:
        yield p.offset(d_row, d_col)


def neighbors_8(p: Point) -> Iterable[Point]:
    yield from neighbors_4(p)
    for d_row, d_col in _DIAGONAL_DIRS:
        yield p.offset(d_row, d_col)


def neighbors_4_bounded(p: Point, rows: int, cols: int) -> Iterable[Point]:
    for n in neighbors_4(p):
        if 0 <= n.row < rows and 0 <= n.col < cols:
            yield n


def neighbors_8_bounded(p: Point, rows: int, cols: int) -> Iterable[Point]:
    for n in neighbors_8(p):
        if 0 <= n.row < rows and 0 <= n.col < cols:
            yield n
