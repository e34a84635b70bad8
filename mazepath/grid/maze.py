"""Rectangular maze of open and blocked cells.

The maze only knows about rows, columns and walls. Searching is delegated
to :mod:`mazepath.search` through successor, goal and heuristic callables
built here, so the engine never sees grid details.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from enum import Enum

from ..config import MazeSettings, SearchSettings
from ..rng import MazeRandomness
from ..search import AStarSearch, SearchResult
from .coords import Point
from .heuristics import manhattan, octile
from .neighbors import neighbors_4_bounded, neighbors_8_bounded

_DIAGONAL_COST = math.sqrt(2)


class Cell(str, Enum):
    """State of a single maze location."""

    EMPTY = "."
    BLOCKED = "#"
    START = "S"
    GOAL = "G"
    PATH = "*"


_PARSE_TABLE = {cell.value: cell for cell in Cell}


class Maze:
    """Grid of :class:`Cell` values addressed by :class:`Point`.

    ``version`` increases whenever walls change so callers can key caches
    on it.
    """

    def __init__(self, cells: Sequence[Sequence[Cell]], *, diagonal: bool = False) -> None:
        if not cells or not cells[0]:
            raise ValueError("maze must have at least one row and one column")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("maze rows must all have the same length")
        self._cells: list[list[Cell]] = [list(row) for row in cells]
        self.rows = len(self._cells)
        self.cols = width
        self._diagonal = diagonal
        self.version = 0

    # --------- Construction ---------

    @classmethod
    def empty(cls, rows: int, cols: int, *, diagonal: bool = False) -> Maze:
        return cls([[Cell.EMPTY] * cols for _ in range(rows)], diagonal=diagonal)

    @classmethod
    def random(cls, settings: MazeSettings, randomness: MazeRandomness) -> Maze:
        """Block each cell independently with ``settings.blocked_probability``."""

        rng = randomness.generator()
        draws = rng.random((settings.rows, settings.cols))
        cells = [
            [Cell.BLOCKED if value < settings.blocked_probability else Cell.EMPTY for value in row]
            for row in draws
        ]
        return cls(cells, diagonal=settings.diagonal)

    @classmethod
    def from_strings(cls, lines: Iterable[str], *, diagonal: bool = False) -> Maze:
        """Parse rows like ``"..#."``; only ``#`` counts as a wall."""

        cells: list[list[Cell]] = []
        for row_index, line in enumerate(lines):
            row: list[Cell] = []
            for col_index, char in enumerate(line.strip()):
                cell = _PARSE_TABLE.get(char)
                if cell is None:
                    raise ValueError(
                        f"unknown maze character {char!r} at row {row_index}, col {col_index}"
                    )
                row.append(Cell.BLOCKED if cell is Cell.BLOCKED else Cell.EMPTY)
            if row:
                cells.append(row)
        return cls(cells, diagonal=diagonal)

    def to_strings(self) -> list[str]:
        return ["".join(cell.value for cell in row) for row in self._cells]

    def copy(self) -> Maze:
        clone = type(self)(self._cells, diagonal=self.diagonal)
        clone.version = self.version
        return clone

    # --------- Queries ---------

    @property
    def diagonal(self) -> bool:
        """Fixed at construction; it decides successors and the heuristic."""

        return self._diagonal

    def __getitem__(self, p: Point) -> Cell:
        self._require_in_bounds(p)
        return self._cells[p.row][p.col]

    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.row < self.rows and 0 <= p.col < self.cols

    def is_blocked(self, p: Point) -> bool:
        return self[p] is Cell.BLOCKED

    def is_open(self, p: Point) -> bool:
        return self.in_bounds(p) and not self.is_blocked(p)

    def open_cells(self) -> Iterator[Point]:
        for row in range(self.rows):
            for col in range(self.cols):
                p = Point(row, col)
                if not self.is_blocked(p):
                    yield p

    def set_blocked(self, p: Point, blocked: bool = True) -> None:
        self._require_in_bounds(p)
        cell = Cell.BLOCKED if blocked else Cell.EMPTY
        if self._cells[p.row][p.col] is not cell:
            self._cells[p.row][p.col] = cell
            self.version += 1

    # --------- Search callbacks ---------

    def successors(self, p: Point) -> list[tuple[Point, float]]:
        """Open neighbours of ``p`` with their step cost.

        Orthogonal steps cost 1. With ``diagonal`` enabled, diagonal steps
        cost sqrt(2) and may not cut a blocked corner.
        """

        out: list[tuple[Point, float]] = []
        if not self.diagonal:
            for n in neighbors_4_bounded(p, self.rows, self.cols):
                if not self.is_blocked(n):
                    out.append((n, 1.0))
            return out

        for n in neighbors_8_bounded(p, self.rows, self.cols):
            if self.is_blocked(n):
                continue
            if n.row != p.row and n.col != p.col:
                if self.is_blocked(Point(p.row, n.col)) or self.is_blocked(Point(n.row, p.col)):
                    continue
                out.append((n, _DIAGONAL_COST))
            else:
                out.append((n, 1.0))
        return out

    def heuristic_to(self, goal: Point) -> Callable[[Point], float]:
        if self.diagonal:
            return lambda p: octile(p, goal)
        return lambda p: float(manhattan(p, goal))

    @staticmethod
    def goal_test(goal: Point) -> Callable[[Point], bool]:
        return lambda p: p == goal

    def solve(
        self,
        start: Point,
        goal: Point,
        settings: SearchSettings | None = None,
    ) -> SearchResult[Point]:
        """Search for a cheapest path between two open cells."""

        self._require_open(start, "start")
        self._require_open(goal, "goal")
        settings = settings or SearchSettings()
        engine = AStarSearch(
            start,
            self.goal_test(goal),
            self.successors,
            self.heuristic_to(goal),
            tie_break=settings.tie_break,
            check_edge_costs=settings.check_edge_costs,
        )
        return engine.run(max_expansions=settings.max_expansions)

    def marked(self, path: Sequence[Point], start: Point, goal: Point) -> Maze:
        """Return a copy with the path, start and goal cells labelled."""

        for p in (*path, start, goal):
            self._require_in_bounds(p)
        clone = self.copy()
        for p in path:
            clone._cells[p.row][p.col] = Cell.PATH
        clone._cells[start.row][start.col] = Cell.START
        clone._cells[goal.row][goal.col] = Cell.GOAL
        return clone

    # --------- Internal helpers ---------

    def _require_in_bounds(self, p: Point) -> None:
        if not self.in_bounds(p):
            raise ValueError(f"{p!r} is outside the {self.rows}x{self.cols} maze")

    def _require_open(self, p: Point, label: str) -> None:
        self._require_in_bounds(p)
        if self.is_blocked(p):
            raise ValueError(f"{label} {p!r} is blocked")


__all__ = ["Cell", "Maze"]
