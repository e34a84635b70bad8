from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Point:
        return Point(self.row + d_row, self.col + d_col)
