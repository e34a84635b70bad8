from .coords import Point
from .heuristics import chebyshev, manhattan, octile
from .maze import Cell, Maze
from .neighbors import (
    neighbors_4,
    neighbors_4_bounded,
    neighbors_8,
    neighbors_8_bounded,
)

__all__ = [
    "Cell",
    "Maze",
    "Point",
    "chebyshev",
    "manhattan",
    "neighbors_4",
    "neighbors_4_bounded",
    "neighbors_8",
    "neighbors_8_bounded",
    "octile",
]
