"""mazepath package initialization."""

from .grid import Cell, Maze, Point
from .pathfinding import MazePathfinder
from .search import AStarSearch, PriorityQueue, search

__version__ = "0.1.0"

__all__ = [
    "AStarSearch",
    "Cell",
    "Maze",
    "MazePathfinder",
    "Point",
    "PriorityQueue",
    "search",
]
