"""
Maze pathfinding facade.

Primary goals:
- Wrap the generic search engine with maze-specific callbacks.
- Cache results per (start, goal, maze version) so repeated queries are free
  until walls change.
- Keep the last full search result around for callers that report on it.

Usage:
    maze = Maze.random(config.maze, config.randomness.factory())
    pf = MazePathfinder(maze, config.search)
    path = pf.path(Point(0, 0), Point(19, 19))
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .config import SearchSettings
from .grid import Maze, Point
from .search import SearchResult

logger = logging.getLogger(__name__)


class MazePathfinder:
    """
    Cached pathfinding over a single :class:`~mazepath.grid.Maze`.

    The maze ``version`` is part of every cache key, so blocking or opening
    a cell invalidates earlier answers without an explicit call; the next
    solve after such a change discards them.
    """

    def __init__(self, maze: Maze, settings: SearchSettings | None = None) -> None:
        self.maze = maze
        self.settings = settings or SearchSettings()
        self._cache: Dict[Tuple[Point, Point, int], SearchResult[Point]] = {}
        self._cache_version = maze.version
        self.last_result: SearchResult[Point] | None = None

    # --------- Public API ---------

    def path(self, start: Point, goal: Point) -> List[Point] | None:
        """
        Compute a path from start to goal. Returns a list of points or None.
        """
        return self.solve(start, goal).path

    def solve(self, start: Point, goal: Point) -> SearchResult[Point]:
        if self.maze.version != self._cache_version:
            self._cache.clear()
            self._cache_version = self.maze.version
        key = (start, goal, self.maze.version)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("path cache hit for %r -> %r", start, goal)
            self.last_result = cached
            return cached

        result = self.maze.solve(start, goal, self.settings)
        self._cache[key] = result
        self.last_result = result
        return result

    def invalidate(self) -> None:
        """
        Clear the internal path cache. Entries for older maze versions are
        dropped automatically on the next solve.
        """
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)
