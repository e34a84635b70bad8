from .astar import (
    AStarSearch,
    SearchNode,
    SearchResult,
    SearchState,
    SearchStats,
    TieBreak,
    astar,
    search,
    zero_heuristic,
)
from .errors import NegativeEdgeCostError, SearchBudgetExceeded
from .priority_queue import PriorityQueue

__all__ = [
    "AStarSearch",
    "NegativeEdgeCostError",
    "PriorityQueue",
    "SearchBudgetExceeded",
    "SearchNode",
    "SearchResult",
    "SearchState",
    "SearchStats",
    "TieBreak",
    "astar",
    "search",
    "zero_heuristic",
]
