from __future__ import annotations

import logging
import math
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import NegativeEdgeCostError, SearchBudgetExceeded
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

GoalTest = Callable[[N], bool]
Successors = Callable[[N], Iterable[tuple[N, float]]]
Heuristic = Callable[[N], float]


class SearchState(str, Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TieBreak(str, Enum):
    """How frontier entries with equal ``f`` are ordered.

    Both policies fall back to insertion order, so path choice is
    reproducible for a fixed input.
    """

    HEURISTIC = "heuristic"  # lower h first, then first pushed
    INSERTION = "insertion"  # first pushed


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode(Generic[N]):
    node: N
    g: float
    h: float
    parent: SearchNode[N] | None = None

    @property
    def f(self) -> float:
        return self.g + self.h

    def path(self) -> list[N]:
        """Follow parent links back to the root and return the nodes in order."""

        out: list[N] = []
        current: SearchNode[N] | None = self
        while current is not None:
            out.append(current.node)
            current = current.parent
        out.reverse()
        return out


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    stale: int = 0


@dataclass
class SearchResult(Generic[N]):
    state: SearchState
    path: list[N] | None
    cost: float
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.state is SearchState.SUCCEEDED

    @property
    def expanded(self) -> int:
        return self.stats.expanded

    @property
    def generated(self) -> int:
        return self.stats.generated


def zero_heuristic(node: Any) -> float:
    """Admissible everywhere; reduces A* to uniform-cost search."""

    return 0.0


class AStarSearch(Generic[N]):
    """Best-first search from ``start`` to any node passing ``goal_test``.

    Stale frontier entries are discarded when popped instead of being
    updated in place: a cheaper route to a node already on the frontier
    simply pushes a second entry, and whichever copy pops later is skipped
    once the node has been finalized with an equal or lower ``g``.

    The search can be advanced one expansion at a time with :meth:`step`
    or driven to completion with :meth:`run`.
    """

    def __init__(
        self,
        start: N,
        goal_test: GoalTest[N],
        successors: Successors[N],
        heuristic: Heuristic[N] = zero_heuristic,
        *,
        tie_break: TieBreak = TieBreak.HEURISTIC,
        check_edge_costs: bool = True,
    ) -> None:
        self.start = start
        self._goal_test = goal_test
        self._successors = successors
        self._heuristic = heuristic
        self._tie_break = TieBreak(tie_break)
        self._check_edge_costs = check_edge_costs

        self.state = SearchState.RUNNING
        self.stats = SearchStats()
        self.visited: dict[N, float] = {}
        self.frontier: PriorityQueue[SearchNode[N]] = PriorityQueue()
        self._goal: SearchNode[N] | None = None

        self._push(SearchNode(start, 0.0, self._estimate(start)))

    # --------- Public API ---------

    @property
    def goal(self) -> SearchNode[N] | None:
        return self._goal

    def step(self) -> SearchState:
        """Pop one frontier entry and expand it unless it is stale or a goal."""

        if self.state is not SearchState.RUNNING:
            return self.state

        current = self.frontier.pop()
        if current is None:
            self.state = SearchState.FAILED
            return self.state

        if self._goal_test(current.node):
            self._goal = current
            self.state = SearchState.SUCCEEDED
            return self.state

        best = self.visited.get(current.node)
        if best is not None and best <= current.g:
            self.stats.stale += 1
            return self.state

        self.visited[current.node] = current.g
        self.stats.expanded += 1
        for nxt, edge_cost in self._successors(current.node):
            edge_cost = float(edge_cost)
            if self._check_edge_costs and edge_cost < 0:
                raise NegativeEdgeCostError(current.node, nxt, edge_cost)
            tentative = current.g + edge_cost
            seen = self.visited.get(nxt)
            if seen is None or seen > tentative:
                self._push(SearchNode(nxt, tentative, self._estimate(nxt), current))

        if self.frontier.is_empty():
            self.state = SearchState.FAILED
        return self.state

    def run(self, max_expansions: int | None = None) -> SearchResult[N]:
        """Run until the search succeeds or fails.

        With ``max_expansions`` set, :class:`SearchBudgetExceeded` is raised
        once that many nodes have been expanded in total; the search stays
        ``RUNNING`` and a later call continues where it stopped.
        """

        while self.state is SearchState.RUNNING:
            if max_expansions is not None and self.stats.expanded >= max_expansions:
                logger.warning(
                    "search from %r hit expansion cap %d", self.start, max_expansions
                )
                raise SearchBudgetExceeded(self.stats.expanded)
            self.step()

        result = self.result()
        logger.debug(
            "search from %r %s: cost=%s expanded=%d generated=%d stale=%d",
            self.start,
            result.state.value,
            result.cost,
            self.stats.expanded,
            self.stats.generated,
            self.stats.stale,
        )
        return result

    def result(self) -> SearchResult[N]:
        if self._goal is None:
            return SearchResult(self.state, None, math.inf, self.stats)
        return SearchResult(self.state, self._goal.path(), self._goal.g, self.stats)

    # --------- Internal helpers ---------

    def _estimate(self, node: N) -> float:
        h = float(self._heuristic(node))
        if h < 0:
            raise ValueError(f"heuristic returned negative estimate {h!r} for {node!r}")
        return h

    def _push(self, entry: SearchNode[N]) -> None:
        if self._tie_break is TieBreak.HEURISTIC:
            priority: tuple[float, ...] = (entry.f, entry.h)
        else:
            priority = (entry.f,)
        self.frontier.push(entry, priority)
        self.stats.generated += 1


def search(
    start: N,
    goal_test: GoalTest[N],
    successors: Successors[N],
    heuristic: Heuristic[N] = zero_heuristic,
    *,
    tie_break: TieBreak = TieBreak.HEURISTIC,
) -> list[N] | None:
    """Return a cheapest path from ``start`` to a goal node, or ``None``.

    ``successors`` yields ``(node, edge_cost)`` pairs with non-negative
    costs. The path is optimal whenever ``heuristic`` never overestimates
    the remaining cost.
    """

    return AStarSearch(
        start, goal_test, successors, heuristic, tie_break=tie_break
    ).run().path


def astar(
    start: N,
    goal: N,
    successors: Successors[N],
    heuristic: Callable[[N, N], float],
) -> tuple[list[N] | None, float]:
    """Single-goal convenience wrapper returning ``(path, cost)``.

    ``heuristic`` takes ``(node, goal)``; ``(None, inf)`` means no path.
    """

    result = AStarSearch(
        start,
        lambda node: node == goal,
        successors,
        lambda node: heuristic(node, goal),
    ).run()
    return result.path, result.cost


__all__ = [
    "AStarSearch",
    "SearchNode",
    "SearchResult",
    "SearchState",
    "SearchStats",
    "TieBreak",
    "astar",
    "search",
    "zero_heuristic",
]
