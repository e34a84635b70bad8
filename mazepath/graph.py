"""networkx adapters for running the search engine over explicit graphs."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeAlias

import networkx as nx

from .grid import Maze

if TYPE_CHECKING:  # pragma: no cover - typing only
    AnyGraph: TypeAlias = nx.Graph[Any]
else:  # pragma: no cover - runtime alias without subscripting
    AnyGraph: TypeAlias = nx.Graph


def graph_successors(
    graph: AnyGraph, *, weight: str = "weight", default: float = 1.0
) -> Callable[[Hashable], Iterable[tuple[Hashable, float]]]:
    """Return a successor callback reading edges and weights from ``graph``.

    Directed graphs follow out-edges only. Multigraphs yield one pair per
    parallel edge and the search keeps the cheapest.
    """

    def successors(node: Hashable) -> Iterable[tuple[Hashable, float]]:
        if graph.is_multigraph():
            for _, target, data in graph.edges(node, data=True):
                yield target, float(data.get(weight, default))
            return
        for target, data in graph.adj[node].items():
            yield target, float(data.get(weight, default))

    return successors


def maze_graph(maze: Maze) -> AnyGraph:
    """Return a weighted graph with one node per open cell of ``maze``."""

    graph: AnyGraph = nx.Graph()
    for p in maze.open_cells():
        graph.add_node(p)
    for p in maze.open_cells():
        for n, cost in maze.successors(p):
            graph.add_edge(p, n, weight=cost)
    return graph


def path_cost(graph: AnyGraph, path: Sequence[Hashable], *, weight: str = "weight") -> float:
    """Return the total cost of ``path``, using the cheapest parallel edge."""

    if len(path) < 2:
        return 0.0
    total = 0.0
    for origin, destination in zip(path, path[1:]):
        data = graph.get_edge_data(origin, destination)
        if data is None:
            raise ValueError(f"no edge between {origin!r} and {destination!r}")
        if graph.is_multigraph():
            total += min(float(attrs.get(weight, 1.0)) for attrs in data.values())
        else:
            total += float(data.get(weight, 1.0))
    return total


__all__ = ["graph_successors", "maze_graph", "path_cost"]
