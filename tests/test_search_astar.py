import math

import networkx as nx
import pytest

from mazepath.graph import graph_successors, path_cost
from mazepath.grid import Maze, Point, manhattan
from mazepath.search import (
    AStarSearch,
    NegativeEdgeCostError,
    SearchBudgetExceeded,
    SearchState,
    TieBreak,
    astar,
    search,
    zero_heuristic,
)


def _grid_callbacks(maze: Maze, goal: Point):
    return (
        lambda p: p == goal,
        maze.successors,
        lambda p: float(manhattan(p, goal)),
    )


def _assert_valid_path(path, start, goal_test, successors):
    assert path[0] == start
    assert goal_test(path[-1])
    for a, b in zip(path, path[1:]):
        assert b in {n for n, _ in successors(a)}


def test_open_grid_corner_to_corner_costs_four():
    maze = Maze.empty(3, 3)
    start, goal = Point(0, 0), Point(2, 2)
    goal_test, successors, heuristic = _grid_callbacks(maze, goal)

    path = search(start, goal_test, successors, heuristic)

    assert path is not None
    assert len(path) - 1 == 4
    _assert_valid_path(path, start, goal_test, successors)
    # Every step must move closer on an open grid.
    for a, b in zip(path, path[1:]):
        assert manhattan(b, goal) == manhattan(a, goal) - 1


def test_middle_row_blocked_forces_detour():
    maze = Maze.from_strings(
        [
            "...",
            "##.",
            "...",
        ]
    )
    start, goal = Point(0, 0), Point(2, 0)
    goal_test, successors, heuristic = _grid_callbacks(maze, goal)

    path = search(start, goal_test, successors, heuristic)

    assert path is not None
    assert Point(1, 2) in path
    assert len(path) - 1 == 6
    _assert_valid_path(path, start, goal_test, successors)


def test_enclosed_goal_returns_none():
    maze = Maze.from_strings(
        [
            ".....",
            ".###.",
            ".#.#.",
            ".###.",
            ".....",
        ]
    )
    goal_test, successors, heuristic = _grid_callbacks(maze, Point(2, 2))

    assert search(Point(0, 0), goal_test, successors, heuristic) is None


def test_start_that_is_goal_returns_single_node():
    maze = Maze.empty(3, 3)
    goal_test, successors, heuristic = _grid_callbacks(maze, Point(1, 1))

    assert search(Point(1, 1), goal_test, successors, heuristic) == [Point(1, 1)]


def test_dead_end_start_fails():
    engine = AStarSearch("a", lambda n: n == "z", lambda n: [])
    result = engine.run()

    assert result.state is SearchState.FAILED
    assert result.path is None
    assert result.cost == math.inf
    assert not result.found


def test_prefers_cheap_long_route_over_expensive_short_one():
    graph = nx.DiGraph()
    graph.add_edge("s", "g", weight=10.0)
    graph.add_edge("s", "a", weight=1.0)
    graph.add_edge("a", "b", weight=1.0)
    graph.add_edge("b", "g", weight=1.0)

    path = search("s", lambda n: n == "g", graph_successors(graph))

    assert path == ["s", "a", "b", "g"]
    assert path_cost(graph, path) == pytest.approx(3.0)


def test_multi_edges_and_self_loops_use_cheapest_edge():
    graph = nx.MultiDiGraph()
    graph.add_edge("s", "s", weight=0.0)
    graph.add_edge("s", "g", weight=5.0)
    graph.add_edge("s", "g", weight=2.0)
    graph.add_edge("s", "g", weight=9.0)

    result = AStarSearch("s", lambda n: n == "g", graph_successors(graph)).run()

    assert result.path == ["s", "g"]
    assert result.cost == pytest.approx(2.0)
    assert path_cost(graph, result.path) == pytest.approx(2.0)


def test_cheaper_route_discovered_late_supersedes_frontier_entry():
    # "c" is first reached expensively via "s"; the cheap route through "a"
    # arrives later and must win.
    edges = {
        "s": [("c", 10.0), ("a", 1.0)],
        "a": [("b", 1.0)],
        "b": [("c", 1.0)],
        "c": [("g", 1.0)],
        "g": [],
    }
    result = AStarSearch("s", lambda n: n == "g", lambda n: edges[n]).run()

    assert result.path == ["s", "a", "b", "c", "g"]
    assert result.cost == pytest.approx(4.0)


def test_admissible_but_inconsistent_heuristic_still_optimal():
    edges = {
        "s": [("a", 1.0), ("b", 2.0)],
        "a": [("c", 2.0)],
        "b": [("c", 0.5)],
        "c": [("g", 3.0)],
        "g": [],
    }
    # h(b) overstates the step b->c relative to h(c) but never the total.
    h = {"s": 0.0, "a": 0.0, "b": 3.5, "c": 0.0, "g": 0.0}

    result = AStarSearch("s", lambda n: n == "g", lambda n: edges[n], h.__getitem__).run()

    assert result.cost == pytest.approx(5.5)
    assert result.path == ["s", "b", "c", "g"]


def test_negative_edge_cost_rejected():
    engine = AStarSearch("a", lambda n: n == "b", lambda n: [("b", -1.0)])

    with pytest.raises(NegativeEdgeCostError) as excinfo:
        engine.run()
    assert excinfo.value.cost == -1.0
    assert isinstance(excinfo.value, ValueError)


def test_negative_edge_cost_check_can_be_disabled():
    engine = AStarSearch(
        "a", lambda n: n == "b", lambda n: [("b", -1.0)], check_edge_costs=False
    )

    assert engine.run().path == ["a", "b"]


def test_negative_heuristic_rejected():
    with pytest.raises(ValueError):
        AStarSearch("a", lambda n: False, lambda n: [], lambda n: -1.0)


def test_expansion_cap_raises_and_search_can_resume():
    maze = Maze.empty(6, 6)
    goal = Point(5, 5)
    engine = AStarSearch(Point(0, 0), lambda p: p == goal, maze.successors)

    with pytest.raises(SearchBudgetExceeded) as excinfo:
        engine.run(max_expansions=3)
    assert excinfo.value.expanded == 3
    assert engine.state is SearchState.RUNNING

    result = engine.run()
    assert result.found
    assert result.cost == pytest.approx(10.0)


def test_step_reaches_terminal_state_and_stays_there():
    edges = {"a": [("b", 1.0)], "b": []}
    engine = AStarSearch("a", lambda n: n == "b", lambda n: edges[n])

    states = []
    while engine.state is SearchState.RUNNING:
        states.append(engine.step())

    assert states[-1] is SearchState.SUCCEEDED
    assert engine.step() is SearchState.SUCCEEDED
    assert engine.goal is not None and engine.goal.g == 1.0


def test_tie_break_is_deterministic():
    maze = Maze.empty(5, 5)
    goal = Point(4, 4)
    goal_test, successors, heuristic = _grid_callbacks(maze, goal)

    for tie_break in TieBreak:
        first = search(Point(0, 0), goal_test, successors, heuristic, tie_break=tie_break)
        second = search(Point(0, 0), goal_test, successors, heuristic, tie_break=tie_break)
        assert first == second
        assert first is not None and len(first) - 1 == 8


def test_heuristic_tie_break_expands_fewer_nodes_on_open_grid():
    maze = Maze.empty(8, 8)
    goal = Point(7, 7)
    goal_test, successors, heuristic = _grid_callbacks(maze, goal)

    by_h = AStarSearch(
        Point(0, 0), goal_test, successors, heuristic, tie_break=TieBreak.HEURISTIC
    ).run()
    fifo = AStarSearch(
        Point(0, 0), goal_test, successors, heuristic, tie_break=TieBreak.INSERTION
    ).run()

    assert by_h.cost == fifo.cost == pytest.approx(14.0)
    assert by_h.expanded <= fifo.expanded


def test_zero_heuristic_matches_reference_dijkstra():
    graph = nx.gnm_random_graph(60, 180, seed=11, directed=True)
    for index, (u, v) in enumerate(graph.edges()):
        graph.edges[u, v]["weight"] = float((index * 7) % 5 + 1)

    successors = graph_successors(graph)
    for target in (5, 17, 42, 59):
        expected = None
        if nx.has_path(graph, 0, target):
            expected = nx.shortest_path_length(graph, 0, target, weight="weight")

        path = search(0, lambda n, t=target: n == t, successors, zero_heuristic)

        if expected is None:
            assert path is None
        else:
            assert path is not None
            assert path_cost(graph, path) == pytest.approx(expected)


def test_single_goal_wrapper_returns_path_and_cost():
    maze = Maze.empty(4, 4)
    path, cost = astar(
        Point(0, 0), Point(3, 0), maze.successors, lambda a, b: float(manhattan(a, b))
    )
    assert path is not None
    assert path[0] == Point(0, 0) and path[-1] == Point(3, 0)
    assert cost == 3


def test_single_goal_wrapper_reports_no_path():
    maze = Maze.from_strings([".#."])
    path, cost = astar(
        Point(0, 0), Point(0, 2), maze.successors, lambda a, b: float(manhattan(a, b))
    )
    assert path is None
    assert cost == math.inf


def test_visited_and_frontier_are_per_search():
    edges = {"a": [("b", 1.0)], "b": [("c", 1.0)], "c": []}
    first = AStarSearch("a", lambda n: n == "c", lambda n: edges[n])
    second = AStarSearch("a", lambda n: n == "c", lambda n: edges[n])

    first.run()
    assert second.visited == {}
    assert len(second.frontier) == 1
    assert second.run().path == ["a", "b", "c"]


def test_heuristic_tie_break_path_on_open_grid_is_pinned():
    # Successors come in down, up, right, left order; with equal f the lower
    # h wins and then the earlier push, so the search runs down the first
    # column before turning along the bottom row.
    maze = Maze.empty(5, 5)
    goal = Point(4, 4)
    goal_test, successors, heuristic = _grid_callbacks(maze, goal)

    path = search(Point(0, 0), goal_test, successors, heuristic)

    assert path == [
        Point(0, 0),
        Point(1, 0),
        Point(2, 0),
        Point(3, 0),
        Point(4, 0),
        Point(4, 1),
        Point(4, 2),
        Point(4, 3),
        Point(4, 4),
    ]
