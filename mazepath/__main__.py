"""Command line entry point: solve a seeded random maze and report the result.

Usage:
    python -m mazepath
    python -m mazepath --rows 30 --cols 40 --seed 7 --diagonal
    python -m mazepath --config mazepath.json --start 0 0 --goal 19 19
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .config import MazepathConfig, load_config
from .grid import Maze, Point
from .pathfinding import MazePathfinder
from .search import SearchBudgetExceeded, SearchResult


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazepath", description=__doc__.splitlines()[0])
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--rows", type=int, help="maze height")
    parser.add_argument("--cols", type=int, help="maze width")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--density", type=float, help="probability that a cell is blocked")
    parser.add_argument(
        "--diagonal",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="allow or forbid diagonal moves (defaults to the config file)",
    )
    parser.add_argument("--max-expansions", type=int, help="give up after this many expansions")
    parser.add_argument("--start", type=int, nargs=2, metavar=("ROW", "COL"))
    parser.add_argument("--goal", type=int, nargs=2, metavar=("ROW", "COL"))
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _apply_overrides(config: MazepathConfig, args: argparse.Namespace) -> MazepathConfig:
    maze_updates = {
        key: value
        for key, value in (
            ("rows", args.rows),
            ("cols", args.cols),
            ("blocked_probability", args.density),
        )
        if value is not None
    }
    if args.diagonal is not None:
        maze_updates["diagonal"] = args.diagonal
    payload = config.model_dump()
    payload["maze"].update(maze_updates)
    if args.seed is not None:
        payload["randomness"]["seed"] = args.seed
    if args.max_expansions is not None:
        payload["search"]["max_expansions"] = args.max_expansions
    # Re-validate so CLI values get the same bounds checks as file values.
    return MazepathConfig.model_validate(payload)


def _pick_endpoints(
    maze: Maze, start: Sequence[int] | None, goal: Sequence[int] | None
) -> tuple[Point, Point] | None:
    open_cells = list(maze.open_cells())
    if len(open_cells) < 2 and (start is None or goal is None):
        return None
    start_point = Point(*start) if start is not None else open_cells[0]
    goal_point = Point(*goal) if goal is not None else open_cells[-1]
    return start_point, goal_point


def _summary_table(start: Point, goal: Point, result: SearchResult[Point]) -> Table:
    table = Table(title="mazepath", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("start", f"({start.row}, {start.col})")
    table.add_row("goal", f"({goal.row}, {goal.col})")
    table.add_row("outcome", result.state.value)
    table.add_row("expanded", str(result.expanded))
    table.add_row("generated", str(result.generated))
    if result.path is not None:
        table.add_row("length", str(len(result.path)))
        table.add_row("cost", f"{result.cost:g}")
        table.add_row("path", " ".join(f"({p.row},{p.col})" for p in result.path))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a maze, solve it and print a summary table."""

    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console()

    config = _apply_overrides(load_config(args.config), args)
    maze = Maze.random(config.maze, config.randomness.factory())
    endpoints = _pick_endpoints(maze, args.start, args.goal)
    if endpoints is None:
        console.print("[red]maze has fewer than two open cells[/red]")
        return 1
    start, goal = endpoints

    pathfinder = MazePathfinder(maze, config.search)
    try:
        result = pathfinder.solve(start, goal)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        return 2
    except SearchBudgetExceeded as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        return 3

    console.print(_summary_table(start, goal, result))
    return 0 if result.found else 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
