from mazepath.grid import Maze, Point, manhattan
from mazepath.search import search

maze = Maze.from_strings(
    [
        "......",
        ".####.",
        "......",
        "####..",
        "......",
    ]
)
start = Point(0, 0)
goal = Point(4, 0)


def heuristic(p: Point) -> float:
    return float(manhattan(p, goal))


if __name__ == "__main__":
    path = search(start, lambda p: p == goal, maze.successors, heuristic)
    print("path:", path)
    if path is not None:
        print("\n".join(maze.marked(path, start, goal).to_strings()))
