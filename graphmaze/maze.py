"""Mazes stored as graphs over a grid: reading, solving and drawing."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from graphmaze.graph import Graph
from graphmaze.vertex import CoordVertex, Grid, VertexError


class MazeError(ValueError):
    """Raised when a maze description cannot be read or is malformed."""


@dataclass
class Maze:
    """A maze: a grid of cells and the graph of tunnels between them."""

    grid: Grid
    graph: Graph

    def __post_init__(self):
        if len(self.graph) != self.grid.size:
            raise MazeError(
                f"graph of {len(self.graph)} vertices does not fit a "
                f"{self.grid.cols}x{self.grid.rows} grid"
            )

    def solve(self):
        """Return the shortest path from the top-left to the bottom-right cell.

        Raises :class:`graphmaze.graph.NoPathError` when the exit cannot
        be reached.
        """
        steps = self.graph.find_path(0, len(self.graph) - 1)
        return [CoordVertex(step.index, self.grid) for step in steps]


def parse_maze(text):
    """Build a maze from its text form.

    The text starts with the number of columns and rows, followed by
    pairs of cell labels such as ``a1 b1``, each pair naming a tunnel.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise MazeError("maze description lacks its column and row counts")
    try:
        cols, rows = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise MazeError(
            f"maze dimensions {tokens[0]!r} {tokens[1]!r} are not numbers"
        ) from None
    try:
        grid = Grid(cols, rows)
    except VertexError as exc:
        raise MazeError(str(exc)) from exc

    labels = tokens[2:]
    if len(labels) % 2:
        raise MazeError(f"tunnel starting at {labels[-1]!r} has no end")

    graph = Graph(grid.size)
    pairs = iter(labels)
    for first, second in zip(pairs, pairs):
        try:
            graph.add(grid.parse(first), grid.parse(second))
        except VertexError as exc:
            raise MazeError(str(exc)) from exc
    return Maze(grid, graph)


def read_maze(path):
    """Read a maze from the file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise MazeError(f"Unable to open file {path}") from exc
    return parse_maze(text)


def _connected(graph, first, second):
    return graph.is_edge(first, second) or graph.is_edge(second, first)


def draw_maze(maze, path=(), show_path=False):
    """Render ``maze`` as ASCII art.

    With ``show_path`` the cells of ``path`` are filled with ``##``.
    """
    grid, graph = maze.grid, maze.graph
    marked = {operator.index(step) for step in path} if show_path else set()

    def tunnel_row(row):
        fills = [
            "##" if grid.vertex(col, row).index in marked else "  "
            for col in range(grid.cols)
        ]
        parts = ["|"]
        for col in range(1, grid.cols):
            left, here = grid.vertex(col - 1, row), grid.vertex(col, row)
            wall = " " if _connected(graph, here, left) else "|"
            parts.append(fills[col - 1] + wall)
        parts.append(fills[-1] + "|\n")
        return "".join(parts)

    def wall_row(row):
        parts = ["+"]
        for col in range(grid.cols):
            above, below = grid.vertex(col, row), grid.vertex(col, row + 1)
            parts.append("  +" if _connected(graph, above, below) else "--+")
        parts.append("\n")
        return "".join(parts)

    lines = ["+  " + "+--" * (grid.cols - 1) + "+\n"]
    for row in range(grid.rows - 1):
        lines.append(tunnel_row(row))
        lines.append(wall_row(row))
    lines.append(tunnel_row(grid.rows - 1))
    lines.append("+--" * (grid.cols - 1) + "+  +\n")
    return "".join(lines)