# graphmaze

A small directed-graph library with vertex types for single letters,
course codes and grid cells, a maze reader that finds and draws the
shortest path through a maze, and a handful of plain containers.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Graphs

```python
from graphmaze.graph import Graph
from graphmaze.vertex import LetterVertex

g = Graph(5)
a = LetterVertex.from_text("A", 5)
b = LetterVertex.from_text("B", 5)
g.add(a, b)

g.is_edge(a, b)       # True
g.is_edge(b, a)       # False
g.find_edges(a)       # [Vertex(... index=1)], in ascending order
```

A `Graph` has a fixed number of vertices, numbered `0 .. len(g) - 1`.
Every method accepts a vertex of any kind or a plain integer index.

- `add(source, destination)` adds one directed edge.
- `add_all(source, destinations)` adds an edge to each destination.
- `is_edge(source, destination)` tells whether an edge exists.
- `find_edges(vertex)` lists the vertices `vertex` leads to, ascending.
- `find_path(source, destination)` runs a breadth-first search and
  returns a shortest path from the source to the destination, both
  included. It raises `NoPathError` when none exists.
- `copy()` returns an independent graph; `clear()` removes every edge.

A negative size or a vertex outside the graph raises `GraphError`
(`NoPathError` is a subclass of it).

## Vertices

All vertex kinds live in `graphmaze.vertex`. They compare, order and
hash by index alone, so vertices of different kinds with the same index
are interchangeable.

- `Vertex(index, limit)` — a plain index in `range(limit)`.
- `LetterVertex` — `A`, `B`, `C`, …; `LetterVertex.from_text(text, limit)`
  reads the first letter, ignoring case.
- `CourseVertex` — one of 28 fixed course codes such as `CS124`,
  `CS235`, `CIT225` or `ECEN160` (listed in `COURSES`);
  `CourseVertex.from_text(text)` needs an exact code.
- `CoordVertex` — a cell on a `Grid(cols, rows)` (1–25 columns,
  1–99 rows), written as a column letter and a one-based row: `a1`,
  `b4`, `c12`. `Grid.vertex(col, row)` builds one from zero-based
  coordinates, `Grid.parse(text)` from its label; `col` and `row` give
  the coordinates back.

Out-of-range indices, unknown labels and malformed text raise
`VertexError`.

## Mazes

A maze description starts with the number of columns and rows,
followed by pairs of cell labels, each pair naming an open passage:

```
3 2
a1 b1
b1 b2
b2 c2
```

```python
from graphmaze.maze import read_maze, draw_maze

maze = read_maze("maze.txt")
path = maze.solve()                          # top-left cell to bottom-right cell
print(draw_maze(maze))                       # the empty maze
print(draw_maze(maze, path, show_path=True)) # cells on the path filled with ##
```

`parse_maze(text)` does the same from a string. A `Maze` holds its
`grid` and `graph`. Unreadable files and malformed descriptions raise
`MazeError`; `Maze.solve` raises `NoPathError` when the exit cannot be
reached.

## Containers

- `SortedSet` (`graphmaze.sortedset`) — unique items kept in ascending
  order, with `add`, `discard`, `clear`, `in`, and `|`, `&`, `-`.
- `Vector` (`graphmaze.vector`) — a growable sequence that doubles its
  `capacity()`; indices must lie in `0 .. len - 1`.
- `LinkedList` (`graphmaze.linkedlist`) — a doubly linked list with
  `append`, `appendleft`, `pop`, `popleft`, `first`, `last`, and
  `Node` handles for `find`, `insert_before` and `remove`.
- `Queue` (`graphmaze.fifo`) — FIFO with `push`, `pop`, `front`,
  `back` and `clear`; `pop` on an empty queue returns `None`.
- `Stack` (`graphmaze.lifo`) — LIFO with `push`, `pop`, `top` and
  `clear`; iteration runs from the top down.

## Command line

```
graphmaze [--maze FILE] [--courses FILE]
```

shows a menu and reads a choice, then further input, from standard
input:

- `1` builds and copies a few empty graphs and prints their sizes.
- `2` builds a five-vertex graph of lettered edges.
- `3` loads the maze named by `--maze` (default `maze5x5.txt`) and then
  reads pairs of cell labels, saying for each whether it is an edge.
  It stops at the first label that is not a cell.
- `4` loads course records of the form `COURSE PREREQ ... |` from the
  file named by `--courses` (default `cs.txt`) and then reads course
  codes, listing the prerequisites of each. It stops at the first
  unknown code.
- `a` asks for a maze file name, draws the maze, waits for one more
  word of input, and draws it again with the shortest path filled in.

Errors are printed as `ERROR: ...`. If a maze has no path from its
entrance to its exit, `Error: no path` is printed and the maze is drawn
without one.

## What it does not do

The command line is driven entirely by standard input; there is no
interactive editor for graphs or mazes, and graphs are not saved
anywhere — they exist only for the run that builds them.