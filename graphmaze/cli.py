"""Interactive driver for graphs, course prerequisites and mazes."""

from __future__ import annotations

import argparse
import sys

from graphmaze.graph import Graph, GraphError, NoPathError
from graphmaze.maze import MazeError, draw_maze, read_maze
from graphmaze.vertex import COURSES, CourseVertex, LetterVertex, VertexError

MENU = (
    "Select the test you want to run:\n"
    "\t1. Just create and destroy a graph\n"
    "\t2. The above plus add a few entries\n"
    "\t3. Determine if two vertices are connected\n"
    "\t4. Find all the vertices connected to a given vertex\n"
    "\ta. Maze\n"
)

PROMPT = "> "

_FAILURES = (GraphError, VertexError, MazeError, OSError)


def build_course_graph(text):
    """Build a prerequisite graph from ``COURSE PREREQ ... |`` records."""
    graph = Graph(len(COURSES))
    for record in text.split("|"):
        names = record.split()
        if not names:
            continue
        course = CourseVertex.from_text(names[0])
        graph.add_all(course, [CourseVertex.from_text(name) for name in names[1:]])
    return graph


def list_prerequisites(graph, names):
    """Yield each course in ``names`` with its prerequisites.

    Stops at the first name that is not a known course.
    """
    for name in names:
        try:
            course = CourseVertex.from_text(name)
        except VertexError:
            return
        yield course, [CourseVertex(v.index) for v in graph.find_edges(course)]


def query_edges(graph, grid, pairs):
    """Yield ``(source, destination, is_edge)`` for each pair of cell labels.

    Stops at the first label that does not name a cell of ``grid``.
    """
    for first, second in pairs:
        try:
            source, destination = grid.parse(first), grid.parse(second)
        except VertexError:
            return
        yield source, destination, graph.is_edge(source, destination)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _run_simple(args, tokens):
    print("Create a graph of 10 vertices")
    first = Graph(10)
    print(f"\tSize: {len(first)}")
    print("Create a graph of 20 vertices")
    second = Graph(20)
    print(f"\tSize: {len(second)}")
    print("Create a graph using the copy constructor")
    print(f"\tSize: {len(second.copy())}")
    print("Copy a graph using the assignment operator")
    fourth = Graph(20)
    fourth = second.copy()
    print(f"\tSize: {len(fourth)}")


def _run_add(args, tokens):
    print("Create a graph of 5 vertices")
    graph = Graph(5)

    def letter(text):
        return LetterVertex.from_text(text, 5)

    for source, destination in (("A", "B"), ("B", "C"), ("C", "A")):
        print(f"\t{source} --> {destination}")
        graph.add(letter(source), letter(destination))
    print("\tD --> {A, B, C, D}")
    graph.add_all(letter("D"), [letter(name) for name in "ABCD"])


def _run_query(args, tokens):
    maze = read_maze(args.maze)
    graph = maze.graph.copy()
    maze.graph.clear()
    print("Determine if a given edge exists in the graph")
    print(PROMPT, end="", flush=True)
    for source, destination, edge in query_edges(graph, maze.grid, zip(tokens, tokens)):
        print(f"\t{source} - {destination} is {'' if edge else 'NOT '}an edge")
        print(PROMPT, end="", flush=True)


def _run_find_all(args, tokens):
    with open(args.courses, encoding="utf-8") as handle:
        graph = build_course_graph(handle.read()).copy()
    print("For the given class, the prerequisites will be listed:")
    print(PROMPT, end="", flush=True)
    for _course, prerequisites in list_prerequisites(graph, tokens):
        for prerequisite in prerequisites:
            print(f"\t{prerequisite}")
        print(PROMPT, end="", flush=True)


def _solve_maze(tokens):
    print("What is the filename? ", end="", flush=True)
    filename = next(tokens, None)
    if filename is None:
        raise MazeError("no file name given")
    maze = read_maze(filename)
    try:
        path = maze.solve()
    except NoPathError:
        print("Error: no path")
        path = []
    print(draw_maze(maze, path, show_path=False), end="")
    print("Press any key to solve the maze.")
    next(tokens, None)
    print(draw_maze(maze, path, show_path=True), end="")


_TESTS = {
    "1": _run_simple,
    "2": _run_add,
    "3": _run_query,
    "4": _run_find_all,
}


def main(argv=None):
    """Show the menu, read a choice from standard input and run it."""
    parser = argparse.ArgumentParser(
        prog="graphmaze", description="Exercise graphs and solve mazes."
    )
    parser.add_argument(
        "--maze", default="maze5x5.txt", help="maze file used by choice 3"
    )
    parser.add_argument(
        "--courses", default="cs.txt", help="course file used by choice 4"
    )
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    print(MENU, end="")
    print(PROMPT, end="", flush=True)
    choice = next(tokens, "")[:1]

    if choice == "a":
        try:
            _solve_maze(tokens)
        except _FAILURES as exc:
            print(f"ERROR: {exc}")
            return 1
        return 0

    test = _TESTS.get(choice)
    if test is None:
        print("Unrecognized command, exiting...")
        return 0
    try:
        test(args, tokens)
    except _FAILURES as exc:
        print(f"ERROR: {exc}")
    print(f"Test {choice} complete")
    return 0