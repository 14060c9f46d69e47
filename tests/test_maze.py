import pytest

from graphmaze.graph import Graph, NoPathError
from graphmaze.maze import Maze, MazeError, draw_maze, parse_maze, read_maze
from graphmaze.vertex import Grid

SMALL = "2 2\na1 b1\nb1 b2\n"

UNSOLVED = "+  +--+\n|     |\n+--+  +\n|  |  |\n+--+  +\n"
SOLVED = "+  +--+\n|## ##|\n+--+  +\n|  |##|\n+--+  +\n"


def test_parse_maze_builds_grid_and_edges():
    maze = parse_maze(SMALL)
    assert (maze.grid.cols, maze.grid.rows) == (2, 2)
    assert maze.graph.is_edge(maze.grid.parse("a1"), maze.grid.parse("b1"))
    assert maze.graph.is_edge(maze.grid.parse("b1"), maze.grid.parse("b2"))
    assert not maze.graph.is_edge(maze.grid.parse("b1"), maze.grid.parse("a1"))


def test_solve_returns_labels_from_entry_to_exit():
    maze = parse_maze(SMALL)
    assert [str(step) for step in maze.solve()] == ["a1", "b1", "b2"]


def test_solve_without_path_raises():
    maze = parse_maze("2 2\na1 b1\n")
    with pytest.raises(NoPathError):
        maze.solve()


def test_draw_unsolved():
    maze = parse_maze(SMALL)
    assert draw_maze(maze, maze.solve(), show_path=False) == UNSOLVED


def test_draw_solved():
    maze = parse_maze(SMALL)
    assert draw_maze(maze, maze.solve(), show_path=True) == SOLVED


def test_drawing_ignores_edge_direction():
    reversed_maze = parse_maze("2 2\nb1 a1\nb2 b1\n")
    assert draw_maze(reversed_maze) == draw_maze(parse_maze(SMALL))


def test_drawing_shape_matches_grid():
    maze = parse_maze("4 3\na1 b1\nb1 c1\nc1 d1\nd1 d2\nd2 d3\n")
    lines = draw_maze(maze).splitlines()
    assert len(lines) == 2 * maze.grid.rows + 1
    assert all(len(line) == 3 * maze.grid.cols + 1 for line in lines)


def test_marked_cells_match_path_length():
    maze = parse_maze("4 3\na1 b1\nb1 c1\nc1 d1\nd1 d2\nd2 d3\n")
    path = maze.solve()
    drawing = draw_maze(maze, path, show_path=True)
    assert drawing.count("##") == len(path)
    assert "#" not in draw_maze(maze, path, show_path=False)


def test_read_maze_from_file(tmp_path):
    source = tmp_path / "maze.txt"
    source.write_text(SMALL, encoding="utf-8")
    maze = read_maze(source)
    assert draw_maze(maze) == draw_maze(parse_maze(SMALL))


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(MazeError):
        read_maze(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "text",
    ["", "3", "x 2", "30 2", "2 2\na1", "2 2\na1 z9", "2 2\na1 b3"],
)
def test_malformed_descriptions_raise(text):
    with pytest.raises(MazeError):
        parse_maze(text)


def test_maze_rejects_mismatched_graph():
    with pytest.raises(MazeError):
        Maze(Grid(2, 2), Graph(5))