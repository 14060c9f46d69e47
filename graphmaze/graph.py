"""A directed graph over a fixed number of vertices."""

from __future__ import annotations

import operator
from collections import deque

from graphmaze.vertex import Vertex


class GraphError(Exception):
    """Raised for invalid graph sizes or vertices outside the graph."""


class NoPathError(GraphError):
    """Raised when no path joins two vertices."""


class Graph:
    """A directed graph whose vertices are the indices ``0 .. size - 1``.

    Methods accept any :class:`Vertex` or a plain integer index.
    """

    def __init__(self, size):
        size = operator.index(size)
        if size < 0:
            raise GraphError(f"graph size must not be negative, got {size}")
        self._size = size
        self._edges = [set() for _ in range(size)]

    def __len__(self):
        return self._size

    def __repr__(self):
        count = sum(len(targets) for targets in self._edges)
        return f"Graph(size={self._size}, edges={count})"

    def _check(self, vertex):
        position = operator.index(vertex)
        if not 0 <= position < self._size:
            raise GraphError(
                f"vertex {position} is outside a graph of {self._size}"
            )
        return position

    def _vertex(self, position):
        return Vertex(position, self._size)

    def copy(self):
        """Return an independent graph with the same edges."""
        other = Graph(self._size)
        other._edges = [set(targets) for targets in self._edges]
        return other

    def clear(self):
        """Remove every edge, keeping the vertices."""
        for targets in self._edges:
            targets.clear()

    def add(self, source, destination):
        """Add the edge ``source -> destination``."""
        self._edges[self._check(source)].add(self._check(destination))

    def add_all(self, source, destinations):
        """Add an edge from ``source`` to each of ``destinations``."""
        start = self._check(source)
        targets = [self._check(vertex) for vertex in destinations]
        self._edges[start].update(targets)

    def is_edge(self, source, destination):
        """Tell whether the edge ``source -> destination`` exists."""
        return self._check(destination) in self._edges[self._check(source)]

    def find_edges(self, vertex):
        """Return the vertices ``vertex`` leads to, in ascending order."""
        return [self._vertex(i) for i in sorted(self._edges[self._check(vertex)])]

    def find_path(self, source, destination):
        """Return a shortest path from ``source`` to ``destination``.

        The path lists vertices from the source to the destination, both
        included. Raises :class:`NoPathError` when none exists.
        """
        start = self._check(source)
        goal = self._check(destination)
        previous = {start: None}
        pending = deque([start])
        while pending and goal not in previous:
            current = pending.popleft()
            for following in sorted(self._edges[current]):
                if following not in previous:
                    previous[following] = current
                    pending.append(following)
        if goal not in previous:
            raise NoPathError(f"no path from {start} to {goal}")
        steps = []
        node = goal
        while node is not None:
            steps.append(node)
            node = previous[node]
        return [self._vertex(i) for i in reversed(steps)]