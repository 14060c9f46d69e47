"""Graph vertices: plain indices, letters, course names and grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

COURSES = (
    "CS124", "CS165",
    "CS213", "CS235", "CS237", "CS238", "CS246",
    "CS306", "CS308", "CS312", "CS313", "CS345", "CS361", "CS364",
    "CS371", "CS398",
    "CS416", "CS432", "CS450", "CS460", "CS470", "CS480", "CS499",
    "CIT225",
    "ECEN160", "ECEN260", "ECEN324", "ECEN361",
)


class VertexError(ValueError):
    """Raised when a vertex index or label is out of range or malformed."""


@total_ordering
class Vertex:
    """A vertex identified by an index in ``range(limit)``.

    Vertices compare, order and hash by index alone, so vertices of
    different kinds with the same index are interchangeable.
    """

    __slots__ = ("_index", "_limit")

    def __init__(self, index, limit):
        if limit <= 0:
            raise VertexError(f"vertex limit must be positive, got {limit}")
        if not 0 <= index < limit:
            raise VertexError(f"vertex index {index} outside 0..{limit - 1}")
        self._index = index
        self._limit = limit

    @property
    def index(self):
        """The scalar position of this vertex."""
        return self._index

    @property
    def limit(self):
        """The number of vertices this kind of vertex can name."""
        return self._limit

    def __index__(self):
        return self._index

    def __str__(self):
        return str(self._index)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r}, index={self._index})"

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._index == other._index

    def __lt__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._index < other._index

    def __hash__(self):
        return hash(self._index)


class LetterVertex(Vertex):
    """A vertex named by a single letter: index 0 is ``A``."""

    __slots__ = ()

    @classmethod
    def from_text(cls, text, limit):
        """Build a vertex from the first letter of ``text`` (case-insensitive)."""
        if not text:
            raise VertexError("empty letter vertex label")
        return cls(ord(text[0].upper()) - ord("A"), limit)

    def __str__(self):
        return chr(self._index + ord("A"))


class CourseVertex(Vertex):
    """A vertex named by one of the known course codes."""

    __slots__ = ()

    def __init__(self, index):
        super().__init__(index, len(COURSES))

    @classmethod
    def from_text(cls, text):
        """Build a vertex from an exact course code such as ``CS124``."""
        try:
            return cls(COURSES.index(text))
        except ValueError:
            raise VertexError(f"unknown course {text!r}") from None

    def __str__(self):
        return COURSES[self._index]


@dataclass(frozen=True)
class Grid:
    """A rectangular grid whose cells are numbered row by row."""

    cols: int
    rows: int

    def __post_init__(self):
        if not (0 < self.cols < 26 and 0 < self.rows < 100):
            raise VertexError(
                f"grid of {self.cols}x{self.rows} is outside 1..25 by 1..99"
            )

    @property
    def size(self):
        """The number of cells in the grid."""
        return self.cols * self.rows

    def vertex(self, col, row):
        """Return the vertex at ``col``, ``row`` (both zero-based)."""
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise VertexError(f"cell ({col}, {row}) is outside the grid")
        return CoordVertex(row * self.cols + col, self)

    def parse(self, text):
        """Parse a label such as ``b4`` (column letter, one-based row)."""
        if len(text) < 2:
            raise VertexError(f"malformed grid label {text!r}")
        digits = text[1:]
        if not (digits.isascii() and digits.isdigit()):
            raise VertexError(f"malformed grid label {text!r}")
        return self.vertex(ord(text[0]) - ord("a"), int(digits) - 1)


class CoordVertex(Vertex):
    """A vertex identified by its cell on a :class:`Grid`."""

    __slots__ = ("_grid",)

    def __init__(self, index, grid):
        super().__init__(index, grid.size)
        self._grid = grid

    @property
    def grid(self):
        """The grid this vertex lies on."""
        return self._grid

    @property
    def col(self):
        """Zero-based column."""
        return self._index % self._grid.cols

    @property
    def row(self):
        """Zero-based row."""
        return self._index // self._grid.cols

    def __str__(self):
        return f"{chr(self.col + ord('a'))}{self.row + 1}"