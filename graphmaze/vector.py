"""A growable array that reports its capacity."""

from __future__ import annotations

import operator


class Vector:
    """A sequence that grows by doubling its capacity.

    ``Vector(n)`` starts with ``n`` slots holding ``None``. Indexing
    accepts only ``0 .. len - 1``; negative indices are rejected.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, size=0):
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        self._items = [None] * size
        self._capacity = size

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Vector({self._items!r})"

    def _check(self, index):
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("ERROR: Invalid index")
        return index

    def __getitem__(self, index):
        return self._items[self._check(index)]

    def __setitem__(self, index, value):
        self._items[self._check(index)] = value

    def append(self, value):
        """Add ``value`` at the end, growing the capacity when needed."""
        if not self._items:
            self._capacity = 1
        elif len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def clear(self):
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def capacity(self):
        """Return the number of elements the vector holds before growing."""
        return self._capacity