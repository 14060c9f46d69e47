"""A first-in, first-out queue that grows by doubling its capacity."""

from __future__ import annotations

import operator
from collections import deque

_EMPTY = "ERROR: attempting to access an element in an empty queue"


class Queue:
    """A FIFO container.

    Values are pushed at the back and taken from the front. The capacity
    starts at ``capacity``, becomes 1 on the first push into an
    unallocated queue and doubles whenever a push finds the queue full.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity=0):
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"queue capacity must not be negative, got {capacity}")
        self._items = deque()
        self._capacity = capacity

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Queue({list(self._items)!r})"

    @property
    def capacity(self):
        """The number of values the queue holds before it grows."""
        return self._capacity

    def push(self, value):
        """Add ``value`` at the back of the queue."""
        if self._capacity == 0:
            self._capacity = 1
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self):
        """Remove the front value and return it; an empty queue yields ``None``."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self):
        """Return the value at the front without removing it."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items[0]

    def back(self):
        """Return the value at the back without removing it."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items[-1]

    def clear(self):
        """Remove every value; the capacity is kept."""
        self._items.clear()