"""A last-in, first-out stack that reports its capacity."""

from __future__ import annotations

_EMPTY = "ERROR: Unable to reference the element from an empty Stack"


class Stack:
    """A LIFO container.

    Pushing into an empty stack allocates one slot and a full stack
    doubles its capacity; popping shrinks the capacity to the size.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items=()):
        self._items = list(items)
        self._capacity = len(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"

    @property
    def capacity(self):
        """The number of values the stack holds before it grows."""
        return self._capacity

    def push(self, value):
        """Put ``value`` on top of the stack."""
        if not self._items:
            self._capacity = 1
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self):
        """Remove the top value and return it."""
        if not self._items:
            raise IndexError(_EMPTY)
        value = self._items.pop()
        self._capacity = len(self._items)
        return value

    def top(self):
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError(_EMPTY)
        return self._items[-1]

    def clear(self):
        """Remove every value; the capacity is kept."""
        self._items.clear()