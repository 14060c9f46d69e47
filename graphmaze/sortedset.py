"""A set that keeps its members in ascending order."""

from __future__ import annotations

from bisect import bisect_left
from heapq import merge


class SortedSet:
    """A collection of unique, ordered items held in ascending order.

    Membership tests use binary search. Union, intersection and
    difference walk both operands once and return new sets.
    """

    __slots__ = ("_items",)

    def __init__(self, items=()):
        self._items = sorted(set(items))

    @classmethod
    def _from_sorted(cls, items):
        result = cls()
        result._items = items
        return result

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __repr__(self):
        return f"SortedSet({self._items!r})"

    def __eq__(self, other):
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def _position(self, item):
        index = bisect_left(self._items, item)
        found = index < len(self._items) and self._items[index] == item
        return index, found

    def __contains__(self, item):
        return self._position(item)[1]

    def add(self, item):
        """Insert ``item`` unless an equal item is already present."""
        index, found = self._position(item)
        if not found:
            self._items.insert(index, item)

    def discard(self, item):
        """Remove ``item`` if it is present; do nothing otherwise."""
        index, found = self._position(item)
        if found:
            del self._items[index]

    def clear(self):
        """Remove every item."""
        self._items.clear()

    def __or__(self, other):
        if not isinstance(other, SortedSet):
            return NotImplemented
        merged = []
        for item in merge(self._items, other._items):
            if not merged or merged[-1] != item:
                merged.append(item)
        return self._from_sorted(merged)

    def __and__(self, other):
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._from_sorted([item for item in self._items if item in other])

    def __sub__(self, other):
        if not isinstance(other, SortedSet):
            return NotImplemented
        return self._from_sorted(
            [item for item in self._items if item not in other]
        )