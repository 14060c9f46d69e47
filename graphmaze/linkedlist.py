"""A doubly linked list with node handles for insertion and removal."""

from __future__ import annotations

_EMPTY = "ERROR: unable to access data from an empty list"


class Node:
    """A single element of a :class:`LinkedList`.

    Nodes are handed out by :meth:`LinkedList.find` and
    :meth:`LinkedList.insert_before`; their links are read-only.
    """

    __slots__ = ("value", "_next", "_prev", "_owner")

    def __init__(self, value):
        self.value = value
        self._next = None
        self._prev = None
        self._owner = None

    @property
    def next(self):
        """The following node, or ``None`` at the tail."""
        return self._next

    @property
    def prev(self):
        """The preceding node, or ``None`` at the head."""
        return self._prev

    def __repr__(self):
        return f"Node({self.value!r})"


class LinkedList:
    """A sequence of values held in doubly linked nodes."""

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self):
        return self._size

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node._next

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.value
            node = node._prev

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None

    def _new_node(self, value):
        node = Node(value)
        node._owner = self
        self._size += 1
        return node

    def _own(self, node):
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def append(self, value):
        """Add ``value`` at the back and return its node."""
        node = self._new_node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node._prev = self._tail
            self._tail._next = node
            self._tail = node
        return node

    def appendleft(self, value):
        """Add ``value`` at the front and return its node."""
        node = self._new_node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node._next = self._head
            self._head._prev = node
            self._head = node
        return node

    def pop(self):
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError(_EMPTY)
        node = self._tail
        self.remove(node)
        return node.value

    def popleft(self):
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError(_EMPTY)
        node = self._head
        self.remove(node)
        return node.value

    def first(self):
        """Return the first value."""
        if self._head is None:
            raise IndexError(_EMPTY)
        return self._head.value

    def last(self):
        """Return the last value."""
        if self._tail is None:
            raise IndexError(_EMPTY)
        return self._tail.value

    def find(self, value):
        """Return the first node holding ``value``, or ``None``."""
        return next((node for node in self._nodes() if node.value == value), None)

    def insert_before(self, node, value):
        """Insert ``value`` before ``node`` and return the new node.

        With ``node`` of ``None`` the value goes at the back.
        """
        if node is None:
            return self.append(value)
        self._own(node)
        if node._prev is None:
            return self.appendleft(value)
        new = self._new_node(value)
        new._next = node
        new._prev = node._prev
        node._prev._next = new
        node._prev = new
        return new

    def remove(self, node):
        """Unlink ``node`` from the list; ``None`` is ignored."""
        if node is None:
            return
        self._own(node)
        if node._prev is not None:
            node._prev._next = node._next
        else:
            self._head = node._next
        if node._next is not None:
            node._next._prev = node._prev
        else:
            self._tail = node._prev
        node._next = node._prev = node._owner = None
        self._size -= 1

    def clear(self):
        """Remove every value."""
        for node in list(self._nodes()):
            node._next = node._prev = node._owner = None
        self._head = self._tail = None
        self._size = 0