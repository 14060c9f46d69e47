"""Directed graphs, vertex types, a maze solver and plain containers."""

__version__ = "0.1.0"