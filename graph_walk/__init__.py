"""Breadth-first traversal over a small fixed directed graph."""

__version__ = "0.1.0"
