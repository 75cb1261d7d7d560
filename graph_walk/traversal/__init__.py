"""
Breadth-first traversal package.

This package provides:
- An immutable adjacency-list graph model and the built-in reference graph
- A BFS traversal engine with per-call visited state
- A YAML graph definition loader
"""

from .graph import (
    DEFAULT_GRAPH,
    Graph,
    GraphDefinitionError,
    InvalidInput,
    OutOfRange,
    TraversalError,
)
from .engine import TraversalEngine, TraversalResult, bfs
from .loader import GraphLoader, load_graph

__all__ = [
    'DEFAULT_GRAPH', 'Graph', 'GraphDefinitionError', 'InvalidInput', 'OutOfRange',
    'TraversalError', 'TraversalEngine', 'TraversalResult', 'bfs', 'GraphLoader', 'load_graph',
]
