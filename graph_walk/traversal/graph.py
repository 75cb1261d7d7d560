"""
Graph model and error taxonomy for breadth-first traversal.

A graph is a dense, immutable adjacency list: node ``i`` is the ``i``-th
entry, and each entry is the ordered tuple of its outgoing neighbors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


class TraversalError(ValueError):
    pass


class InvalidInput(TraversalError):
    """Start value is missing or is not an integer."""


class OutOfRange(TraversalError):
    """Start index falls outside ``[0, node_count)``."""


class GraphDefinitionError(TraversalError):
    """Graph value or graph file is malformed."""


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Graph:
    """Immutable directed graph over node indices ``0..n-1``"""
    adjacency: Tuple[Tuple[int, ...], ...]
    name: str = "graph"

    def __post_init__(self):
        try:
            frozen = tuple(tuple(neighbors) for neighbors in self.adjacency)
        except TypeError as e:
            raise GraphDefinitionError(f"Adjacency must be a list of neighbor lists: {e}") from e
        object.__setattr__(self, "adjacency", frozen)

        node_count = len(self.adjacency)
        for node, neighbors in enumerate(self.adjacency):
            for neighbor in neighbors:
                if not _is_index(neighbor) or not 0 <= neighbor < node_count:
                    raise GraphDefinitionError(
                        f"Node {node} has invalid neighbor {neighbor!r} "
                        f"(expected an index in 0..{node_count - 1})"
                    )

    @classmethod
    def from_adjacency(cls, adjacency: Iterable[Sequence[int]], name: str = "graph") -> "Graph":
        """
        Build a graph from any sequence of neighbor sequences.

        Args:
            adjacency: Neighbor lists, one per node, in node order
            name: Display name for reports and plots

        Returns:
            Frozen Graph
        """
        return cls(adjacency=adjacency, name=name)

    @property
    def node_count(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency)

    def neighbors(self, node: int) -> Tuple[int, ...]:
        """Outgoing neighbors of ``node`` in stored order."""
        self.check_node(node)
        return self.adjacency[node]

    def check_node(self, node) -> int:
        """
        Validate a node index against this graph.

        Raises:
            InvalidInput: node is not an integer
            OutOfRange: node is not in ``[0, node_count)``
        """
        if not _is_index(node):
            raise InvalidInput(f"Node must be an integer, got {node!r}")
        if not 0 <= node < self.node_count:
            raise OutOfRange(
                f"Node {node} is out of range (expected 0 to {self.node_count - 1})"
            )
        return node

    def edges(self):
        """Yield ``(source, target)`` pairs in stored order."""
        for source, neighbors in enumerate(self.adjacency):
            for target in neighbors:
                yield source, target


# Reference graph: 0->{1,2}, 1->{3}, 2->{3,4}, 3->{4}, 4 is a sink
DEFAULT_GRAPH = Graph(
    adjacency=(
        (1, 2),
        (3,),
        (3, 4),
        (4,),
        (),
    ),
    name="reference",
)
