"""
Graph Traversal Engine

Implements BFS traversal over an immutable adjacency-list graph.
Visited state and the work queue live only for the duration of one call.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Tuple
from collections import deque
from .graph import Graph, DEFAULT_GRAPH


@dataclass
class TraversalResult:
    """Result of a traversal operation"""
    start: int
    order: Tuple[int, ...]  # Node indices in visitation order
    metadata: Dict = field(default_factory=dict)

    def format(self, separator: str = " ") -> str:
        """Render the visitation order the way the console prints it"""
        return separator.join(str(node) for node in self.order)


class TraversalEngine:
    """
    Breadth-first traversal engine over a fixed graph.

    The engine holds no per-traversal state; each call allocates its own
    visited set and FIFO queue, so repeated calls never leak into each other.
    """

    def __init__(self, graph: Graph = DEFAULT_GRAPH):
        """
        Initialize traversal engine.

        Args:
            graph: Graph to traverse (defaults to the built-in 5-node graph)
        """
        self.graph = graph

    def iter_traverse(
        self,
        start: int,
        on_visit: Optional[Callable[[int, List[int]], None]] = None
    ) -> Iterator[int]:
        """
        Yield nodes in breadth-first order starting from a node.

        The start node is validated before anything is yielded, so an invalid
        start raises on the first ``next()``.

        Args:
            start: Index of the starting node
            on_visit: Optional callback receiving ``(node, queue_snapshot)``
                      after the node's neighbors have been enqueued

        Yields:
            Node indices in the order they are dequeued
        """
        self.graph.check_node(start)

        visited = [False] * self.graph.node_count
        visited[start] = True
        queue = deque([start])

        while queue:
            node = queue.popleft()

            for neighbor in self.graph.adjacency[node]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

            if on_visit is not None:
                on_visit(node, list(queue))

            yield node

    def traverse(self, start: int) -> TraversalResult:
        """
        Traverse the graph starting from a node.

        Args:
            start: Index of the starting node

        Returns:
            TraversalResult with the visitation order and summary metadata

        Raises:
            InvalidInput: start is not an integer
            OutOfRange: start is not a node of the graph
        """
        order = tuple(self.iter_traverse(start))
        edges_examined = sum(len(self.graph.adjacency[node]) for node in order)
        seen = set(order)
        unreachable = [node for node in range(self.graph.node_count) if node not in seen]

        return TraversalResult(
            start=start,
            order=order,
            metadata={
                'graph': self.graph.name,
                'total_nodes_visited': len(order),
                'total_edges_examined': edges_examined,
                'unreachable': unreachable,
            }
        )

    def reachable(self, start: int) -> FrozenSet[int]:
        """Set of nodes reachable from ``start``, including itself."""
        return frozenset(self.iter_traverse(start))


def bfs(graph: Graph, start: int) -> List[int]:
    """Breadth-first visitation order of ``graph`` from ``start``."""
    return list(TraversalEngine(graph).iter_traverse(start))
