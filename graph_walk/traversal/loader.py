"""
Graph Definition Loader

Loads a graph from a YAML definition file. Two shapes are accepted for
``nodes``: a mapping of node index -> neighbor list with keys ``0..n-1``,
or a plain list of neighbor lists in node order.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from .graph import Graph, GraphDefinitionError, DEFAULT_GRAPH


class GraphLoader:
    """Loads and validates graph definitions."""

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize the graph loader.

        Args:
            config_path: Path to a graph YAML file
        """
        self.config_path = Path(config_path)

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise GraphDefinitionError(f"Graph file not found: {self.config_path}") from e
        except OSError as e:
            raise GraphDefinitionError(f"Graph file {self.config_path} could not be read: {e}") from e
        except UnicodeDecodeError as e:
            raise GraphDefinitionError(f"Graph file {self.config_path} is not valid UTF-8: {e}") from e
        except yaml.YAMLError as e:
            raise GraphDefinitionError(f"Graph file {self.config_path} is not valid YAML: {e}") from e

        if not isinstance(config, dict):
            raise GraphDefinitionError(f"Graph file {self.config_path} must contain a mapping")
        return config

    def _parse_nodes(self, nodes: Any) -> List[List[int]]:
        """Normalize the ``nodes`` section into a list of neighbor lists"""
        if isinstance(nodes, list):
            adjacency = nodes
        elif isinstance(nodes, dict):
            keys = list(nodes.keys())
            if not all(isinstance(k, int) and not isinstance(k, bool) for k in keys):
                raise GraphDefinitionError(f"Node keys must be integers, got {keys}")
            expected = list(range(len(nodes)))
            if sorted(keys) != expected:
                raise GraphDefinitionError(
                    f"Node keys must be the dense range 0..{len(nodes) - 1}, got {sorted(keys)}"
                )
            adjacency = [nodes[k] for k in expected]
        else:
            raise GraphDefinitionError("Graph file must define 'nodes' as a mapping or a list")

        normalized = []
        for node, neighbors in enumerate(adjacency):
            if neighbors is None:
                neighbors = []
            if not isinstance(neighbors, list):
                raise GraphDefinitionError(f"Neighbors of node {node} must be a list, got {neighbors!r}")
            normalized.append(neighbors)
        return normalized

    def load(self) -> Graph:
        """
        Load the graph definition.

        Returns:
            Validated Graph

        Raises:
            GraphDefinitionError: file is missing, unreadable, or malformed
        """
        config = self._load_config()
        if 'nodes' not in config:
            raise GraphDefinitionError(f"Graph file {self.config_path} is missing 'nodes'")

        adjacency = self._parse_nodes(config['nodes'])
        if not adjacency:
            raise GraphDefinitionError(f"Graph file {self.config_path} defines no nodes")
        name = str(config.get('name', self.config_path.stem))
        return Graph.from_adjacency(adjacency, name=name)


def load_graph(path: Optional[Union[str, Path]]) -> Graph:
    """
    Load a graph from YAML, or fall back to the built-in graph.

    Args:
        path: Path to a graph YAML file, or None for the built-in graph

    Returns:
        Graph
    """
    if not path:
        return DEFAULT_GRAPH
    return GraphLoader(path).load()
