"""
Pytest configuration and fixtures for traversal tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graph_walk.utils import Config, get_graph_path
from graph_walk.traversal import DEFAULT_GRAPH, Graph, TraversalEngine


@pytest.fixture(scope="session")
def default_graph():
    """Built-in 5-node reference graph"""
    return DEFAULT_GRAPH


@pytest.fixture(scope="session")
def default_graph_file():
    """YAML copy of the reference graph shipped in graphs/"""
    return get_graph_path("default.yaml")


@pytest.fixture(scope="function")
def traversal_engine(default_graph):
    """Create traversal engine for each test"""
    return TraversalEngine(default_graph)


@pytest.fixture
def cyclic_graph():
    """
    Graph with a cycle and an unreachable island.

    0 -> 1 -> 2 -> 0, 2 -> 3, and 4 -> 3 is only reachable from 4.
    """
    return Graph.from_adjacency([[1], [2], [0, 3], [], [3]], name="cyclic")


@pytest.fixture
def write_graph(tmp_path):
    """Write YAML text to a temporary graph file and return its path"""
    def _write(text: str, filename: str = "graph.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep environment-driven defaults out of the console tests"""
    monkeypatch.setattr(Config, "GRAPH_PATH", "")
    monkeypatch.setattr(Config, "TRACE", False)
