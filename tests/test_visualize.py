"""
Tests for the static traversal visualization.
"""

import pytest

pytest.importorskip("networkx")
pytest.importorskip("matplotlib")

from graph_walk.traversal import TraversalEngine
from graph_walk.visualize import (
    START_COLOR,
    UNREACHABLE_COLOR,
    VISITED_COLOR,
    create_graph,
    get_node_color,
    visualize_graph,
)


class TestCreateGraph:
    """NetworkX graph annotated with BFS rank and depth"""

    def test_full_traversal(self, default_graph, traversal_engine):
        G = create_graph(default_graph, traversal_engine.traverse(0))

        assert sorted(G.nodes()) == [0, 1, 2, 3, 4]
        assert sorted(G.edges()) == [(0, 1), (0, 2), (1, 3), (2, 3), (2, 4), (3, 4)]
        assert [G.nodes[n]['order'] for n in range(5)] == [1, 2, 3, 4, 5]
        assert [G.nodes[n]['depth'] for n in range(5)] == [0, 1, 1, 2, 2]
        assert G.nodes[0]['start'] is True

    def test_partial_traversal_marks_unreachable(self, default_graph, traversal_engine):
        G = create_graph(default_graph, traversal_engine.traverse(2))

        assert G.nodes[0]['order'] is None
        assert G.nodes[1]['depth'] is None
        assert G.nodes[4]['order'] == 3

    def test_node_colors(self, default_graph, traversal_engine):
        G = create_graph(default_graph, traversal_engine.traverse(1))

        assert get_node_color(G.nodes[1]) == START_COLOR
        assert get_node_color(G.nodes[3]) == VISITED_COLOR
        assert get_node_color(G.nodes[0]) == UNREACHABLE_COLOR


class TestVisualizeGraph:

    def test_writes_png(self, default_graph, tmp_path):
        result = TraversalEngine(default_graph).traverse(1)
        output = tmp_path / "bfs.png"

        assert visualize_graph(default_graph, result, str(output)) == str(output)
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
