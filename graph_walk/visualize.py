"""
Generate a static visualization of a traversal.

Each node is labelled with its index and its 1-based BFS visitation rank;
unreachable nodes are drawn grey.

Usage:
    pip install -e .[viz]
    python scripts/visualize.py --start 0
"""

import matplotlib
matplotlib.use("Agg")

import networkx as nx
import matplotlib.pyplot as plt

from .traversal import Graph, TraversalResult

START_COLOR = '#E91E63'
VISITED_COLOR = '#2196F3'
UNREACHABLE_COLOR = '#9E9E9E'


def create_graph(graph: Graph, result: TraversalResult) -> nx.DiGraph:
    """Create NetworkX graph annotated with traversal order."""
    G = nx.DiGraph()
    rank = {node: i + 1 for i, node in enumerate(result.order)}

    # Hop distance from the start; BFS order guarantees parents come first
    depth = {result.start: 0}
    for node in result.order:
        for neighbor in graph.adjacency[node]:
            depth.setdefault(neighbor, depth[node] + 1)

    for node in range(graph.node_count):
        G.add_node(
            node,
            order=rank.get(node),
            depth=depth.get(node),
            start=node == result.start,
        )

    for source, target in graph.edges():
        G.add_edge(source, target)

    return G


def get_node_color(attrs) -> str:
    """Get color for a node by its traversal status."""
    if attrs['start']:
        return START_COLOR
    if attrs['order'] is None:
        return UNREACHABLE_COLOR
    return VISITED_COLOR


def visualize_graph(graph: Graph, result: TraversalResult, output_file: str = 'traversal_graph.png') -> str:
    """Create and save visualization."""
    G = create_graph(graph, result)

    fig, ax = plt.subplots(1, 1, figsize=(10, 8))
    fig.suptitle(
        f'BFS over {graph.name} from node {result.start} '
        f'({result.metadata["total_nodes_visited"]} of {graph.node_count} nodes visited)',
        fontsize=14,
        fontweight='bold'
    )

    # One row per hop distance; unreachable nodes share the last row
    for node, attrs in G.nodes(data=True):
        attrs["layer"] = attrs["depth"] if attrs["depth"] is not None else graph.node_count
    pos = nx.multipartite_layout(G, subset_key='layer', align='horizontal', scale=2)

    nx.draw_networkx_nodes(
        G, pos,
        node_color=[get_node_color(G.nodes[node]) for node in G.nodes()],
        node_size=[1500 if G.nodes[node]['start'] else 900 for node in G.nodes()],
        alpha=0.9,
        edgecolors='black',
        linewidths=2,
        ax=ax
    )

    nx.draw_networkx_edges(
        G, pos,
        edge_color='gray',
        arrows=True,
        arrowsize=15,
        arrowstyle='->',
        width=2,
        alpha=0.6,
        connectionstyle='arc3,rad=0.1',
        ax=ax
    )

    labels = {
        node: f"{node}\n#{attrs['order']}" if attrs['order'] is not None else str(node)
        for node, attrs in G.nodes(data=True)
    }
    nx.draw_networkx_labels(
        G, pos,
        labels,
        font_size=9,
        font_weight='bold',
        font_color='white',
        ax=ax
    )

    stats_text = (
        f'Order: {result.format()}\n'
        f'Edges examined: {result.metadata["total_edges_examined"]}\n'
        f'Unreachable: {result.metadata["unreachable"] or "none"}'
    )
    ax.text(
        0.98, 0.98, stats_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment='top',
        horizontalalignment='right',
        bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8)
    )

    ax.axis('off')
    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return output_file
