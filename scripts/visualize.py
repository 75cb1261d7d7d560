#!/usr/bin/env python3
"""Render a BFS traversal of a graph to a PNG."""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graph_walk.traversal import TraversalEngine, TraversalError, load_graph
from graph_walk.utils import Config
from graph_walk.visualize import visualize_graph


def main():
    """Traverse from a start node and save the annotated graph."""
    parser = argparse.ArgumentParser(description='Render a BFS traversal of a graph to a PNG')
    parser.add_argument(
        '--start',
        type=int,
        default=0,
        help='Starting node index (default: 0)'
    )
    parser.add_argument(
        '--graph',
        type=str,
        default=Config.GRAPH_PATH or None,
        help='YAML graph definition (default: built-in 5-node graph)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=Config.PLOT_OUTPUT,
        help=f'Output PNG path (default: {Config.PLOT_OUTPUT})'
    )
    args = parser.parse_args()

    try:
        graph = load_graph(args.graph)
        print(f"📖 Graph '{graph.name}': {graph.node_count} nodes, {graph.edge_count} edges")

        result = TraversalEngine(graph).traverse(args.start)
    except TraversalError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"✅ Visited {result.metadata['total_nodes_visited']} nodes: {result.format()}")

    print("\n🖼️  Creating visualization...")
    output_file = visualize_graph(graph, result, args.output)
    print(f"✅ Visualization saved to: {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
