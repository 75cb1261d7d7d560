"""
Console front end: prompt for a start node, run BFS, print the order.

Exit codes:
    0  traversal printed
    1  start node rejected (not an integer, or out of range)
    2  graph definition could not be loaded
"""
import re
import sys
import argparse
from typing import List, Optional, TextIO

from .traversal import (
    GraphDefinitionError,
    InvalidInput,
    TraversalEngine,
    TraversalError,
    load_graph,
)
from .traversal.graph import Graph
from .utils import Config

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

PROMPT = "Enter the starting node (0 to {last}): "

EXIT_OK = 0
EXIT_BAD_START = 1
EXIT_BAD_GRAPH = 2


def read_start_node(stream: TextIO) -> int:
    """
    Read the first whitespace-separated token from a stream as an integer.

    Blank lines are skipped, so the token may arrive on any line.

    Raises:
        InvalidInput: input ended before a token, or the token is not an integer
    """
    for line in iter(stream.readline, ""):
        tokens = line.split()
        if not tokens:
            continue
        token = tokens[0]
        if not INTEGER_TOKEN.fullmatch(token):
            raise InvalidInput(f"Starting node must be an integer, got {token!r}")
        return int(token)
    raise InvalidInput("No starting node given")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Breadth-first traversal of a small directed graph from a start node read on stdin."
    )
    parser.add_argument(
        "--graph",
        type=str,
        default=Config.GRAPH_PATH or None,
        help="YAML graph definition (default: built-in 5-node graph, or $GRAPH_WALK_GRAPH)"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=Config.TRACE,
        help="Print each dequeued node and the queue state to stderr"
    )
    return parser


def run(
    graph: Graph,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    trace: bool = False
) -> int:
    """
    Prompt, read the start node, traverse, and print the visitation order.

    Returns:
        Process exit code
    """
    stdout.write(PROMPT.format(last=graph.node_count - 1))
    stdout.flush()

    def on_visit(node: int, queue: List[int]):
        print(f"Visiting node: {node}", file=stderr)
        print(f"Queue state: {queue}", file=stderr)

    engine = TraversalEngine(graph)
    try:
        start = read_start_node(stdin)
        order = list(engine.iter_traverse(start, on_visit=on_visit if trace else None))
    except TraversalError as e:
        print(f"❌ {e}", file=stderr)
        return EXIT_BAD_START

    print(" ".join(str(node) for node in order), file=stdout)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)

    try:
        graph = load_graph(args.graph)
    except GraphDefinitionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_BAD_GRAPH

    if args.trace:
        print(f"🔎 Graph '{graph.name}': {graph.node_count} nodes, {graph.edge_count} edges", file=sys.stderr)

    return run(graph, sys.stdin, sys.stdout, sys.stderr, trace=args.trace)


if __name__ == "__main__":
    sys.exit(main())
