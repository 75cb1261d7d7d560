"""Shared utility functions."""
import os
from pathlib import Path


def get_package_root() -> Path:
    """
    Get the installed package directory.

    Returns:
        Path to the graph_walk package
    """
    return Path(__file__).parent


def get_graph_path(filename: str = None) -> Path:
    """
    Get path to the bundled graph definitions directory or file.

    Args:
        filename: Optional graph filename

    Returns:
        Path to graphs directory or specific graph file
    """
    graph_dir = get_package_root() / "graphs"
    if filename:
        return graph_dir / filename
    return graph_dir


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration constants."""

    # Graph definition; empty means the built-in reference graph
    GRAPH_PATH = os.getenv("GRAPH_WALK_GRAPH", "")

    # Per-step queue trace on stderr
    TRACE = _env_flag("GRAPH_WALK_TRACE")

    # Visualization
    PLOT_OUTPUT = os.getenv("GRAPH_WALK_PLOT_OUTPUT", "traversal_graph.png")
