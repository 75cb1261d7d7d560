#!/usr/bin/env python3
"""Prompt for a start node and print the breadth-first visitation order."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from graph_walk.console import main


if __name__ == "__main__":
    sys.exit(main())
