"""Algorithms written against the graph contract.

Exports:
- ShortestPaths, dijkstra_shortest_paths: Single-source shortest paths
- breadth_first, breadth_first_order: Breadth-first traversal
"""

from ringgraph.algorithms.shortest_path import ShortestPaths, dijkstra_shortest_paths
from ringgraph.algorithms.traversal import breadth_first, breadth_first_order

__all__ = [
    "ShortestPaths",
    "dijkstra_shortest_paths",
    "breadth_first",
    "breadth_first_order",
]
