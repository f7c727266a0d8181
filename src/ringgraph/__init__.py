"""
ringgraph - Implicit ring graphs

A ring graph of n vertices is never stored: its vertices, edges and weights
are computed on demand from n. It exposes the same query contract as an
explicit adjacency-list graph, so generic algorithms such as shortest path
search run on it unchanged.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ringgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from ringgraph.algorithms import ShortestPaths, dijkstra_shortest_paths
from ringgraph.graph import (
    Capability,
    Direction,
    Edge,
    EdgeWeightMap,
    InvalidEdge,
    InvalidTopology,
    OutOfRange,
    RingGraph,
    RingGraphError,
    check_contract,
)

__all__ = [
    "__version__",
    "RingGraph",
    "Edge",
    "Direction",
    "EdgeWeightMap",
    "Capability",
    "check_contract",
    "ShortestPaths",
    "dijkstra_shortest_paths",
    "RingGraphError",
    "InvalidTopology",
    "OutOfRange",
    "InvalidEdge",
]
