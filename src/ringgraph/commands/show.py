"""
ringgraph.commands.show - Print the structure of a ring graph.

Prints, in order:
- Each vertex with its incident edges and adjacent vertices
- Every edge with its weight
- A shortest path table from the source vertex
"""

from __future__ import annotations

import argparse
import math

from ringgraph.algorithms import ShortestPaths, dijkstra_shortest_paths
from ringgraph.graph import RingGraph
from ringgraph.graph.factory import load_graph


def run(args: argparse.Namespace) -> int:
    """Run the show command."""
    config, graph = load_graph(args.config, args.size, source=args.source)
    source = config["search"]["source"]
    quiet = args.quiet or config["output"]["quiet"]

    for line in format_incidence(graph, quiet=quiet):
        print(line)
    print()
    for line in format_edges(graph, quiet=quiet):
        print(line)
    print()
    result = dijkstra_shortest_paths(graph, source)
    for line in format_search(graph, result, quiet=quiet):
        print(line)
    return 0


def format_incidence(graph: RingGraph, quiet: bool = False) -> list[str]:
    """Describe each vertex's incident edges and neighbors.

    For n=5 the first line is ``Vertex 0: <0, 1>  <0, 4>   Adjacent vertices 1 4``.
    """
    lines = [] if quiet else ["Vertices, outgoing edges, and adjacent vertices"]
    for u in graph.vertices():
        edges = "  ".join(str(e) for e in graph.out_edges(u))
        adjacent = " ".join(str(v) for v in graph.adjacent_vertices(u))
        lines.append(f"Vertex {u}: {edges}   Adjacent vertices {adjacent}")
    if not quiet:
        lines.append(f"{graph.num_vertices()} vertices")
    return lines


def format_edges(graph: RingGraph, quiet: bool = False) -> list[str]:
    """List every edge with its weight."""
    lines = [] if quiet else ["Edges and weights"]
    for e in graph.edges():
        lines.append(f"{e} weight {format_number(graph.weight(e))}")
    if not quiet:
        lines.append(f"{graph.num_edges()} edges")
    return lines


def format_search(graph: RingGraph, result: ShortestPaths, quiet: bool = False) -> list[str]:
    """Tabulate distance and parent for every vertex."""
    lines = [] if quiet else [f"Dijkstra search from vertex {result.source}"]
    for u in graph.vertices():
        lines.append(
            f"Vertex {u}: distance {format_number(result.distances[u])}, "
            f"parent {result.parents[u]}"
        )
    return lines


def format_number(value: float) -> str:
    """Format a weight or distance without a trailing .0."""
    if math.isinf(value):
        return "inf"
    return f"{value:g}"
