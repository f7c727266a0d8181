"""
ringgraph.commands.search - Shortest path table from one vertex.
"""

from __future__ import annotations

import argparse

from ringgraph.algorithms import dijkstra_shortest_paths
from ringgraph.commands.show import format_search
from ringgraph.graph import OutOfRange
from ringgraph.graph.factory import load_graph


def run(args: argparse.Namespace) -> int:
    """Run the search command."""
    config, graph = load_graph(args.config, args.size, source=args.source)
    source = config["search"]["source"]
    quiet = args.quiet or config["output"]["quiet"]
    result = dijkstra_shortest_paths(graph, source)

    for line in format_search(graph, result, quiet=quiet):
        print(line)

    if args.target is not None:
        if not graph.has_vertex(args.target):
            raise OutOfRange(args.target, graph.n)
        path = result.path_to(args.target)
        print(f"Path to {args.target}: {' -> '.join(str(v) for v in path)}")
    return 0
