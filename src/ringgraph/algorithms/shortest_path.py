"""Single-source shortest paths over any weighted incidence graph.

The search only talks to the graph through its contract: num_vertices(),
out_edges(), target() and weight(). Per-vertex state lives in lists indexed
by vertex id, so the graph must number its vertices 0..n-1.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field

from ringgraph.graph.contract import IncidenceGraph, VertexListGraph, WeightedGraph
from ringgraph.graph.errors import OutOfRange

logger = logging.getLogger(__name__)


@dataclass
class ShortestPaths:
    """Result of a shortest path search.

    Attributes:
        source: Vertex the search started from.
        distances: Distance from source to each vertex; inf if unreachable.
        parents: Predecessor of each vertex on a shortest path. The source
            and unreachable vertices are their own parents.
    """

    source: int
    distances: list[float] = field(default_factory=list)
    parents: list[int] = field(default_factory=list)

    def reachable(self, v: int) -> bool:
        """True if v can be reached from the source."""
        return not math.isinf(self.distances[v])

    def path_to(self, v: int) -> list[int]:
        """Reconstruct the vertex path from the source to v.

        Returns:
            Vertices from source to v inclusive, or an empty list if v is
            unreachable.
        """
        if not self.reachable(v):
            return []
        path = [v]
        while path[-1] != self.source:
            path.append(self.parents[path[-1]])
        path.reverse()
        return path


def dijkstra_shortest_paths(graph, source: int) -> ShortestPaths:
    """Compute shortest distances and predecessors from source.

    Edges are relaxed in the order out_edges() yields them. Among vertices
    at equal distance the lower id is settled first, which makes the parent
    choice deterministic.

    Args:
        graph: A graph with vertex list, incidence and weight capabilities.
        source: Start vertex.

    Returns:
        ShortestPaths with distances and parents for every vertex.

    Raises:
        TypeError: If the graph lacks a required capability.
        OutOfRange: If source is not a vertex.
        ValueError: If an edge has a negative weight.
    """
    for protocol in (VertexListGraph, IncidenceGraph, WeightedGraph):
        if not isinstance(graph, protocol):
            raise TypeError(f"Shortest path search needs a {protocol.__name__}")

    n = graph.num_vertices()
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < n:
        raise OutOfRange(source, n)

    distances = [math.inf] * n
    parents = list(range(n))
    settled = [False] * n
    distances[source] = 0.0
    queue: list[tuple[float, int]] = [(0.0, source)]

    while queue:
        dist, u = heapq.heappop(queue)
        if settled[u]:
            continue
        settled[u] = True
        for e in graph.out_edges(u):
            w = graph.weight(e)
            if w < 0:
                raise ValueError(f"Negative weight {w} on edge {e}")
            v = graph.target(e)
            candidate = dist + w
            if candidate < distances[v]:
                distances[v] = candidate
                parents[v] = u
                heapq.heappush(queue, (candidate, v))

    logger.debug(
        "Shortest paths from %d: %d of %d vertices reachable",
        source,
        sum(settled),
        n,
    )
    return ShortestPaths(source=source, distances=distances, parents=parents)


__all__ = ["ShortestPaths", "dijkstra_shortest_paths"]
