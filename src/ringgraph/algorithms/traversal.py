"""Breadth-first traversal over any adjacency graph."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from ringgraph.graph.contract import AdjacencyGraph, VertexListGraph
from ringgraph.graph.errors import OutOfRange


def breadth_first(graph, source: int) -> Iterator[tuple[int, int]]:
    """Yield (vertex, depth) pairs in breadth-first order from source.

    Neighbors are visited in the order adjacent_vertices() yields them, and
    each vertex is yielded once.

    Raises:
        TypeError: If the graph lacks vertex list or adjacency capabilities.
        OutOfRange: If source is not a vertex.
    """
    for protocol in (VertexListGraph, AdjacencyGraph):
        if not isinstance(graph, protocol):
            raise TypeError(f"Breadth-first traversal needs a {protocol.__name__}")
    n = graph.num_vertices()
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < n:
        raise OutOfRange(source, n)

    visited = [False] * n
    visited[source] = True
    queue: deque[tuple[int, int]] = deque([(source, 0)])
    while queue:
        u, depth = queue.popleft()
        yield u, depth
        for v in graph.adjacent_vertices(u):
            if not visited[v]:
                visited[v] = True
                queue.append((v, depth + 1))


def breadth_first_order(graph, source: int) -> list[int]:
    """Return vertices in the order a breadth-first traversal visits them."""
    return [u for u, _ in breadth_first(graph, source)]


__all__ = ["breadth_first", "breadth_first_order"]
