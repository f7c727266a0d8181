"""RingGraph - undirected implicit graph of n vertices arranged in a ring.

The graph stores nothing but its size. Vertices, edges, incidence and
weights are computed on each query, so one instance can be shared freely
between readers. Vertex ids are 0..n-1 and double as dense array indices
for algorithms that keep per-vertex state.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ringgraph.graph.contract import Capability
from ringgraph.graph.errors import InvalidTopology, OutOfRange
from ringgraph.graph.iterators import (
    AdjacencyIterator,
    EdgeSequence,
    IncidentEdgeIterator,
    vertex_range,
)
from ringgraph.graph.relations import Edge
from ringgraph.graph.topology import Direction, are_adjacent, neighbor, neighbors_of
from ringgraph.graph.weights import EdgeWeightMap

logger = logging.getLogger(__name__)

# All vertices in a ring graph have two neighbors.
RING_DEGREE = 2


class RingGraph:
    """Undirected graph of vertices arranged in a ring shape.

    Vertices are indexed by integer, and edges connect vertices with
    consecutive indices. Vertex 0 is also adjacent to vertex n-1.

    Small rings keep the plain modular arithmetic:
    - n == 2: both neighbors of a vertex are the other vertex, giving two
      parallel connections.
    - n == 1: both neighbors of vertex 0 are vertex 0, giving a self-loop
      that is listed and counted as the graph's only edge.

    Attributes:
        n: Number of vertices.
        check_edges: Whether weight lookups reject edges that are not part
            of the ring.
    """

    __slots__ = ("_n", "_check_edges")

    capabilities = (
        Capability.INCIDENCE
        | Capability.BIDIRECTIONAL
        | Capability.ADJACENCY
        | Capability.VERTEX_LIST
        | Capability.EDGE_LIST
        | Capability.ADJACENCY_MATRIX
        | Capability.WEIGHTED
    )
    directed = False

    def __init__(self, n: int, *, check_edges: bool = True) -> None:
        """Create a ring of n vertices.

        Raises:
            InvalidTopology: If n is not a positive integer.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidTopology(n)
        object.__setattr__(self, "_n", n)
        object.__setattr__(self, "_check_edges", check_edges)
        logger.debug("Created ring graph with %d vertices", n)

    @classmethod
    def from_config(cls, config: dict[str, Any], n: int | None = None) -> RingGraph:
        """Create a graph from a configuration dictionary.

        Args:
            config: Configuration as returned by load_config().
            n: Explicit size overriding ``graph.size``.
        """
        size = n if n is not None else config.get("graph", {}).get("size", 5)
        check_edges = config.get("weights", {}).get("check_edges", True)
        return cls(size, check_edges=check_edges)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def n(self) -> int:
        return self._n

    @property
    def check_edges(self) -> bool:
        return self._check_edges

    # Vertex list
    def order(self) -> int:
        """Return the number of vertices."""
        return self._n

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return self._n

    def __len__(self) -> int:
        return self._n

    def vertices(self) -> range:
        """Return all vertices in ascending order."""
        return vertex_range(self._n)

    def has_vertex(self, v: object) -> bool:
        """Check if v is a vertex of this graph."""
        return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < self._n

    def _require_vertex(self, u: object) -> int:
        if not self.has_vertex(u):
            raise OutOfRange(u, self._n)
        return u  # type: ignore[return-value]

    # Incidence
    def neighbor(self, u: int, direction: Direction) -> int:
        """Return the neighbor of u in one direction."""
        return neighbor(self._require_vertex(u), direction, self._n)

    def out_edges(self, u: int) -> IncidentEdgeIterator:
        """Return an iterator over the edges leaving u.

        Produces Edge(u, next) then Edge(u, prev). Every edge's source is u.

        Raises:
            OutOfRange: If u is not a vertex.
        """
        return IncidentEdgeIterator(self._require_vertex(u), self._n)

    def incident_edges(self, u: int) -> IncidentEdgeIterator:
        """Alias of out_edges(); in an undirected graph they coincide."""
        return self.out_edges(u)

    def incident_pairs(self, u: int) -> list[tuple[Edge, int]]:
        """Return (edge, neighbor) for both edges incident to u."""
        return [(e, e.target) for e in self.out_edges(u)]

    def out_degree(self, u: int) -> int:
        """Return the number of edges leaving u, always 2."""
        self._require_vertex(u)
        return RING_DEGREE

    def degree(self, u: int) -> int:
        """Return the number of edges incident to u, always 2."""
        return self.out_degree(u)

    # Bidirectional
    def in_edges(self, u: int) -> Iterator[Edge]:
        """Iterate over the edges arriving at u, the out edges reversed."""
        for e in self.out_edges(u):
            yield e.reversed()

    def in_degree(self, u: int) -> int:
        """Return the number of edges arriving at u, always 2."""
        return self.out_degree(u)

    # Adjacency
    def adjacent_vertices(self, u: int) -> AdjacencyIterator:
        """Return an iterator over the neighbors of u, next neighbor first."""
        return AdjacencyIterator(self._require_vertex(u), self._n)

    def neighbors(self, u: int) -> tuple[int, int]:
        """Return both neighbors of u, next neighbor first."""
        return neighbors_of(self._require_vertex(u), self._n)

    # Edge list
    def edges(self) -> EdgeSequence:
        """Return every connection of the ring exactly once.

        Each edge is emitted by its owning vertex, the endpoint for which it
        is the NEXT edge, in ascending vertex order.
        """
        return EdgeSequence(self._n)

    def num_edges(self) -> int:
        """Return the number of edges."""
        # There are as many edges as there are vertices.
        return self._n

    def source(self, e: Edge) -> int:
        """Return the source vertex of an edge."""
        return e.source

    def target(self, e: Edge) -> int:
        """Return the target vertex of an edge."""
        return e.target

    # Adjacency matrix
    def edge(self, u: int, v: int) -> tuple[Edge | None, bool]:
        """Look up the edge from u to v.

        Returns:
            (Edge(u, v), True) if u and v are adjacent, else (None, False).
        """
        self._require_vertex(u)
        self._require_vertex(v)
        if are_adjacent(u, v, self._n):
            return Edge(u, v), True
        return None, False

    def has_edge(self, e: object) -> bool:
        """Check if e joins two adjacent vertices, in either orientation."""
        return self.weight_map().is_valid(e)

    # Weights
    def weight_map(self) -> EdgeWeightMap:
        """Return the read-only edge weight map."""
        return EdgeWeightMap(self._n, check_edges=self._check_edges)

    def weight(self, e: Edge) -> float:
        """Return the weight of an edge, always 1.0.

        Raises:
            InvalidEdge: If edge checking is on and e is not a ring edge.
        """
        return self.weight_map()[e]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingGraph):
            return NotImplemented
        return self._n == other._n and self._check_edges == other._check_edges

    def __hash__(self) -> int:
        return hash((RingGraph, self._n, self._check_edges))

    def __repr__(self) -> str:
        if self._check_edges:
            return f"RingGraph(n={self._n})"
        return f"RingGraph(n={self._n}, check_edges=False)"


__all__ = ["RingGraph", "RING_DEGREE"]
