"""Edge weight map - read-only mapping from edges to weights.

Every edge of the ring weighs 1.0. By default the map only answers for
genuine ring connections and raises InvalidEdge for anything else.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator

from ringgraph.graph.errors import InvalidEdge
from ringgraph.graph.iterators import EdgeSequence
from ringgraph.graph.relations import Edge
from ringgraph.graph.topology import are_adjacent

UNIT_WEIGHT = 1.0


class EdgeWeightMap(Mapping):
    """Map from edges of a ring of size n to floating point weights.

    Keys are looked up in either orientation, so both Edge(0, 1) and
    Edge(1, 0) weigh 1.0 in a ring of size 5. Iterating the map yields the
    owned edges, one per connection.

    Attributes:
        n: Size of the ring the map belongs to.
        check_edges: When False, every key weighs 1.0 without validation.
    """

    __slots__ = ("n", "check_edges")

    def __init__(self, n: int, check_edges: bool = True) -> None:
        self.n = n
        self.check_edges = check_edges

    def __getitem__(self, edge: Edge) -> float:
        if self.check_edges and not self.is_valid(edge):
            raise InvalidEdge(edge, self.n)
        # All edges have a weight of one.
        return UNIT_WEIGHT

    def get(self, edge, default=None):
        """Return the weight of edge, or default if it is not a ring edge."""
        if edge not in self:
            return default
        return UNIT_WEIGHT

    def is_valid(self, edge: object) -> bool:
        """Check that edge joins two ring-adjacent vertices."""
        if not isinstance(edge, Edge):
            return False
        if not (isinstance(edge.source, int) and isinstance(edge.target, int)):
            return False
        return are_adjacent(edge.source, edge.target, self.n)

    def __contains__(self, edge: object) -> bool:
        return not self.check_edges or self.is_valid(edge)

    def __iter__(self) -> Iterator[Edge]:
        return iter(EdgeSequence(self.n))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"EdgeWeightMap(n={self.n}, check_edges={self.check_edges})"


__all__ = ["EdgeWeightMap", "UNIT_WEIGHT"]
