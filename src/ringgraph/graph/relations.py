"""Relations - Edge values of the ring graph.

This module defines the edge descriptor handed out by every query:
- Edge: An ordered (source, target) pair of vertices
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """An ordered pair of vertices denoting an undirected connection.

    The source is the vertex the edge was produced for: the queried vertex
    for incidence, the owning vertex for global edge enumeration. Two edges
    with swapped endpoints describe the same connection but are different
    values; nothing here deduplicates them.

    Attributes:
        source: The endpoint the edge was produced from.
        target: The other endpoint.
    """

    source: int
    target: int

    def __iter__(self) -> Iterator[int]:
        """Unpack as ``u, v = edge``."""
        yield self.source
        yield self.target

    def __str__(self) -> str:
        return f"<{self.source}, {self.target}>"

    def as_tuple(self) -> tuple[int, int]:
        """Return the edge as a plain ``(source, target)`` tuple."""
        return (self.source, self.target)

    def reversed(self) -> Edge:
        """Return the same connection seen from the target."""
        return Edge(self.target, self.source)

    def connects(self, u: int, v: int) -> bool:
        """Check whether this edge joins u and v in either direction."""
        return {self.source, self.target} == {u, v}

    def is_self_loop(self) -> bool:
        """True when both endpoints are the same vertex."""
        return self.source == self.target


__all__ = ["Edge"]
