"""Iterators - lazy enumeration of vertices, incident edges and edges.

Nothing here stores graph structure. Each object carries the ring size and
at most one vertex and one position, and computes every value on demand:
- vertex_range: Ascending vertex ids 0..n-1
- IteratorPosition: State tags of the incidence iterator
- IncidentEdgeIterator: The two edges leaving a vertex, NEXT then PREV
- AdjacencyIterator: The two neighbors of a vertex, same order
- EdgeSequence: Every connection of the ring exactly once
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Iterator, Union, overload

from ringgraph.graph.errors import IteratorExhausted
from ringgraph.graph.relations import Edge
from ringgraph.graph.topology import Direction, neighbor


def vertex_range(n: int) -> range:
    """Return the vertices of a ring of size n in ascending order.

    A range is stateless, so it can be iterated any number of times with
    identical results and supports len() and membership tests.
    """
    return range(n)


class IteratorPosition(Enum):
    """Positions of an IncidentEdgeIterator.

    NEXT and PREV are live and name the neighbor produced next. END is the
    terminal tag. advance() moves NEXT -> PREV -> END.
    """

    NEXT = 0
    PREV = 1
    END = 2

    @property
    def direction(self) -> Direction:
        """Ring direction produced at this position."""
        if self is IteratorPosition.END:
            raise IteratorExhausted("END has no direction")
        return Direction.NEXT if self is IteratorPosition.NEXT else Direction.PREV

    def successor(self) -> IteratorPosition:
        """Position reached after one advance(); END is absorbing."""
        if self is IteratorPosition.NEXT:
            return IteratorPosition.PREV
        return IteratorPosition.END


class IncidentEdgeIterator:
    """Iterator over the edges incident to one vertex.

    In an undirected graph every incident edge is also an outgoing edge.
    For vertex u this produces Edge(u, u+1) and then Edge(u, u-1), wrapping
    around the ends of the ring. The source of every produced edge is u.

    Two iterators compare equal when their positions are equal, so a loop
    may stop with ``it == IncidentEdgeIterator.end(u, n)``. The Python
    iterator protocol is layered on the same state machine.
    """

    __slots__ = ("_u", "_n", "_position")

    def __init__(
        self,
        u: int,
        n: int,
        position: IteratorPosition = IteratorPosition.NEXT,
    ) -> None:
        self._u = u
        self._n = n
        self._position = position

    @classmethod
    def end(cls, u: int, n: int) -> IncidentEdgeIterator:
        """Return the past-the-end iterator for vertex u."""
        return cls(u, n, IteratorPosition.END)

    @property
    def vertex(self) -> int:
        """The vertex whose incident edges are iterated."""
        return self._u

    @property
    def position(self) -> IteratorPosition:
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position is IteratorPosition.END

    def dereference(self) -> Edge:
        """Return the edge at the current position.

        Raises:
            IteratorExhausted: If the iterator is at END.
        """
        if self._position is IteratorPosition.END:
            raise IteratorExhausted(f"No incident edge after the last one of vertex {self._u}")
        return Edge(self._u, neighbor(self._u, self._position.direction, self._n))

    def advance(self) -> None:
        """Move to the next position."""
        self._position = self._position.successor()

    def step(self) -> Union[Edge, IteratorPosition]:
        """Produce the current edge and advance, or return END when done."""
        if self._position is IteratorPosition.END:
            return IteratorPosition.END
        edge = self.dereference()
        self.advance()
        return edge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncidentEdgeIterator):
            return NotImplemented
        return self._position is other._position

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> IncidentEdgeIterator:
        return self

    def __next__(self) -> Edge:
        produced = self.step()
        if produced is IteratorPosition.END:
            raise StopIteration
        return produced

    def __length_hint__(self) -> int:
        return 2 - self._position.value

    def __repr__(self) -> str:
        return f"IncidentEdgeIterator(u={self._u}, n={self._n}, position={self._position.name})"


class AdjacencyIterator:
    """Iterator over the neighbors of one vertex, NEXT neighbor first."""

    __slots__ = ("_edges",)

    def __init__(self, u: int, n: int) -> None:
        self._edges = IncidentEdgeIterator(u, n)

    def __iter__(self) -> AdjacencyIterator:
        return self

    def __next__(self) -> int:
        return next(self._edges).target


class EdgeSequence(Sequence):
    """Every connection of the ring, each emitted exactly once.

    Edge ownership rule: vertex u owns Edge(u, (u + 1) mod n), its NEXT
    edge. The sequence walks the vertices in ascending order and yields only
    each vertex's owned edge. The PREV edge of u is the NEXT edge of u - 1,
    so emitting it as well would repeat a connection. In a single cycle every
    physical edge is the NEXT edge of exactly one endpoint, which makes the
    result complete and free of duplicates.

    Consequences at the small sizes: n == 2 yields the doubled connection
    (0, 1), (1, 0) and n == 1 yields the self-loop (0, 0). The length is
    always n.

    The sequence is a view: it is restartable, indexable and supports
    membership tests without materializing anything.
    """

    __slots__ = ("_n",)

    def __init__(self, n: int) -> None:
        self._n = n

    def __len__(self) -> int:
        # There are as many edges as there are vertices.
        return self._n

    @overload
    def __getitem__(self, index: int) -> Edge: ...

    @overload
    def __getitem__(self, index: slice) -> list[Edge]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._n))]
        if index < 0:
            index += self._n
        if not 0 <= index < self._n:
            raise IndexError(f"Edge index {index} out of range for {self._n} edges")
        return self.owned_edge(index)

    def __iter__(self) -> Iterator[Edge]:
        for u in vertex_range(self._n):
            yield self.owned_edge(u)

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, Edge):
            return False
        u, v = edge
        return 0 <= u < self._n and self.owned_edge(u).target == v

    def owned_edge(self, u: int) -> Edge:
        """Return the single edge emitted on behalf of vertex u."""
        return IncidentEdgeIterator(u, self._n).dereference()

    def __repr__(self) -> str:
        return f"EdgeSequence(n={self._n})"


__all__ = [
    "vertex_range",
    "IteratorPosition",
    "IncidentEdgeIterator",
    "AdjacencyIterator",
    "EdgeSequence",
]
