"""Errors raised by ring graph queries.

All failures are precondition violations reported synchronously to the
caller. Each error also derives from the built-in exception a caller would
naturally catch for that kind of misuse.
"""

from __future__ import annotations


class RingGraphError(Exception):
    """Base class for all ring graph errors."""


class InvalidTopology(RingGraphError, ValueError):
    """The vertex count does not describe a ring."""

    def __init__(self, n: object) -> None:
        self.n = n
        super().__init__(f"Ring size must be a positive integer, got {n!r}")


class OutOfRange(RingGraphError, IndexError):
    """A vertex outside [0, n) was queried."""

    def __init__(self, vertex: object, n: int) -> None:
        self.vertex = vertex
        self.n = n
        super().__init__(f"Vertex {vertex!r} is not in range [0, {n})")


class InvalidEdge(RingGraphError, KeyError):
    """An edge does not connect two ring-adjacent vertices."""

    def __init__(self, edge: object, n: int) -> None:
        self.edge = edge
        self.n = n
        super().__init__(edge, n)

    def __str__(self) -> str:
        return f"{self.edge!r} is not an edge of the ring of size {self.n}"


class IteratorExhausted(RingGraphError):
    """An incidence iterator was dereferenced at its END position."""


__all__ = [
    "RingGraphError",
    "InvalidTopology",
    "OutOfRange",
    "InvalidEdge",
    "IteratorExhausted",
]
