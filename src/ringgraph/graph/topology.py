"""Ring topology - neighbor arithmetic for a cycle of n vertices.

Vertices are the integers 0..n-1. Vertex i is adjacent to i+1 and i-1,
and vertex 0 is also adjacent to n-1:

                    0
                  /   \\
                4      1
                |      |
                3 ---- 2

Every function here is a pure computation over (u, n). None of them check
that u is in range; the graph does that before calling in.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """The two ways to leave a vertex on the ring."""

    NEXT = "next"
    PREV = "prev"


# Incidence and adjacency are always produced in this order.
CANONICAL_ORDER: tuple[Direction, Direction] = (Direction.NEXT, Direction.PREV)


def neighbor(u: int, direction: Direction, n: int) -> int:
    """Return the vertex one step from u in the given direction.

    Args:
        u: A vertex in [0, n).
        direction: NEXT or PREV.
        n: Ring size.

    Returns:
        (u + 1) mod n for NEXT; n - 1 for PREV at vertex 0, else u - 1.
    """
    if direction is Direction.NEXT:
        return (u + 1) % n
    if u == 0:
        return n - 1  # Wrap around to the largest vertex
    return u - 1


def neighbors_of(u: int, n: int) -> tuple[int, int]:
    """Return both neighbors of u in canonical order."""
    return (neighbor(u, Direction.NEXT, n), neighbor(u, Direction.PREV, n))


def are_adjacent(u: int, v: int, n: int) -> bool:
    """Check whether u and v are joined by a ring edge.

    Both vertices must lie in [0, n); anything else is not adjacent.
    """
    if not (0 <= u < n and 0 <= v < n):
        return False
    return v in neighbors_of(u, n)


def owning_vertex(u: int, v: int, n: int) -> int:
    """Return the endpoint that owns the connection between u and v.

    Edge ownership rule: each physical edge belongs to the one endpoint for
    which it is the NEXT edge. Global edge enumeration emits an edge only
    from its owner, so every connection appears exactly once.

    For n == 2 both vertices own one of the two parallel connections; the
    connection (u, v) is then attributed to u.

    Raises:
        ValueError: If u and v are not adjacent.
    """
    if not are_adjacent(u, v, n):
        raise ValueError(f"Vertices {u} and {v} are not adjacent in a ring of size {n}")
    if neighbor(u, Direction.NEXT, n) == v:
        return u
    return v


__all__ = [
    "Direction",
    "CANONICAL_ORDER",
    "neighbor",
    "neighbors_of",
    "are_adjacent",
    "owning_vertex",
]
