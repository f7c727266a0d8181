"""Graph contract - capabilities a topology offers to generic algorithms.

A graph advertises what it supports through a Capability flag set. Each
flag has a matching runtime-checkable Protocol listing the operations that
capability requires, so conformance is a structural check rather than an
inheritance relationship:

- Capability: Flag set describing supported query families
- IncidenceGraph, BidirectionalGraph, AdjacencyGraph, VertexListGraph,
  EdgeListGraph, AdjacencyMatrixGraph, WeightedGraph: Per-capability protocols
- ContractViolation: A single failed conformance rule
- check_contract: Black-box conformance test for any graph
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Flag, auto
from typing import Any, Iterable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class Capability(Flag):
    """Query families a graph type supports."""

    INCIDENCE = auto()
    BIDIRECTIONAL = auto()
    ADJACENCY = auto()
    VERTEX_LIST = auto()
    EDGE_LIST = auto()
    ADJACENCY_MATRIX = auto()
    WEIGHTED = auto()


@runtime_checkable
class IncidenceGraph(Protocol):
    """Outgoing edges of a vertex and the endpoints of an edge."""

    def out_edges(self, u: int) -> Iterable[Any]: ...

    def out_degree(self, u: int) -> int: ...

    def source(self, e: Any) -> int: ...

    def target(self, e: Any) -> int: ...


@runtime_checkable
class BidirectionalGraph(Protocol):
    """Incoming edges in addition to outgoing ones."""

    def in_edges(self, u: int) -> Iterable[Any]: ...

    def in_degree(self, u: int) -> int: ...

    def degree(self, u: int) -> int: ...


@runtime_checkable
class AdjacencyGraph(Protocol):
    """Neighbors of a vertex without going through edges."""

    def adjacent_vertices(self, u: int) -> Iterable[int]: ...


@runtime_checkable
class VertexListGraph(Protocol):
    """Enumeration and count of all vertices."""

    def vertices(self) -> Iterable[int]: ...

    def num_vertices(self) -> int: ...


@runtime_checkable
class EdgeListGraph(Protocol):
    """Enumeration and count of all edges."""

    def edges(self) -> Iterable[Any]: ...

    def num_edges(self) -> int: ...

    def source(self, e: Any) -> int: ...

    def target(self, e: Any) -> int: ...


@runtime_checkable
class AdjacencyMatrixGraph(Protocol):
    """Direct edge lookup between two vertices."""

    def edge(self, u: int, v: int) -> tuple[Any, bool]: ...


@runtime_checkable
class WeightedGraph(Protocol):
    """Read-only edge weights."""

    def weight(self, e: Any) -> float: ...


CAPABILITY_PROTOCOLS: dict[Capability, type] = {
    Capability.INCIDENCE: IncidenceGraph,
    Capability.BIDIRECTIONAL: BidirectionalGraph,
    Capability.ADJACENCY: AdjacencyGraph,
    Capability.VERTEX_LIST: VertexListGraph,
    Capability.EDGE_LIST: EdgeListGraph,
    Capability.ADJACENCY_MATRIX: AdjacencyMatrixGraph,
    Capability.WEIGHTED: WeightedGraph,
}


def supports(graph: Any, capability: Capability) -> bool:
    """Check that graph declares every flag in capability."""
    declared = getattr(graph, "capabilities", Capability(0))
    return capability in declared


@dataclass
class ContractViolation:
    """A conformance rule a graph failed.

    Attributes:
        rule: Name of the violated rule (e.g., "adjacency.symmetry").
        message: Human-readable description of the violation.
        vertex: Vertex the violation was found at, if any.
    """

    rule: str
    message: str
    vertex: int | None = None

    def __str__(self) -> str:
        where = f" (vertex {self.vertex})" if self.vertex is not None else ""
        return f"[{self.rule}]{where} {self.message}"


def check_contract(graph: Any) -> list[ContractViolation]:
    """Run every conformance rule that applies to the graph's capabilities.

    Rules for a capability run only when the graph declares it. Vertex-level
    rules need VERTEX_LIST to find the vertices at all.

    Args:
        graph: Any object exposing a ``capabilities`` flag set.

    Returns:
        List of violations, empty when the graph conforms.
    """
    violations: list[ContractViolation] = []
    declared = getattr(graph, "capabilities", None)
    if not isinstance(declared, Capability):
        return [ContractViolation("capability.descriptor", "Graph declares no capabilities")]

    for capability, protocol in CAPABILITY_PROTOCOLS.items():
        if capability in declared and not isinstance(graph, protocol):
            violations.append(
                ContractViolation(
                    "capability.missing",
                    f"Declares {capability.name} but does not implement {protocol.__name__}",
                )
            )
    if violations or Capability.VERTEX_LIST not in declared:
        return violations

    vertices = list(graph.vertices())
    if len(vertices) != graph.num_vertices():
        violations.append(
            ContractViolation(
                "vertices.count",
                f"vertices() produced {len(vertices)}, num_vertices() is {graph.num_vertices()}",
            )
        )
    if vertices != sorted(set(vertices)):
        violations.append(
            ContractViolation("vertices.order", "vertices() is not strictly ascending")
        )

    if Capability.INCIDENCE in declared:
        violations.extend(_check_incidence(graph, vertices))
    if Capability.BIDIRECTIONAL in declared:
        violations.extend(_check_bidirectional(graph, vertices))
    if Capability.ADJACENCY in declared:
        violations.extend(_check_adjacency(graph, vertices))
    if Capability.EDGE_LIST in declared:
        violations.extend(_check_edge_list(graph, vertices))
    if Capability.ADJACENCY_MATRIX in declared:
        violations.extend(_check_adjacency_matrix(graph, vertices))
    if Capability.WEIGHTED in declared and Capability.EDGE_LIST in declared:
        violations.extend(_check_weights(graph))

    logger.debug("Contract check found %d violation(s)", len(violations))
    return violations


def _check_incidence(graph: Any, vertices: list[int]) -> list[ContractViolation]:
    violations = []
    for u in vertices:
        out = list(graph.out_edges(u))
        if len(out) != graph.out_degree(u):
            violations.append(
                ContractViolation(
                    "incidence.degree",
                    f"out_edges produced {len(out)} edges, out_degree is {graph.out_degree(u)}",
                    u,
                )
            )
        for e in out:
            if graph.source(e) != u:
                violations.append(
                    ContractViolation(
                        "incidence.source", f"Edge {e} has source {graph.source(e)}", u
                    )
                )
    return violations


def _check_bidirectional(graph: Any, vertices: list[int]) -> list[ContractViolation]:
    violations = []
    for u in vertices:
        incoming = list(graph.in_edges(u))
        if len(incoming) != graph.in_degree(u):
            violations.append(
                ContractViolation(
                    "bidirectional.degree",
                    f"in_edges produced {len(incoming)} edges, in_degree is {graph.in_degree(u)}",
                    u,
                )
            )
        for e in incoming:
            if graph.target(e) != u:
                violations.append(
                    ContractViolation(
                        "bidirectional.target", f"Edge {e} has target {graph.target(e)}", u
                    )
                )
    return violations


def _check_adjacency(graph: Any, vertices: list[int]) -> list[ContractViolation]:
    violations = []
    for u in vertices:
        adjacent = list(graph.adjacent_vertices(u))
        if Capability.INCIDENCE in graph.capabilities:
            expected = [graph.target(e) for e in graph.out_edges(u)]
            if adjacent != expected:
                violations.append(
                    ContractViolation(
                        "adjacency.order",
                        f"adjacent_vertices {adjacent} differs from out edge targets {expected}",
                        u,
                    )
                )
        for v in adjacent:
            if u not in graph.adjacent_vertices(v):
                violations.append(
                    ContractViolation(
                        "adjacency.symmetry", f"{v} is adjacent to {u} but not the reverse", u
                    )
                )
    return violations


def _check_edge_list(graph: Any, vertices: list[int]) -> list[ContractViolation]:
    violations = []
    edges = list(graph.edges())
    if len(edges) != graph.num_edges():
        violations.append(
            ContractViolation(
                "edges.count",
                f"edges() produced {len(edges)}, num_edges() is {graph.num_edges()}",
            )
        )

    listed = Counter(frozenset((graph.source(e), graph.target(e))) for e in edges)
    if Capability.INCIDENCE in graph.capabilities:
        # Each connection shows up twice across all incidence lists: once
        # from each end, or twice from the same vertex for a self-loop.
        incident: Counter[frozenset[int]] = Counter()
        for u in vertices:
            for e in graph.out_edges(u):
                incident[frozenset((graph.source(e), graph.target(e)))] += 1
        expected = Counter({pair: count // 2 for pair, count in incident.items()})
        for pair in sorted(set(listed) | set(expected), key=sorted):
            if listed[pair] < expected[pair]:
                violations.append(
                    ContractViolation(
                        "edges.coverage",
                        f"Connection {sorted(pair)} listed {listed[pair]} time(s), "
                        f"expected {expected[pair]}",
                    )
                )
            elif listed[pair] > expected[pair]:
                violations.append(
                    ContractViolation(
                        "edges.duplicate",
                        f"Connection {sorted(pair)} listed {listed[pair]} time(s), "
                        f"expected {expected[pair]}",
                    )
                )
    return violations


def _check_adjacency_matrix(graph: Any, vertices: list[int]) -> list[ContractViolation]:
    violations = []
    if Capability.INCIDENCE not in graph.capabilities:
        return violations
    for u in vertices:
        for e in graph.out_edges(u):
            _, exists = graph.edge(u, graph.target(e))
            if not exists:
                violations.append(
                    ContractViolation(
                        "matrix.lookup", f"edge({u}, {graph.target(e)}) not found", u
                    )
                )
    return violations


def _check_weights(graph: Any) -> list[ContractViolation]:
    violations = []
    for e in graph.edges():
        w = graph.weight(e)
        if not isinstance(w, float) or w < 0:
            violations.append(
                ContractViolation(
                    "weight.value", f"Edge {e} has weight {w!r}", graph.source(e)
                )
            )
    return violations


__all__ = [
    "Capability",
    "IncidenceGraph",
    "BidirectionalGraph",
    "AdjacencyGraph",
    "VertexListGraph",
    "EdgeListGraph",
    "AdjacencyMatrixGraph",
    "WeightedGraph",
    "CAPABILITY_PROTOCOLS",
    "supports",
    "ContractViolation",
    "check_contract",
]
