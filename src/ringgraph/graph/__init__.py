"""Graph module - Implicit ring graph and its query contract.

Exports:
- RingGraph: The ring graph model
- Edge: Ordered (source, target) edge value
- Direction: NEXT/PREV ring directions
- IncidentEdgeIterator, IteratorPosition: Two-state incidence iterator
- AdjacencyIterator: Neighbor iterator
- EdgeSequence: Duplicate-free edge enumeration
- EdgeWeightMap: Read-only edge weights
- Capability: Flag set of supported query families
- check_contract, ContractViolation: Conformance checking
- RingGraphError and subclasses: Precondition failures
"""

from ringgraph.graph.contract import (
    AdjacencyGraph,
    AdjacencyMatrixGraph,
    BidirectionalGraph,
    Capability,
    ContractViolation,
    EdgeListGraph,
    IncidenceGraph,
    VertexListGraph,
    WeightedGraph,
    check_contract,
    supports,
)
from ringgraph.graph.errors import (
    InvalidEdge,
    InvalidTopology,
    IteratorExhausted,
    OutOfRange,
    RingGraphError,
)
from ringgraph.graph.iterators import (
    AdjacencyIterator,
    EdgeSequence,
    IncidentEdgeIterator,
    IteratorPosition,
    vertex_range,
)
from ringgraph.graph.relations import Edge
from ringgraph.graph.ring import RING_DEGREE, RingGraph
from ringgraph.graph.topology import Direction
from ringgraph.graph.weights import UNIT_WEIGHT, EdgeWeightMap

__all__ = [
    "RingGraph",
    "RING_DEGREE",
    "Edge",
    "Direction",
    "vertex_range",
    "IteratorPosition",
    "IncidentEdgeIterator",
    "AdjacencyIterator",
    "EdgeSequence",
    "EdgeWeightMap",
    "UNIT_WEIGHT",
    "Capability",
    "IncidenceGraph",
    "BidirectionalGraph",
    "AdjacencyGraph",
    "VertexListGraph",
    "EdgeListGraph",
    "AdjacencyMatrixGraph",
    "WeightedGraph",
    "supports",
    "ContractViolation",
    "check_contract",
    "RingGraphError",
    "InvalidTopology",
    "OutOfRange",
    "InvalidEdge",
    "IteratorExhausted",
]
