"""Tests for RingGraph - the aggregate graph contract."""

import pytest

from ringgraph.graph import (
    Direction,
    Edge,
    IncidentEdgeIterator,
    InvalidTopology,
    OutOfRange,
    RingGraph,
    RingGraphError,
)


class TestConstruction:
    """Tests for creating ring graphs."""

    def test_size(self, ring5):
        assert ring5.n == 5
        assert ring5.order() == 5
        assert ring5.num_vertices() == 5
        assert len(ring5) == 5

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive_size_rejected(self, n):
        with pytest.raises(InvalidTopology):
            RingGraph(n)

    @pytest.mark.parametrize("n", [2.0, "5", None, True])
    def test_non_integer_size_rejected(self, n):
        with pytest.raises(InvalidTopology):
            RingGraph(n)

    def test_invalid_topology_is_value_error(self):
        with pytest.raises(ValueError, match="positive integer"):
            RingGraph(0)

    def test_immutable(self, ring5):
        with pytest.raises(AttributeError):
            ring5.n = 6
        with pytest.raises(AttributeError):
            ring5.extra = 1

    def test_equality_and_hash(self):
        assert RingGraph(4) == RingGraph(4)
        assert RingGraph(4) != RingGraph(5)
        assert len({RingGraph(4), RingGraph(4)}) == 1

    def test_equality_includes_edge_checking(self):
        checked = RingGraph(5)
        unchecked = RingGraph(5, check_edges=False)
        assert checked != unchecked
        assert len({checked, unchecked}) == 2
        assert repr(unchecked) == "RingGraph(n=5, check_edges=False)"

    def test_repr(self, ring5):
        assert repr(ring5) == "RingGraph(n=5)"

    def test_from_config(self):
        config = {"graph": {"size": 7}, "weights": {"check_edges": False}}
        graph = RingGraph.from_config(config)
        assert graph.n == 7
        assert graph.check_edges is False

    def test_from_config_explicit_size_wins(self):
        graph = RingGraph.from_config({"graph": {"size": 7}}, n=3)
        assert graph.n == 3


class TestVertices:
    """Tests for vertex enumeration."""

    def test_vertices_ascending(self, ring5):
        assert list(ring5.vertices()) == [0, 1, 2, 3, 4]

    def test_has_vertex(self, ring5):
        assert ring5.has_vertex(0)
        assert ring5.has_vertex(4)
        assert not ring5.has_vertex(5)
        assert not ring5.has_vertex(-1)
        assert not ring5.has_vertex("0")


class TestIncidence:
    """Tests for out_edges / incident_edges / degree."""

    def test_out_edges_of_zero(self, ring5):
        assert list(ring5.out_edges(0)) == [Edge(0, 1), Edge(0, 4)]

    def test_out_edges_is_incidence_iterator(self, ring5):
        assert isinstance(ring5.out_edges(0), IncidentEdgeIterator)

    def test_incident_edges_matches_out_edges(self, ring5):
        for u in ring5.vertices():
            assert list(ring5.incident_edges(u)) == list(ring5.out_edges(u))

    def test_incident_pairs(self, ring5):
        assert ring5.incident_pairs(3) == [(Edge(3, 4), 4), (Edge(3, 2), 2)]

    def test_every_incident_edge_starts_at_vertex(self, make_ring):
        graph = make_ring(8)
        for u in graph.vertices():
            assert all(graph.source(e) == u for e in graph.out_edges(u))

    def test_degree_is_two(self, make_ring):
        for n in (1, 2, 3, 10):
            graph = make_ring(n)
            for u in graph.vertices():
                assert graph.degree(u) == 2
                assert graph.out_degree(u) == 2
                assert graph.in_degree(u) == 2

    def test_neighbor_direction(self, ring5):
        assert ring5.neighbor(0, Direction.PREV) == 4
        assert ring5.neighbor(4, Direction.NEXT) == 0

    @pytest.mark.parametrize("u", [-1, 5, 100])
    def test_out_of_range_vertex(self, ring5, u):
        with pytest.raises(OutOfRange):
            ring5.out_edges(u)
        with pytest.raises(OutOfRange):
            ring5.degree(u)
        with pytest.raises(OutOfRange):
            ring5.neighbors(u)

    def test_out_of_range_is_index_error(self, ring5):
        with pytest.raises(IndexError):
            ring5.adjacent_vertices(5)

    def test_errors_share_base_class(self, ring5):
        with pytest.raises(RingGraphError):
            ring5.neighbor(9, Direction.NEXT)


class TestInEdges:
    """Tests for in_edges."""

    def test_in_edges_end_at_vertex(self, ring5):
        assert list(ring5.in_edges(0)) == [Edge(1, 0), Edge(4, 0)]

    def test_in_edge_targets(self, make_ring):
        graph = make_ring(6)
        for u in graph.vertices():
            assert all(graph.target(e) == u for e in graph.in_edges(u))


class TestAdjacency:
    """Tests for neighbors / adjacent_vertices."""

    def test_neighbors_of_zero(self, ring5):
        assert set(ring5.neighbors(0)) == {1, 4}
        assert ring5.neighbors(0) == (1, 4)

    def test_adjacent_vertices_order(self, ring5):
        assert list(ring5.adjacent_vertices(2)) == [3, 1]

    @pytest.mark.parametrize("n", [3, 4, 5, 12])
    def test_two_distinct_symmetric_neighbors(self, make_ring, n):
        graph = make_ring(n)
        for u in graph.vertices():
            neighbors = graph.neighbors(u)
            assert len(neighbors) == 2
            assert len(set(neighbors)) == 2
            for v in neighbors:
                assert u in graph.neighbors(v)


class TestEdges:
    """Tests for edges / num_edges / endpoints."""

    def test_edges_of_ring_five(self, ring5):
        assert [e.as_tuple() for e in ring5.edges()] == [
            (0, 1),
            (1, 2),
            (2, 3),
            (3, 4),
            (4, 0),
        ]

    def test_edges_of_ring_three(self, ring3):
        assert [e.as_tuple() for e in ring3.edges()] == [(0, 1), (1, 2), (2, 0)]

    @pytest.mark.parametrize("n", [2, 3, 5, 17])
    def test_edge_count_equals_vertex_count(self, make_ring, n):
        graph = make_ring(n)
        assert graph.num_edges() == n
        assert len(list(graph.edges())) == n
        assert graph.order() == n

    def test_source_and_target(self, ring5):
        e = Edge(3, 4)
        assert ring5.source(e) == 3
        assert ring5.target(e) == 4

    def test_source_is_producing_vertex(self, ring5):
        for u, e in zip(ring5.vertices(), ring5.edges()):
            assert ring5.source(e) == u


class TestAdjacencyMatrix:
    """Tests for edge(u, v) and has_edge."""

    def test_edge_lookup_found(self, ring5):
        assert ring5.edge(0, 4) == (Edge(0, 4), True)

    def test_edge_lookup_missing(self, ring5):
        assert ring5.edge(0, 2) == (None, False)

    def test_edge_lookup_out_of_range(self, ring5):
        with pytest.raises(OutOfRange):
            ring5.edge(0, 5)

    def test_has_edge_either_orientation(self, ring5):
        assert ring5.has_edge(Edge(0, 4))
        assert ring5.has_edge(Edge(4, 0))
        assert not ring5.has_edge(Edge(1, 3))
        assert not ring5.has_edge((0, 1))


class TestSmallRings:
    """The documented policies for n=1 and n=2."""

    def test_two_vertex_ring_doubles_the_connection(self, ring2):
        assert ring2.neighbors(0) == (1, 1)
        assert ring2.neighbors(1) == (0, 0)
        assert list(ring2.edges()) == [Edge(0, 1), Edge(1, 0)]
        assert ring2.num_edges() == 2

    def test_single_vertex_ring_has_counted_self_loop(self, ring1):
        assert ring1.neighbors(0) == (0, 0)
        assert list(ring1.out_edges(0)) == [Edge(0, 0), Edge(0, 0)]
        assert list(ring1.edges()) == [Edge(0, 0)]
        assert ring1.num_edges() == 1
        assert ring1.degree(0) == 2

    def test_single_vertex_self_loop_weighs_one(self, ring1):
        assert ring1.weight(Edge(0, 0)) == 1.0
