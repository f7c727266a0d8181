"""Tests for the Edge value type."""

import dataclasses

import pytest

from ringgraph.graph import Edge


class TestEdge:
    """Tests for Edge."""

    def test_fields(self):
        e = Edge(0, 1)
        assert e.source == 0
        assert e.target == 1

    def test_unpacks_as_pair(self):
        u, v = Edge(3, 4)
        assert (u, v) == (3, 4)

    def test_as_tuple(self):
        assert Edge(2, 3).as_tuple() == (2, 3)

    def test_str_uses_angle_brackets(self):
        assert str(Edge(0, 4)) == "<0, 4>"

    def test_swapped_edges_are_distinct_values(self):
        """Same connection, different orientation: not equal."""
        assert Edge(0, 1) != Edge(1, 0)

    def test_swapped_edges_connect_same_vertices(self):
        assert Edge(0, 1).connects(1, 0)
        assert Edge(1, 0).connects(0, 1)
        assert not Edge(0, 1).connects(0, 2)

    def test_reversed(self):
        assert Edge(0, 4).reversed() == Edge(4, 0)

    def test_self_loop(self):
        assert Edge(0, 0).is_self_loop()
        assert not Edge(0, 1).is_self_loop()

    def test_is_hashable(self):
        assert len({Edge(0, 1), Edge(0, 1), Edge(1, 0)}) == 2

    def test_is_frozen(self):
        e = Edge(0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.source = 2
