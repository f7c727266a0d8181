"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def ring5():
    """The five-vertex ring used throughout the examples."""
    from ringgraph.graph import RingGraph

    return RingGraph(5)


@pytest.fixture
def ring3():
    """Smallest ring with two distinct neighbors per vertex."""
    from ringgraph.graph import RingGraph

    return RingGraph(3)


@pytest.fixture
def ring2():
    """Two vertices joined by a doubled connection."""
    from ringgraph.graph import RingGraph

    return RingGraph(2)


@pytest.fixture
def ring1():
    """Single vertex with a self-loop."""
    from ringgraph.graph import RingGraph

    return RingGraph(1)


@pytest.fixture
def make_ring():
    """Factory for rings of any size."""
    from ringgraph.graph import RingGraph

    def _make(n, **kwargs):
        return RingGraph(n, **kwargs)

    return _make
