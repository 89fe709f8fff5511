"""Shared fixtures: small arc topologies and a configured Albers USA projection."""

import pytest

from topology.arc_ids import ArcId
from topology.arcs import ArcCollection
from topology.nodes import NodeCollection


def forward_path(n):
    return [ArcId(i) for i in range(n)]


@pytest.fixture
def square():
    """Four arcs forming the unit square, traversed clockwise."""
    arcs = ArcCollection([
        [(0, 0), (0, 1)],
        [(0, 1), (1, 1)],
        [(1, 1), (1, 0)],
        [(1, 0), (0, 0)],
    ])
    return arcs, NodeCollection(arcs), forward_path(4)


@pytest.fixture
def figure_eight():
    """Eight arcs forming two diamonds that share the vertex (0, 0)."""
    arcs = ArcCollection([
        [(0, 0), (1, 1)],
        [(1, 1), (2, 0)],
        [(2, 0), (1, -1)],
        [(1, -1), (0, 0)],
        [(0, 0), (-1, -1)],
        [(-1, -1), (-2, 0)],
        [(-2, 0), (-1, 1)],
        [(-1, 1), (0, 0)],
    ])
    return arcs, NodeCollection(arcs), forward_path(8)


@pytest.fixture
def cloverleaf():
    """Three triangular loops meeting at (0, 0), visited in one ring."""
    arcs = ArcCollection([
        [(0, 0), (1, 2)],
        [(1, 2), (2, 1)],
        [(2, 1), (0, 0)],
        [(0, 0), (-2, 1)],
        [(-2, 1), (-1, 2)],
        [(-1, 2), (0, 0)],
        [(0, 0), (-1, -2)],
        [(-1, -2), (1, -2)],
        [(1, -2), (0, 0)],
    ])
    return arcs, NodeCollection(arcs), forward_path(9)


@pytest.fixture
def chained_loops():
    """
    Ring touching itself at two nodes: a loop at (0, 0), a loop at (4, 0)
    and a middle loop between them. Needs a second split after the first.
    """
    arcs = ArcCollection([
        [(0, 0), (-1, 1), (-2, 0)],
        [(-2, 0), (-1, -1), (0, 0)],
        [(0, 0), (2, 1), (4, 0)],
        [(4, 0), (5, 1), (6, 0)],
        [(6, 0), (5, -1), (4, 0)],
        [(4, 0), (2, -1), (0, 0)],
    ])
    return arcs, NodeCollection(arcs), forward_path(6)


@pytest.fixture
def square_with_spike():
    """Unit square with a dangling arc at (0, 1) that the ring runs out and back."""
    arcs = ArcCollection([
        [(0, 0), (0, 1)],
        [(0, 1), (1, 1)],
        [(1, 1), (1, 0)],
        [(1, 0), (0, 0)],
        [(0, 1), (-1, 2)],
    ])
    path = [ArcId(0), ArcId(4), ArcId(4, True), ArcId(1), ArcId(2), ArcId(3)]
    return arcs, NodeCollection(arcs), path
