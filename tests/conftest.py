"""Shared fixtures for the Boruvka MST tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from boruvka_implementation import Edge, Vertex


@pytest.fixture
def abcd_graph():
    """Four vertices with a unique MST of weight 6."""
    vertices = [Vertex("A"), Vertex("B"), Vertex("C"), Vertex("D")]
    edges = [
        Edge(0, 1, 1),
        Edge(1, 2, 2),
        Edge(2, 3, 3),
        Edge(0, 3, 4),
        Edge(0, 2, 5),
    ]
    return vertices, edges


@pytest.fixture
def two_triangles():
    """Two disjoint 3-cycles with no edge between them."""
    edges = [
        Edge(0, 1, 3),
        Edge(1, 2, 1),
        Edge(0, 2, 2),
        Edge(3, 4, 5),
        Edge(4, 5, 4),
        Edge(3, 5, 6),
    ]
    return 6, edges
