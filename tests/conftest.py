"""Shared fixtures for matrixgraph tests."""

import pytest

from matrixgraph import MatrixGraph, pymatrixgraph


@pytest.fixture
def empty_graph():
    return MatrixGraph()


@pytest.fixture
def square_graph():
    """Even cycle on four vertices."""
    return pymatrixgraph([(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def triangle_graph():
    """Odd cycle on three vertices."""
    return pymatrixgraph([(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def star_graph():
    """Vertex 0 joined to vertices 1, 2 and 3."""
    return pymatrixgraph([(0, 1), (0, 2), (0, 3)])
