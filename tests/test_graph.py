"""Tests for the MatrixGraph store.

This module tests:
1. Edge insertion, symmetry and the edge log
2. Bounds checking and configuration errors
3. Matrix ingestion
4. Read access used by analyses and display
"""

import logging

import numpy as np
import pytest

from matrixgraph import (
    DEFAULT_VERTEX_COUNT_BOUND,
    InconsistentMatrixError,
    MalformedInputError,
    MatrixGraph,
    VertexOutOfRangeError,
)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Test graph creation and capacity configuration."""

    def test_default_bound(self, empty_graph):
        assert empty_graph.vertex_count_bound == DEFAULT_VERTEX_COUNT_BOUND
        assert empty_graph.adjacency_matrix.shape == (DEFAULT_VERTEX_COUNT_BOUND, DEFAULT_VERTEX_COUNT_BOUND)

    def test_custom_bound(self):
        graph = MatrixGraph(5)
        assert graph.vertex_count_bound == 5
        assert graph.adjacency_matrix.shape == (5, 5)

    @pytest.mark.parametrize("bound", [0, -3])
    def test_non_positive_bound_rejected(self, bound):
        with pytest.raises(ValueError, match="positive"):
            MatrixGraph(bound)

    @pytest.mark.parametrize("bound", ["5", 2.5, True])
    def test_non_integer_bound_rejected(self, bound):
        with pytest.raises(ValueError, match="integer"):
            MatrixGraph(bound)

    def test_empty_graph_has_single_vertex(self, empty_graph):
        """With no edges the active range is just vertex 0."""
        assert empty_graph.highest_vertex_seen == 0
        assert list(empty_graph.vertex_range()) == [0]
        assert empty_graph.get_edge_count() == 0


# =============================================================================
# Edge insertion
# =============================================================================


class TestAddEdge:
    """Test edge insertion semantics."""

    def test_edge_is_symmetric(self, empty_graph):
        empty_graph.add_edge(2, 5)
        assert empty_graph.has_edge(2, 5)
        assert empty_graph.has_edge(5, 2)

    def test_highest_vertex_tracked(self, empty_graph):
        empty_graph.add_edge(3, 1)
        assert empty_graph.highest_vertex_seen == 3
        empty_graph.add_edge(0, 2)
        assert empty_graph.highest_vertex_seen == 3
        assert list(empty_graph.vertex_range()) == [0, 1, 2, 3]

    def test_edge_log_keeps_insertion_order(self, empty_graph):
        empty_graph.add_edge(1, 2)
        empty_graph.add_edge(0, 1)
        assert empty_graph.get_edges() == [(1, 2), (0, 1)]

    def test_duplicate_edge_only_extends_log(self, empty_graph):
        empty_graph.add_edge(0, 1)
        matrix_once = empty_graph.get_matrix()
        empty_graph.add_edge(0, 1)

        np.testing.assert_array_equal(empty_graph.get_matrix(), matrix_once)
        assert empty_graph.get_edge_count() == 2

    def test_self_loop_is_representable(self, empty_graph):
        empty_graph.add_edge(1, 1)
        assert empty_graph.self_loop(1)
        assert not empty_graph.self_loop(0)

    def test_add_edges_returns_count(self, empty_graph):
        assert empty_graph.add_edges([(0, 1), (1, 2), [2, 3]]) == 3
        assert empty_graph.has_edge(3, 2)

    def test_add_edges_rejects_bad_pair(self, empty_graph):
        with pytest.raises(MalformedInputError):
            empty_graph.add_edges([(0, 1, 2)])


# =============================================================================
# Bounds checking
# =============================================================================


class TestBounds:
    """Test out-of-range vertex handling."""

    def test_vertex_equal_to_bound_rejected(self):
        graph = MatrixGraph(4)
        with pytest.raises(VertexOutOfRangeError) as excinfo:
            graph.add_edge(0, 4)
        assert excinfo.value.vertex_id == 4
        assert excinfo.value.vertex_count_bound == 4

    def test_negative_vertex_rejected(self, empty_graph):
        with pytest.raises(VertexOutOfRangeError):
            empty_graph.add_edge(-1, 0)

    def test_failed_insert_leaves_graph_unchanged(self):
        graph = MatrixGraph(4)
        with pytest.raises(VertexOutOfRangeError):
            graph.add_edge(2, 9)
        assert graph.get_edge_count() == 0
        assert graph.highest_vertex_seen == 0
        assert not graph.adjacency_matrix.any()

    def test_out_of_range_is_an_index_error(self):
        graph = MatrixGraph(2)
        with pytest.raises(IndexError):
            graph.has_edge(0, 2)

    @pytest.mark.parametrize("vertex", [1.9, 29.5, "3", None, True])
    def test_non_integer_vertex_rejected(self, vertex):
        """Ids are never truncated into range."""
        graph = MatrixGraph(30)
        with pytest.raises(MalformedInputError, match="integer"):
            graph.add_edge(vertex, 3)
        assert graph.get_edges() == []
        assert not graph.adjacency_matrix.any()

    def test_numpy_integer_vertex_accepted(self):
        graph = MatrixGraph(5)
        graph.add_edge(np.int64(1), np.int32(3))
        assert graph.get_edges() == [(1, 3)]
        assert all(type(vertex) is int for vertex in graph.get_edges()[0])

    def test_non_integer_lookup_rejected(self, empty_graph):
        with pytest.raises(MalformedInputError):
            empty_graph.has_edge(0.0, 1)

    def test_last_valid_vertex_accepted(self):
        graph = MatrixGraph(4)
        graph.add_edge(0, 3)
        assert graph.has_edge(3, 0)


# =============================================================================
# Matrix ingestion
# =============================================================================


class TestLoadMatrix:
    """Test building a graph from an adjacency matrix."""

    def test_entries_become_edges(self, empty_graph):
        empty_graph.load_matrix([
            [0, 1, 0],
            [1, 0, 1],
            [0, 1, 0],
        ])
        assert empty_graph.has_edge(0, 1)
        assert empty_graph.has_edge(1, 2)
        assert not empty_graph.has_edge(0, 2)

    def test_highest_vertex_from_dimension(self, empty_graph):
        """Isolated trailing vertices stay in range."""
        empty_graph.load_matrix(np.zeros((4, 4), dtype=int))
        assert empty_graph.highest_vertex_seen == 3
        assert empty_graph.get_edge_count() == 0

    def test_asymmetric_matrix_is_symmetrised(self, empty_graph, caplog):
        with caplog.at_level(logging.WARNING):
            empty_graph.load_matrix([[0, 1], [0, 0]])
        assert empty_graph.has_edge(1, 0)
        assert "not symmetric" in caplog.text

    def test_non_square_rejected(self, empty_graph):
        with pytest.raises(InconsistentMatrixError):
            empty_graph.load_matrix([[0, 1], [1, 0, 0]])

    def test_invalid_entry_rejected(self, empty_graph):
        with pytest.raises(MalformedInputError):
            empty_graph.load_matrix([[0, 2], [2, 0]])

    def test_oversized_matrix_rejected(self):
        graph = MatrixGraph(2)
        with pytest.raises(VertexOutOfRangeError):
            graph.load_matrix(np.zeros((3, 3), dtype=int))

    def test_empty_matrix_is_noop(self, empty_graph):
        empty_graph.load_matrix([])
        assert empty_graph.get_vertex_count() == 1
        assert empty_graph.get_edge_count() == 0


# =============================================================================
# Read access
# =============================================================================


class TestReadAccess:
    """Test queries used by the analyses and by display code."""

    def test_neighbors_sorted(self, empty_graph):
        empty_graph.add_edges([(2, 4), (2, 0), (2, 3)])
        assert empty_graph.neighbors(2) == [0, 3, 4]
        assert empty_graph.neighbors(1) == []

    def test_get_matrix_restricted_to_active_range(self, empty_graph):
        empty_graph.add_edge(0, 2)
        matrix = empty_graph.get_matrix()
        assert matrix.shape == (3, 3)
        np.testing.assert_array_equal(matrix, [[0, 0, 1], [0, 0, 0], [1, 0, 0]])

    def test_get_matrix_is_a_copy(self, empty_graph):
        empty_graph.add_edge(0, 1)
        matrix = empty_graph.get_matrix()
        matrix[0, 1] = 0
        assert empty_graph.has_edge(0, 1)

    def test_repr(self):
        graph = MatrixGraph(8)
        graph.add_edge(0, 1)
        assert repr(graph) == "MatrixGraph(vertex_count_bound=8, vertices=2, edges=1)"
