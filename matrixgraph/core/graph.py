"""
Core graph data structure for undirected graph analysis.

This module provides the fundamental dense-matrix graph store without any
analysis operations.
"""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from ..classes.exceptions import (
    InconsistentMatrixError,
    MalformedInputError,
    VertexOutOfRangeError,
)

logger = logging.getLogger(__name__)

# Capacity used when the caller does not choose one
DEFAULT_VERTEX_COUNT_BOUND = 30


class MatrixGraph:
    """
    Core undirected graph store backed by a dense adjacency matrix.

    This class manages the fundamental graph representation without analysis
    operations. It provides:
    - Bounds-checked edge insertion
    - Matrix ingestion as an alternative construction path
    - Edge lookup and neighbor queries over the active vertex range
    - An ordered log of inserted edges
    """

    def __init__(self, vertex_count_bound: int = DEFAULT_VERTEX_COUNT_BOUND):
        """
        Initialize an empty graph.

        Args:
            vertex_count_bound: Maximum number of vertices the graph can hold.
                Valid vertex ids are 0 .. vertex_count_bound - 1.

        Raises:
            ValueError: If the bound is not a positive integer
        """
        if isinstance(vertex_count_bound, bool) or not isinstance(vertex_count_bound, (int, np.integer)):
            raise ValueError(f"vertex_count_bound must be an integer, got {vertex_count_bound!r}")
        if vertex_count_bound <= 0:
            raise ValueError(f"vertex_count_bound must be positive, got {vertex_count_bound}")

        self.vertex_count_bound = int(vertex_count_bound)

        # Graph structure
        self.adjacency_matrix = np.zeros((self.vertex_count_bound, self.vertex_count_bound), dtype=bool)
        self.aEdge: List[Tuple[int, int]] = []
        self.highest_vertex_seen = 0

        logger.debug(f"Initialized MatrixGraph with capacity for {self.vertex_count_bound} vertices")

    def check_vertex(self, vertex_id: int) -> int:
        """Return the vertex id as an int, raising if it is not an integer or outside the bound."""
        if isinstance(vertex_id, bool) or not isinstance(vertex_id, (int, np.integer)):
            raise MalformedInputError(f"Vertex id must be an integer, got {vertex_id!r}")
        if vertex_id < 0 or vertex_id >= self.vertex_count_bound:
            raise VertexOutOfRangeError(vertex_id, self.vertex_count_bound)
        return int(vertex_id)

    def add_edge(self, vertex_u: int, vertex_v: int):
        """
        Insert an undirected edge between two vertices.

        Inserting an edge that already exists leaves the matrix unchanged and
        only appends a duplicate entry to the edge log.

        Args:
            vertex_u: First vertex
            vertex_v: Second vertex

        Raises:
            MalformedInputError: If a vertex id is not an integer
            VertexOutOfRangeError: If either vertex is outside the bound
        """
        vertex_u = self.check_vertex(vertex_u)
        vertex_v = self.check_vertex(vertex_v)

        self.adjacency_matrix[vertex_u, vertex_v] = True
        self.adjacency_matrix[vertex_v, vertex_u] = True
        self.aEdge.append((vertex_u, vertex_v))
        self.highest_vertex_seen = max(self.highest_vertex_seen, vertex_u, vertex_v)

    def add_edges(self, pairs: Iterable[Sequence[int]]) -> int:
        """
        Insert every (u, v) pair from an iterable.

        Args:
            pairs: Iterable of two-item sequences

        Returns:
            Number of pairs inserted

        Raises:
            MalformedInputError: If a pair does not have exactly two items
            VertexOutOfRangeError: If a vertex is outside the bound
        """
        nEdge = 0
        for pair in pairs:
            if len(pair) != 2:
                raise MalformedInputError(f"Edge must have exactly two vertices, got {tuple(pair)!r}")
            self.add_edge(pair[0], pair[1])
            nEdge += 1

        logger.debug(f"Inserted {nEdge} edges, highest vertex is now {self.highest_vertex_seen}")
        return nEdge

    def load_matrix(self, rows: Union[Sequence[Sequence[int]], np.ndarray]):
        """
        Populate the graph from a square 0/1 adjacency matrix.

        Every 1 at [i][j] is inserted as an undirected edge. The active vertex
        range is taken from the matrix dimension, so trailing isolated vertices
        are kept.

        Args:
            rows: Square matrix as nested sequences or a 2-D array

        Raises:
            InconsistentMatrixError: If the matrix is not square
            VertexOutOfRangeError: If the dimension exceeds the vertex bound
            MalformedInputError: If an entry is neither 0 nor 1
        """
        nRow = len(rows)
        for i, row in enumerate(rows):
            if len(row) != nRow:
                raise InconsistentMatrixError(
                    f"Matrix row {i} has {len(row)} entries, expected {nRow}"
                )

        if nRow == 0:
            logger.debug("Loaded empty matrix")
            return

        if nRow > self.vertex_count_bound:
            raise VertexOutOfRangeError(nRow - 1, self.vertex_count_bound)

        matrix = np.asarray(rows)
        if not np.isin(matrix, (0, 1)).all():
            raise MalformedInputError("Adjacency matrix entries must be 0 or 1")
        matrix = matrix.astype(bool)

        if not np.array_equal(matrix, matrix.T):
            logger.warning("Adjacency matrix is not symmetric, treating every entry as an undirected edge")

        for i, j in zip(*np.nonzero(matrix)):
            self.add_edge(int(i), int(j))

        self.highest_vertex_seen = max(self.highest_vertex_seen, nRow - 1)
        logger.debug(f"Loaded {nRow}x{nRow} matrix with {len(self.aEdge)} edge entries")

    def has_edge(self, vertex_u: int, vertex_v: int) -> bool:
        """
        Check whether an edge exists between two vertices.

        Raises:
            MalformedInputError: If a vertex id is not an integer
            VertexOutOfRangeError: If either vertex is outside the bound
        """
        vertex_u = self.check_vertex(vertex_u)
        vertex_v = self.check_vertex(vertex_v)
        return bool(self.adjacency_matrix[vertex_u, vertex_v])

    def self_loop(self, vertex_id: int) -> bool:
        """Check whether a vertex has an edge to itself."""
        return self.has_edge(vertex_id, vertex_id)

    def vertex_range(self) -> range:
        """Get the active vertex ids, 0 through the highest vertex seen."""
        return range(self.highest_vertex_seen + 1)

    def neighbors(self, vertex_id: int) -> List[int]:
        """
        Get the neighbors of a vertex within the active range.

        Args:
            vertex_id: Vertex to look up

        Returns:
            Neighbor ids in ascending order
        """
        vertex_id = self.check_vertex(vertex_id)
        row = self.adjacency_matrix[vertex_id, :self.highest_vertex_seen + 1]
        return [int(neighbor_id) for neighbor_id in np.flatnonzero(row)]

    def get_matrix(self) -> np.ndarray:
        """Get a 0/1 copy of the adjacency matrix restricted to the active range."""
        nVertex = self.highest_vertex_seen + 1
        return self.adjacency_matrix[:nVertex, :nVertex].astype(int)

    def get_edges(self) -> List[Tuple[int, int]]:
        """Get the inserted edges in insertion order."""
        return self.aEdge.copy()

    def get_edge_count(self) -> int:
        """Get the number of edge insertions, duplicates included."""
        return len(self.aEdge)

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the active range."""
        return self.highest_vertex_seen + 1

    def __repr__(self) -> str:
        return (f"MatrixGraph(vertex_count_bound={self.vertex_count_bound}, "
                f"vertices={self.get_vertex_count()}, edges={self.get_edge_count()})")
