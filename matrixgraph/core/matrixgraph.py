"""
Main facade class for undirected graph analysis.

This module provides the pymatrixgraph class that exposes the graph store
and both structural checks through a single object.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .graph import DEFAULT_VERTEX_COUNT_BOUND, MatrixGraph
from ..analysis.bipartite import BipartitenessChecker, VertexColor
from ..analysis.connectivity import ConnectivityChecker, ConnectivityMode

logger = logging.getLogger(__name__)


class pymatrixgraph:
    """
    Main facade class for undirected graph analysis.

    Delegates storage to MatrixGraph and the structural queries to
    ConnectivityChecker and BipartitenessChecker.
    """

    def __init__(self, aEdge: Optional[Iterable[Sequence[int]]] = None,
                 vertex_count_bound: int = DEFAULT_VERTEX_COUNT_BOUND,
                 connectivity_mode: ConnectivityMode = ConnectivityMode.REACHABILITY):
        """
        Initialize the graph, optionally from an edge list.

        Args:
            aEdge: Optional iterable of (u, v) pairs to insert
            vertex_count_bound: Maximum number of vertices the graph can hold
            connectivity_mode: Default definition used by is_fully_connected
        """
        # Initialize core graph
        self._graph = MatrixGraph(vertex_count_bound)

        # Initialize analysis components
        self._connectivity = ConnectivityChecker(self._graph)
        self._bipartiteness = BipartitenessChecker(self._graph)

        self.connectivity_mode = ConnectivityMode(connectivity_mode)

        if aEdge is not None:
            self._graph.add_edges(aEdge)

    @classmethod
    def from_matrix(cls, rows: Union[Sequence[Sequence[int]], np.ndarray],
                    vertex_count_bound: int = DEFAULT_VERTEX_COUNT_BOUND,
                    connectivity_mode: ConnectivityMode = ConnectivityMode.REACHABILITY) -> "pymatrixgraph":
        """Build a graph from a square 0/1 adjacency matrix."""
        pGraph = cls(vertex_count_bound=vertex_count_bound, connectivity_mode=connectivity_mode)
        pGraph.load_matrix(rows)
        return pGraph

    @property
    def graph(self) -> MatrixGraph:
        """The underlying graph store."""
        return self._graph

    @property
    def highest_vertex_seen(self) -> int:
        return self._graph.highest_vertex_seen

    @property
    def vertex_count_bound(self) -> int:
        return self._graph.vertex_count_bound

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_edge(self, vertex_u: int, vertex_v: int):
        """Insert an undirected edge between two vertices."""
        self._graph.add_edge(vertex_u, vertex_v)

    def add_edges(self, pairs: Iterable[Sequence[int]]) -> int:
        """Insert every (u, v) pair from an iterable."""
        return self._graph.add_edges(pairs)

    def load_matrix(self, rows: Union[Sequence[Sequence[int]], np.ndarray]):
        """Populate the graph from a square 0/1 adjacency matrix."""
        self._graph.load_matrix(rows)

    def has_edge(self, vertex_u: int, vertex_v: int) -> bool:
        """Check whether an edge exists between two vertices."""
        return self._graph.has_edge(vertex_u, vertex_v)

    def self_loop(self, vertex_id: int) -> bool:
        """Check whether a vertex has an edge to itself."""
        return self._graph.self_loop(vertex_id)

    def vertex_range(self) -> range:
        """Get the active vertex ids."""
        return self._graph.vertex_range()

    def neighbors(self, vertex_id: int) -> List[int]:
        """Get the neighbors of a vertex within the active range."""
        return self._graph.neighbors(vertex_id)

    def get_matrix(self) -> np.ndarray:
        """Get the active adjacency matrix as 0/1 integers."""
        return self._graph.get_matrix()

    def get_edges(self):
        """Get the inserted edges in insertion order."""
        return self._graph.get_edges()

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the active range."""
        return self._graph.get_vertex_count()

    # ========================================================================
    # STRUCTURAL ANALYSIS
    # ========================================================================

    def is_fully_connected(self, mode: Optional[ConnectivityMode] = None) -> bool:
        """
        Check whether the graph is fully connected.

        Args:
            mode: Connectivity definition; defaults to the one chosen at construction

        Returns:
            True if the graph is fully connected
        """
        return self._connectivity.is_fully_connected(mode if mode is not None else self.connectivity_mode)

    def find_components(self) -> List[List[int]]:
        """Find the connected components of the active vertex range."""
        return self._connectivity.find_components()

    def is_bipartite(self, start_vertex: int = 0) -> bool:
        """Check whether the graph is bipartite."""
        return self._bipartiteness.is_bipartite(start_vertex)

    def get_coloring(self) -> List[VertexColor]:
        """Get the color assignment from the most recent bipartiteness check."""
        return self._bipartiteness.get_coloring()

    def __repr__(self) -> str:
        return f"pymatrixgraph({self._graph!r}, connectivity_mode={self.connectivity_mode.value})"
