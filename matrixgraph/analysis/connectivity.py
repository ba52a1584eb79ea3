"""
Connectivity analysis for undirected graphs.

This module decides whether a graph is fully connected, under either the
reachability or the pairwise-adjacency definition.
"""

import logging
from enum import Enum
from typing import List

from ..classes.utils import (
    adjacency_dict_from_matrix,
    breadth_first_order,
    find_connected_components,
)
from ..core.graph import MatrixGraph

logger = logging.getLogger(__name__)


class ConnectivityMode(Enum):
    """Available definitions of a fully connected graph."""
    REACHABILITY = "reachability"
    PAIRWISE = "pairwise"


class ConnectivityChecker:
    """
    Connectivity queries over a MatrixGraph.

    This class provides methods for:
    - Checking that every vertex is reachable from every other one
    - Checking that every pair of vertices is directly adjacent
    - Listing connected components
    """

    def __init__(self, graph: MatrixGraph):
        """
        Initialize the connectivity checker.

        Args:
            graph: MatrixGraph instance to analyze
        """
        self.graph = graph

    def is_fully_connected(self, mode: ConnectivityMode = ConnectivityMode.REACHABILITY) -> bool:
        """
        Check whether the graph is fully connected.

        Args:
            mode: REACHABILITY requires a single connected component,
                PAIRWISE requires every pair of vertices to share an edge

        Returns:
            True if the graph is fully connected under the chosen definition
        """
        mode = ConnectivityMode(mode)

        if mode == ConnectivityMode.REACHABILITY:
            result = self._is_single_component()
        elif mode == ConnectivityMode.PAIRWISE:
            result = self._is_complete()
        else:
            raise ValueError(f"Unknown connectivity mode: {mode}")

        logger.debug(f"Connectivity check ({mode.value}) over {self.graph.get_vertex_count()} vertices: {result}")
        return result

    def _is_single_component(self) -> bool:
        """Traverse once from vertex 0 and check every vertex was reached."""
        adjacency_dict = adjacency_dict_from_matrix(self.graph.get_matrix())
        visited = set()
        breadth_first_order(adjacency_dict, 0, visited)
        return len(visited) == self.graph.get_vertex_count()

    def _is_complete(self) -> bool:
        """Check every distinct pair of vertices for a direct edge."""
        for vertex_u in self.graph.vertex_range():
            for vertex_v in self.graph.vertex_range():
                if vertex_u == vertex_v:
                    continue
                if not self.graph.has_edge(vertex_u, vertex_v):
                    return False
        return True

    def find_components(self) -> List[List[int]]:
        """
        Find the connected components of the active vertex range.

        Returns:
            List of components, each a sorted list of vertex IDs
        """
        components = find_connected_components(adjacency_dict_from_matrix(self.graph.get_matrix()))
        logger.debug(f"Found {len(components)} connected components")
        return components
