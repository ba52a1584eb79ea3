"""
Bipartiteness analysis for undirected graphs.

This module two-colors a graph with an explicit worklist. A graph is
bipartite iff every connected component can be colored without an edge
joining two vertices of the same color.
"""

import logging
from enum import Enum
from typing import List
from collections import deque

from ..classes.exceptions import VertexOutOfRangeError
from ..core.graph import MatrixGraph

logger = logging.getLogger(__name__)


class VertexColor(Enum):
    """Color classes used by the two-coloring."""
    UNCOLORED = -1
    RED = 0
    GREEN = 1

    def opposite(self) -> "VertexColor":
        if self == VertexColor.RED:
            return VertexColor.GREEN
        if self == VertexColor.GREEN:
            return VertexColor.RED
        raise ValueError("An uncolored vertex has no opposite color")


class BipartitenessChecker:
    """
    Two-coloring of a MatrixGraph.

    The color assignment from the most recent check is kept so that it can
    be reported afterwards with get_coloring().
    """

    def __init__(self, graph: MatrixGraph):
        """
        Initialize the bipartiteness checker.

        Args:
            graph: MatrixGraph instance to analyze
        """
        self.graph = graph
        self.aColor: List[VertexColor] = []

    def is_bipartite(self, start_vertex: int = 0) -> bool:
        """
        Check whether the graph is bipartite.

        Coloring starts at start_vertex and then continues from every vertex
        still uncolored, so disconnected graphs are checked component by
        component.

        Args:
            start_vertex: Vertex that receives the first color

        Returns:
            False on any self-loop or odd cycle, True otherwise

        Raises:
            MalformedInputError: If start_vertex is not an integer
            VertexOutOfRangeError: If start_vertex is not in the active range
        """
        start_vertex = self.graph.check_vertex(start_vertex)
        vertex_range = self.graph.vertex_range()
        if start_vertex not in vertex_range:
            raise VertexOutOfRangeError(start_vertex, self.graph.vertex_count_bound, len(vertex_range))

        self.aColor = [VertexColor.UNCOLORED] * len(vertex_range)

        # A self-loop is an odd cycle of length one
        for vertex_id in vertex_range:
            if self.graph.self_loop(vertex_id):
                logger.debug(f"Vertex {vertex_id} has a self-loop, graph is not bipartite")
                return False

        start_order = [start_vertex] + [v for v in vertex_range if v != start_vertex]
        for vertex_id in start_order:
            if self.aColor[vertex_id] != VertexColor.UNCOLORED:
                continue
            if not self._color_component(vertex_id):
                return False

        logger.debug(f"Graph with {len(vertex_range)} vertices is bipartite")
        return True

    def _color_component(self, start_vertex: int) -> bool:
        """
        Color the component containing start_vertex.

        Args:
            start_vertex: Uncolored vertex to start from

        Returns:
            False as soon as an edge joins two vertices of the same color
        """
        self.aColor[start_vertex] = VertexColor.GREEN
        queue = deque([start_vertex])

        while queue:
            vertex_id = queue.popleft()
            color = self.aColor[vertex_id]
            neighbor_color = color.opposite()

            for neighbor_id in self.graph.neighbors(vertex_id):
                if self.aColor[neighbor_id] == VertexColor.UNCOLORED:
                    self.aColor[neighbor_id] = neighbor_color
                    queue.append(neighbor_id)
                elif self.aColor[neighbor_id] == color:
                    logger.debug(f"Odd cycle through edge ({vertex_id}, {neighbor_id})")
                    return False

        return True

    def get_coloring(self) -> List[VertexColor]:
        """
        Get the color assignment from the most recent check.

        Returns:
            Colors indexed by vertex id; partial if the check failed,
            empty if no check has run
        """
        return self.aColor.copy()
