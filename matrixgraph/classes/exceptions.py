"""
Exception types raised by the matrixgraph library.

All library errors derive from MatrixGraphError so that callers loading
untrusted input can catch a single type and decide whether to skip the
offending row or abort the load.
"""

from typing import Optional


class MatrixGraphError(Exception):
    """Base class for all matrixgraph errors."""


class VertexOutOfRangeError(MatrixGraphError, IndexError):
    """
    A vertex id is negative, not below the graph's vertex count bound, or
    outside the active vertex range a query runs over.
    """

    def __init__(self, vertex_id: int, vertex_count_bound: int,
                 active_vertex_count: Optional[int] = None):
        self.vertex_id = vertex_id
        self.vertex_count_bound = vertex_count_bound
        self.active_vertex_count = active_vertex_count
        if active_vertex_count is None:
            sMessage = f"Vertex {vertex_id} is outside the valid range [0, {vertex_count_bound})"
        else:
            sMessage = f"Vertex {vertex_id} is outside the active vertex range [0, {active_vertex_count})"
        super().__init__(sMessage)


class MalformedInputError(MatrixGraphError, ValueError):
    """A row has too few fields or a token that is not an integer."""


class InconsistentMatrixError(MatrixGraphError, ValueError):
    """A matrix is not square, or a declared row count does not match the rows supplied."""
