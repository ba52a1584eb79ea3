"""
Shared exception types and traversal helpers.

This module contains the building blocks used throughout the
matrixgraph library.
"""

from .exceptions import (
    MatrixGraphError,
    VertexOutOfRangeError,
    MalformedInputError,
    InconsistentMatrixError,
)
from .utils import adjacency_dict_from_matrix, breadth_first_order, find_connected_components

__all__ = [
    'MatrixGraphError',
    'VertexOutOfRangeError',
    'MalformedInputError',
    'InconsistentMatrixError',
    'adjacency_dict_from_matrix',
    'breadth_first_order',
    'find_connected_components',
]
