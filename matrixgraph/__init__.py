"""
PyMatrixGraph - Undirected Graph Structure Analysis Library

A small Python library that stores an undirected graph as a dense adjacency
matrix and answers two structural questions about it: is the graph fully
connected, and is it bipartite.

Main Classes:
    pymatrixgraph: Main class for graph analysis (facade)
    MatrixGraph: Bounded adjacency-matrix graph store
    ConnectivityChecker: Connectivity queries
    BipartitenessChecker: Two-coloring queries

Example:
    >>> from matrixgraph import pymatrixgraph
    >>> graph = pymatrixgraph([(0, 1), (1, 2), (2, 3), (3, 0)])
    >>> graph.is_fully_connected()
    True
    >>> graph.is_bipartite(0)
    True
"""

__version__ = "0.1.0"

from matrixgraph.classes.exceptions import (
    MatrixGraphError,
    VertexOutOfRangeError,
    MalformedInputError,
    InconsistentMatrixError,
)
from matrixgraph.core.graph import MatrixGraph, DEFAULT_VERTEX_COUNT_BOUND
from matrixgraph.analysis.connectivity import ConnectivityChecker, ConnectivityMode
from matrixgraph.analysis.bipartite import BipartitenessChecker, VertexColor
from matrixgraph.core.matrixgraph import pymatrixgraph

__all__ = [
    'pymatrixgraph',
    'MatrixGraph',
    'DEFAULT_VERTEX_COUNT_BOUND',
    'ConnectivityChecker',
    'ConnectivityMode',
    'BipartitenessChecker',
    'VertexColor',
    'MatrixGraphError',
    'VertexOutOfRangeError',
    'MalformedInputError',
    'InconsistentMatrixError',
]
