"""
Core graph data structures and management.

This module contains the adjacency-matrix graph store. The pymatrixgraph
facade lives in core.matrixgraph.
"""

from .graph import MatrixGraph, DEFAULT_VERTEX_COUNT_BOUND

__all__ = ['MatrixGraph', 'DEFAULT_VERTEX_COUNT_BOUND']
