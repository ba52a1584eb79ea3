"""
Graph analysis modules for structural queries.

This module contains classes for connectivity and bipartiteness checks.
"""

from .connectivity import ConnectivityChecker, ConnectivityMode
from .bipartite import BipartitenessChecker, VertexColor

__all__ = ['ConnectivityChecker', 'ConnectivityMode', 'BipartitenessChecker', 'VertexColor']
