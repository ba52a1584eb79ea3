"""
Utility functions for matrixgraph.

This module provides shared traversal helpers used across the matrixgraph
package. They operate on plain adjacency dictionaries so that they do not
depend on the graph store.
"""

from typing import Dict, List, Set
from collections import deque
import logging

import numpy as np

logger = logging.getLogger(__name__)


def adjacency_dict_from_matrix(matrix: np.ndarray) -> Dict[int, List[int]]:
    """
    Convert a square 0/1 adjacency matrix to an adjacency dictionary.

    Args:
        matrix: Square adjacency matrix

    Returns:
        Dictionary mapping every row index to its list of neighbor indices,
        including vertices without neighbors
    """
    return {
        int(node): [int(neighbor) for neighbor in np.flatnonzero(row)]
        for node, row in enumerate(np.asarray(matrix))
    }


def breadth_first_order(adjacency_dict: Dict[int, List[int]], start: int,
                        visited: Set[int]) -> List[int]:
    """
    Collect the vertices reachable from start using breadth-first search.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of connected node_ids
        start: Starting node ID
        visited: Nodes already visited; updated in place

    Returns:
        Newly reached node IDs in visiting order, start included
    """
    order = []
    queue = deque([start])
    visited.add(start)

    while queue:
        node = queue.popleft()
        order.append(node)

        for neighbor in adjacency_dict.get(node, []):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order


def find_connected_components(adjacency_dict: Dict[int, List[int]]) -> List[List[int]]:
    """
    Find connected components of an undirected graph.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of connected node_ids

    Returns:
        List of components, each a sorted list of node IDs, ordered by
        their smallest node
    """
    components = []
    visited: Set[int] = set()

    for node in sorted(adjacency_dict):
        if node not in visited:
            components.append(sorted(breadth_first_order(adjacency_dict, node, visited)))

    return components
