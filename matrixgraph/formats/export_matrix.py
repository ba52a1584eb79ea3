"""
Text rendering of a graph and of its two-coloring.
"""

from typing import Sequence, Union

from ..analysis.bipartite import VertexColor
from ..core.graph import MatrixGraph


def format_adjacency_matrix(graph: MatrixGraph) -> str:
    """
    Render the active adjacency matrix, one row per line.

    Entries are 0 or 1, each followed by a space.
    """
    return '\n'.join(
        ''.join(f"{value} " for value in row) for row in graph.get_matrix()
    )


def format_coloring(aColor: Sequence[Union[VertexColor, int]]) -> str:
    """Render a color assignment as one ``Color:<value>`` line per vertex."""
    return '\n'.join(
        f"Color:{color.value if isinstance(color, VertexColor) else int(color)}" for color in aColor
    )
