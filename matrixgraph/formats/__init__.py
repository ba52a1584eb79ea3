"""
Readers and writers for the plain-text graph formats.

This module contains the collaborators that turn delimited text and
line-oriented streams into integer rows for the graph store, and that render
the store for display.
"""

from .read_edges import CSV_SEPARATOR, parse_integer_row, read_edges_from_csv, read_edges_from_stream
from .read_matrix import read_matrix_from_csv, read_matrix_from_stream
from .export_matrix import format_adjacency_matrix, format_coloring

__all__ = [
    'CSV_SEPARATOR',
    'parse_integer_row',
    'read_edges_from_csv',
    'read_edges_from_stream',
    'read_matrix_from_csv',
    'read_matrix_from_stream',
    'format_adjacency_matrix',
    'format_coloring',
]
