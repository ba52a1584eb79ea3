"""
Command-line entry point.

Loads a graph from a file or from standard input, prints its adjacency
matrix and reports whether it is fully connected and bipartite.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .analysis.connectivity import ConnectivityMode
from .classes.exceptions import MatrixGraphError
from .core.graph import DEFAULT_VERTEX_COUNT_BOUND
from .core.matrixgraph import pymatrixgraph
from .formats import (
    CSV_SEPARATOR,
    format_adjacency_matrix,
    format_coloring,
    read_edges_from_csv,
    read_edges_from_stream,
    read_matrix_from_csv,
    read_matrix_from_stream,
)

logger = logging.getLogger(__name__)


def positive_int(sValue: str) -> int:
    """Argument type for --bound: a strictly positive integer."""
    try:
        iValue = int(sValue)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {sValue!r}") from None
    if iValue <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {iValue}")
    return iValue


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='matrixgraph',
        description='Check whether an undirected graph is fully connected and bipartite.',
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--edges-csv', metavar='PATH',
                        help='read one u;v edge per line from PATH')
    source.add_argument('--matrix-csv', metavar='PATH',
                        help='read one adjacency matrix row per line from PATH')
    source.add_argument('--matrix', action='store_true',
                        help='read a counted adjacency matrix from stdin instead of a counted edge list')
    parser.add_argument('--separator', default=CSV_SEPARATOR,
                        help=f'field separator for CSV input (default: {CSV_SEPARATOR!r})')
    parser.add_argument('--bound', type=positive_int, default=DEFAULT_VERTEX_COUNT_BOUND,
                        help=f'maximum number of vertices (default: {DEFAULT_VERTEX_COUNT_BOUND})')
    parser.add_argument('--connectivity', choices=[mode.value for mode in ConnectivityMode],
                        default=ConnectivityMode.REACHABILITY.value,
                        help='definition of a fully connected graph (default: reachability)')
    parser.add_argument('--show-colors', action='store_true',
                        help='print the two-coloring after the bipartiteness check')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def load_graph(args: argparse.Namespace) -> pymatrixgraph:
    """Build the graph from the input source selected on the command line."""
    pGraph = pymatrixgraph(vertex_count_bound=args.bound,
                           connectivity_mode=ConnectivityMode(args.connectivity))

    if args.edges_csv:
        pGraph.add_edges(read_edges_from_csv(args.edges_csv, args.separator))
    elif args.matrix_csv:
        pGraph.load_matrix(read_matrix_from_csv(args.matrix_csv, args.separator))
    elif args.matrix:
        pGraph.load_matrix(read_matrix_from_stream(sys.stdin))
    else:
        pGraph.add_edges(read_edges_from_stream(sys.stdin))

    return pGraph


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        pGraph = load_graph(args)
    except (MatrixGraphError, OSError) as e:
        logger.error(f"Failed to load graph: {e}")
        return 1

    logger.debug(f"Connected components: {pGraph.find_components()}")

    print(format_adjacency_matrix(pGraph.graph))
    print(f"Is fully connected?: {'true' if pGraph.is_fully_connected() else 'false'}")
    bBipartite = pGraph.is_bipartite()
    if args.show_colors:
        print(format_coloring(pGraph.get_coloring()))
    print(f"Is bipartite?: {'true' if bBipartite else 'false'}")
    return 0
