"""
Adjacency matrix readers.

The delimited layout holds one matrix row per line. The counted stream
layout starts with the number of rows, followed by that many
space-separated rows. Squareness is checked here so that the graph store
only ever receives a consistent matrix.
"""

import logging
import os
from typing import IO, List, Union

from ..classes.exceptions import InconsistentMatrixError
from .read_edges import CSV_SEPARATOR, iter_rows_from_csv, parse_integer_row_at, read_row_count

logger = logging.getLogger(__name__)


def _check_square(aMatrix: List[List[int]]):
    nRow = len(aMatrix)
    for i, aRow in enumerate(aMatrix):
        if len(aRow) != nRow:
            raise InconsistentMatrixError(f"Row {i} has {len(aRow)} entries, expected {nRow}")


def read_matrix_from_csv(sFilename_in: Union[str, os.PathLike],
                         separator: str = CSV_SEPARATOR) -> List[List[int]]:
    """
    Read a square adjacency matrix from a delimited file.

    Args:
        sFilename_in: Path of the matrix file
        separator: Field separator

    Returns:
        Matrix rows

    Raises:
        MalformedInputError: If a field is not an integer or the file is not valid UTF-8
        InconsistentMatrixError: If the matrix is not square
    """
    aMatrix = [aRow for _, aRow in iter_rows_from_csv(sFilename_in, separator)]

    _check_square(aMatrix)
    logger.info(f"Read {len(aMatrix)}x{len(aMatrix)} matrix from {sFilename_in}")
    return aMatrix


def read_matrix_from_stream(stream: IO[str]) -> List[List[int]]:
    """
    Read a counted adjacency matrix from a text stream.

    Args:
        stream: Text stream, for example sys.stdin

    Returns:
        Matrix rows

    Raises:
        MalformedInputError: If the count or a row is malformed
        InconsistentMatrixError: If rows are missing or the matrix is not square
    """
    nRow = read_row_count(stream)
    aMatrix = []
    for i in range(nRow):
        sLine = stream.readline()
        if not sLine:
            raise InconsistentMatrixError(f"Expected {nRow} matrix rows, stream ended after {i}")
        aMatrix.append(parse_integer_row_at(sLine, i + 2))

    _check_square(aMatrix)
    logger.info(f"Read {nRow}x{nRow} matrix from stream")
    return aMatrix
