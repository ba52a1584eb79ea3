"""
Edge list readers.

Two layouts are supported:
- a delimited text file with one ``u;v`` pair per line
- a counted stream whose first line holds the number of pairs, followed by
  that many space-separated ``u v`` lines
"""

import logging
import os
from typing import IO, Iterator, List, Optional, Tuple, Union

from ..classes.exceptions import InconsistentMatrixError, MalformedInputError

logger = logging.getLogger(__name__)

CSV_SEPARATOR = ';'


def parse_integer_row(sLine: str, separator: Optional[str] = None) -> List[int]:
    """
    Split a line into integer fields.

    Args:
        sLine: Line of text
        separator: Field separator; None splits on whitespace

    Returns:
        The integer fields, blank fields skipped

    Raises:
        MalformedInputError: If a field is not an integer
    """
    aRow = []
    for sToken in sLine.strip().split(separator):
        sToken = sToken.strip()
        if not sToken:
            continue
        try:
            aRow.append(int(sToken))
        except ValueError:
            raise MalformedInputError(f"Expected an integer, got {sToken!r}") from None
    return aRow


def parse_integer_row_at(sLine: str, lLine: int, separator: Optional[str] = None) -> List[int]:
    """Parse a row like parse_integer_row, naming the line number on failure."""
    try:
        return parse_integer_row(sLine, separator)
    except MalformedInputError as e:
        raise MalformedInputError(f"Line {lLine}: {e}") from None


def _edge_from_row(aRow: List[int], lLine: int) -> Tuple[int, int]:
    if len(aRow) < 2:
        raise MalformedInputError(f"Line {lLine}: expected two vertices, got {len(aRow)} field(s)")
    return aRow[0], aRow[1]


def read_row_count(stream: IO[str]) -> int:
    """Read the leading row count of a counted stream."""
    sLine = stream.readline()
    aRow = parse_integer_row_at(sLine, 1)
    if len(aRow) != 1 or aRow[0] < 0:
        raise MalformedInputError(f"Line 1: expected a non-negative row count, got {sLine.strip()!r}")
    return aRow[0]


def iter_rows_from_csv(sFilename_in: Union[str, os.PathLike],
                       separator: str = CSV_SEPARATOR) -> Iterator[Tuple[int, List[int]]]:
    """
    Yield (line number, integer fields) for every non-empty line of a UTF-8 file.

    Raises:
        MalformedInputError: If a field is not an integer or the file is not valid UTF-8
    """
    with open(sFilename_in, 'r', encoding='utf-8') as pFile:
        try:
            for lLine, sLine in enumerate(pFile, start=1):
                if not sLine.strip():
                    continue
                yield lLine, parse_integer_row_at(sLine, lLine, separator)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"{sFilename_in}: not valid UTF-8 text ({e.reason})") from None


def iter_edges_from_csv(sFilename_in: Union[str, os.PathLike],
                        separator: str = CSV_SEPARATOR) -> Iterator[Tuple[int, int]]:
    """
    Yield (u, v) pairs from a delimited edge file.

    Empty lines are skipped and fields after the second are ignored.

    Raises:
        MalformedInputError: If a line has fewer than two fields or a non-integer field
    """
    for lLine, aRow in iter_rows_from_csv(sFilename_in, separator):
        yield _edge_from_row(aRow, lLine)


def read_edges_from_csv(sFilename_in: Union[str, os.PathLike],
                        separator: str = CSV_SEPARATOR) -> List[Tuple[int, int]]:
    """
    Read every (u, v) pair from a delimited edge file.

    Args:
        sFilename_in: Path of the edge file
        separator: Field separator

    Returns:
        Edge pairs in file order
    """
    aEdge = list(iter_edges_from_csv(sFilename_in, separator))
    logger.info(f"Read {len(aEdge)} edges from {sFilename_in}")
    return aEdge


def read_edges_from_stream(stream: IO[str]) -> List[Tuple[int, int]]:
    """
    Read a counted edge list from a text stream.

    Args:
        stream: Text stream, for example sys.stdin

    Returns:
        Edge pairs in stream order

    Raises:
        MalformedInputError: If the count or a pair is malformed
        InconsistentMatrixError: If the stream ends before the announced count
    """
    nEdge = read_row_count(stream)
    aEdge = []
    # Line 1 holds the count
    for i in range(nEdge):
        sLine = stream.readline()
        if not sLine:
            raise InconsistentMatrixError(f"Expected {nEdge} edge lines, stream ended after {i}")
        lLine = i + 2
        aEdge.append(_edge_from_row(parse_integer_row_at(sLine, lLine), lLine))

    logger.info(f"Read {len(aEdge)} edges from stream")
    return aEdge
