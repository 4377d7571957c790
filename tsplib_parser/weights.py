""" Edge-weight storage: decoding EDGE_WEIGHT_SECTION and indexing the stored rows.

Explicit weights are kept in the shape the file declares (ragged rows for triangular
formats) and never expanded to a full matrix. read_rows() pulls numeric tokens from the
cursor until the format's token count is reached and slices them into rows; lookup()
maps a pair of 0-based matrix indices to the stored cell. """

from __future__ import annotations
from typing import List, Sequence
import logging

from .cursor import LineCursor, parse_float
from .errors import InvalidEntryError
from .models.enums import WeightFormat

logger = logging.getLogger(__name__)

SECTION = "EDGE_WEIGHT_SECTION"

Rows = List[List[float]]


def read_tokens(cursor: LineCursor, count: int) -> List[float]:
    """Read whitespace separated floats across as many lines as needed to reach `count`."""
    values: List[float] = []
    while len(values) < count:
        line = cursor.next_line()
        if line is None:
            raise InvalidEntryError(SECTION, f"Invalid entry: {SECTION} ended after "
                                             f"{len(values)} of {count} values")
        values.extend(parse_float(tok, SECTION) for tok in line.split())
    return values


def split_rows(values: Sequence[float], lengths: Sequence[int]) -> Rows:
    rows: Rows = []
    start = 0
    for length in lengths:
        rows.append(list(values[start:start + length]))
        start += length
    return rows


def read_rows(cursor: LineCursor, fmt: WeightFormat, dimension: int) -> Rows:
    lengths = fmt.row_lengths(dimension)
    count = sum(lengths)
    values = read_tokens(cursor, count)

    # Some SOP files repeat the dimension as the first value of this section.
    if len(values) == count + 1 and values[0] == dimension:
        logger.warning("%s: discarding leading dimension value %s", SECTION, values[0])
        values = values[1:]
    if len(values) != count:
        raise InvalidEntryError(SECTION, f"Invalid entry: {SECTION} expects {count} values "
                                         f"for {fmt.value} with dimension {dimension}, "
                                         f"got {len(values)}")
    return split_rows(values, lengths)


def lookup(fmt: WeightFormat, rows: Rows, a: int, b: int) -> float:
    """Weight between matrix indices a and b for rows stored in `fmt`."""
    if fmt is WeightFormat.FULL_MATRIX:
        return rows[a][b]
    if fmt in (WeightFormat.UPPER_ROW, WeightFormat.LOWER_COL):
        if a == b:
            return 0.0
        lo, hi = min(a, b), max(a, b)
        return rows[lo][hi - lo - 1]
    if fmt in (WeightFormat.UPPER_DIAG_ROW, WeightFormat.LOWER_DIAG_COL):
        lo, hi = min(a, b), max(a, b)
        return rows[lo][hi - lo]
    if fmt in (WeightFormat.LOWER_ROW, WeightFormat.UPPER_COL):
        if a == b:
            return 0.0
        lo, hi = min(a, b), max(a, b)
        return rows[hi - 1][lo]
    if fmt in (WeightFormat.LOWER_DIAG_ROW, WeightFormat.UPPER_DIAG_COL):
        return rows[max(a, b)][min(a, b)]
    return 0.0
