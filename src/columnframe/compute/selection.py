"""Resolve row selections to positions.

Tables can select rows by a contiguous range or by
an arbitrary list of positions. Both are validated
here against the number of rows available and turned
into something that can be applied to every column:
a ``(offset, length)`` slice for ranges or an array
of positions for :meth:`pyarrow.Array.take`.

Positions are always sorted, so the selected rows
keep the order they had in the table:

>>> row_indices([3, 1], num_rows=5).to_pylist()
[1, 3]
"""

from typing import Callable, Iterable

import pyarrow as pa

from ..dtypes import DType, Kind
from ..errors import IndexOutOfBounds

__all__ = (
    "check_row",
    "range_slice",
    "row_indices",
    "head_slice",
    "tail_slice",
    "matching_rows",
)


def check_row(row: int, num_rows: int) -> int:
    """Ensure ``row`` is a valid position in ``[0, num_rows)``."""
    if row < 0 or row >= num_rows:
        raise IndexOutOfBounds(f"Index {row} is out of bounds")
    return row


def range_slice(row_range: tuple[int, int] | range, num_rows: int) -> tuple[int, int]:
    """Validate a half-open range of rows.

    :param row_range: A ``(begin, end)`` pair or a :class:`range` of step 1.
    :param num_rows: How many rows are available.
    :returns: The ``(offset, length)`` of the slice.
    """
    if isinstance(row_range, range):
        if row_range.step != 1:
            raise ValueError(f"Row ranges must have step 1, got {row_range.step}")
        begin, end = row_range.start, row_range.stop
    else:
        begin, end = row_range

    if begin < 0 or begin > num_rows:
        raise IndexOutOfBounds(f"Index {begin} is out of bounds")
    if end < begin or end > num_rows:
        raise IndexOutOfBounds(f"Index {end} is out of bounds")
    return begin, end - begin


def row_indices(indices: Iterable[int], num_rows: int) -> pa.Array:
    """Sort and validate a list of row positions.

    :param indices: The positions to select, in any order.
    :param num_rows: How many rows are available.
    """
    positions = sorted(indices)
    for position in positions:
        check_row(position, num_rows)
    return pa.array(positions, type=pa.int64())


def head_slice(n: int, num_rows: int) -> tuple[int, int]:
    """The ``(offset, length)`` of the first ``n`` rows, clamped."""
    return 0, max(0, min(n, num_rows))


def tail_slice(n: int, num_rows: int) -> tuple[int, int]:
    """The ``(offset, length)`` of the last ``n`` rows, clamped."""
    length = max(0, min(n, num_rows))
    return num_rows - length, length


def matching_rows(array: pa.Array, predicate: Callable[[DType], bool]) -> list[int]:
    """Positions of the elements of ``array`` for which ``predicate`` is true.

    The predicate receives each element wrapped in a :class:`DType`
    and positions are returned in their original order.
    """
    kind = Kind.of_arrow_type(array.type)
    return [
        position
        for position, value in enumerate(array.to_pylist())
        if predicate(DType(kind, value))
    ]
