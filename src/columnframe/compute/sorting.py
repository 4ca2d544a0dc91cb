"""Sorting of columns through permutations.

Sorting a table means sorting one of its columns and
moving the rows of every other column in the same way.
To make that possible sorting is split in two steps:

1. :func:`sort_indices` computes the permutation of positions
   that sorts one column.
2. :func:`apply_permutation` reorders any column according
   to a permutation.

Applying the same permutation to every column of a table
keeps its rows consistent.

The ascending permutation is stable, elements that compare equal
keep their original relative order. The descending permutation
is the ascending one reversed as a whole, so equal elements
end up in *reverse* original order:

>>> import pyarrow as pa
>>> values = pa.array([2, 1, 2, 1])
>>> sort_indices(values).to_pylist()
[1, 3, 0, 2]
>>> sort_indices(values, descending=True).to_pylist()
[2, 0, 3, 1]
"""

from typing import Sequence

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import InconsistentSeriesLength

__all__ = ("sort_indices", "apply_permutation", "reverse", "sort")


def sort_indices(array: pa.Array, descending: bool = False) -> pa.Array:
    """Compute the permutation that sorts ``array``.

    The array itself is not modified.

    :param array: The data to sort.
    :param descending: Reverse the stable ascending permutation.
    """
    indices = pc.array_sort_indices(array, order="ascending")
    if descending:
        indices = reverse(indices)
    return indices


def reverse(array: pa.Array) -> pa.Array:
    """Return the elements of ``array`` in reverse order."""
    positions = pa.array(range(len(array) - 1, -1, -1), type=pa.int64())
    return array.take(positions)


def apply_permutation(array: pa.Array, permutation: pa.Array | Sequence[int]) -> pa.Array:
    """Reorder ``array`` so that element ``i`` is ``array[permutation[i]]``.

    :param array: The data to reorder.
    :param permutation: The positions, as computed by :func:`sort_indices`.
    """
    if len(permutation) != len(array):
        raise InconsistentSeriesLength(
            f"Permutation of length {len(permutation)} can't reorder "
            f"a column of length {len(array)}"
        )
    if not isinstance(permutation, pa.Array):
        permutation = pa.array(permutation, type=pa.int64())
    return array.take(permutation)


def sort(array: pa.Array) -> pa.Array:
    """Return the values of ``array`` sorted in ascending order."""
    return array.take(sort_indices(array))
