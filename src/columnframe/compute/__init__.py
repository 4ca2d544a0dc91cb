"""The columnframe compute kernels.

Kernels work directly on :class:`pyarrow.Array` objects
and know nothing about names or tables, the element kind
of each array is detected from its Arrow type.

They are the building blocks used by :class:`columnframe.SeriesData`
and :class:`columnframe.DataFrame` to implement their operations:

* :mod:`.arithmetic` implements arithmetic with type promotion.
* :mod:`.sorting` computes and applies sorting permutations.
* :mod:`.selection` validates and resolves row selections.

>>> import pyarrow as pa
>>> from columnframe.compute import arithmetic
>>> arithmetic.add(pa.array([1.5, 2.0]), pa.array([1, 2])).to_pylist()
[2.5, 4.0]
"""

from . import arithmetic, selection, sorting

__all__ = ("arithmetic", "selection", "sorting")
