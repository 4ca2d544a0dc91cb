"""Columns of typed values.

A column is made of two parts:

* :class:`SeriesData` stores the values, all of the same kind.
* :class:`Series` gives a name to a :class:`SeriesData`.

Columns are the building blocks of :class:`columnframe.DataFrame`
but can be used on their own too:

>>> from columnframe.series import Series, SeriesData
>>> prices = Series("price", SeriesData.floats([9.5, 3.0]))
>>> quantities = Series("quantity", SeriesData.ints([2, 4]))
>>> (prices * quantities).to_pylist()
[19.0, 12.0]
"""

from .data import SeriesData
from .series import Series

__all__ = ("Series", "SeriesData")
