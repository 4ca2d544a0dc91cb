"""columnframe

A minimal in-memory columnar table engine.

Data is organised in typed, named columns (:class:`Series`)
that are combined into tables (:class:`DataFrame`). Columns store
values of one of four kinds (integers, floats, booleans and text)
in Apache Arrow arrays, and vectorised work like arithmetic
and sorting is delegated to ``pyarrow.compute``.

The library is constituted by multiple components, each isolated
within its own module and each self documented:

* :mod:`columnframe.dtypes` the element kinds and single values.
* :mod:`columnframe.series` the typed storage and named columns.
* :mod:`columnframe.compute` the kernels for arithmetic, sorting and selection.
* :mod:`columnframe.dataframe` the tables.
* :mod:`columnframe.utils` text rendering of tables.

>>> from columnframe import DataFrame, Series, SeriesData
>>> df = DataFrame([
...     Series("A", SeriesData.ints([1, 2, 3, 4, 5, 6])),
...     Series("B", SeriesData.floats([1.5, 2.0, 3.5, 4.0, 5.5, 6.0])),
... ])
>>> df.shape
(6, 2)
>>> df.item(2, "B")
DType(FLOAT, 3.5)
"""

import logging

from . import compute
from .config import config
from .dataframe import DataFrame
from .dtypes import DType, Kind
from .errors import (
    ColumnFrameError,
    ColumnNotFoundError,
    DuplicateColumnError,
    EmptyArrayError,
    InconsistentSeriesLength,
    IndexOutOfBounds,
    InvalidType,
    UnsupportedOperation,
)
from .series import Series, SeriesData

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = (
    "compute",
    "config",
    "DataFrame",
    "Series",
    "SeriesData",
    "DType",
    "Kind",
    "ColumnFrameError",
    "ColumnNotFoundError",
    "DuplicateColumnError",
    "EmptyArrayError",
    "InconsistentSeriesLength",
    "IndexOutOfBounds",
    "InvalidType",
    "UnsupportedOperation",
)
