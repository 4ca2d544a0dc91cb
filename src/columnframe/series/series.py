"""The Series object, a named column."""

import logging
from typing import Any, Iterator, Self, Sequence

import pyarrow as pa

from ..dtypes import DType, Kind
from ..errors import IndexOutOfBounds
from .data import SeriesData

logger = logging.getLogger(__name__)


class Series:
    """A column of values with a name.

    The name can be changed with :meth:`rename` and the values
    can be modified in place, but the kind of the values
    only changes when the whole data is replaced, like it
    happens for arithmetic which returns a new Series.

    Arithmetic between two series takes the name of the
    left operand and promotes integers to floats when needed:

    >>> a = Series("a", SeriesData.floats([1.5, 2.0, 3.5]))
    >>> b = Series("b", SeriesData.ints([4, 5, 6]))
    >>> (a + b).to_pylist()
    [5.5, 7.0, 9.5]
    >>> (a + b).name
    'a'
    """

    __slots__ = ("_name", "_data")

    def __init__(self, name: str, data: SeriesData | Sequence[Any]) -> None:
        """
        :param name: The name of the column.
        :param data: The values of the column, a :class:`SeriesData`
                     or a non empty list of Python values whose kind
                     is detected from the first one.
        """
        if not isinstance(data, SeriesData):
            data = SeriesData.from_values(data)
        self._name = name
        self._data = data

    @classmethod
    def from_arrow(cls, name: str, array: pa.Array | pa.ChunkedArray) -> Self:
        """Create a column out of an Arrow array."""
        return cls(name, SeriesData.from_arrow(array))

    @property
    def name(self) -> str:
        return self._name

    @property
    def data(self) -> SeriesData:
        return self._data

    @property
    def kind(self) -> Kind:
        return self._data.kind

    def rename(self, name: str) -> None:
        """Change the name of the column."""
        logger.debug("Renaming series %s to %s", self._name, name)
        self._name = name

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[DType]:
        return iter(self._data)

    def copy(self) -> Self:
        """A new independent column with the same name and values."""
        return self.__class__(self._name, self._data.copy())

    def get(self, index: int) -> DType:
        """Read the value at ``index``.

        Negative indices are not supported.

        :param index: The position of the value, in ``[0, len(self))``.
        """
        if index < 0 or index >= len(self._data):
            raise IndexOutOfBounds(f"Index {index} is out of bounds")
        return self._data.get(index)

    def to_pylist(self) -> list[Any]:
        return self._data.to_pylist()

    def to_arrow(self) -> pa.Array:
        return self._data.to_arrow()

    def argsort(self, descending: bool = False) -> pa.Array:
        """The permutation that would sort the column.

        The column itself is left untouched.
        See :meth:`SeriesData.argsort` for how ties are ordered.
        """
        return self._data.copy().argsort(descending=descending)

    def sort(self, descending: bool = False) -> None:
        """Sort the values of the column in place."""
        self._data.argsort(descending=descending)

    def merge(self, other: "Series") -> Self:
        """Concatenate the values of two columns of the same kind.

        Unlike ``+`` this works for every kind, and raises
        :class:`InvalidType` when the kinds differ.
        """
        return self.__class__(self._name, self._data.merge(other.data))

    def add(self, other: "Series") -> Self:
        return self.__class__(self._name, self._data.add(other.data))

    def sub(self, other: "Series") -> Self:
        return self.__class__(self._name, self._data.sub(other.data))

    def mul(self, other: "Series") -> Self:
        return self.__class__(self._name, self._data.mul(other.data))

    def div(self, other: "Series") -> Self:
        return self.__class__(self._name, self._data.div(other.data))

    def __add__(self, other: "Series") -> Self:
        if not isinstance(other, Series):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Series") -> Self:
        if not isinstance(other, Series):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: "Series") -> Self:
        if not isinstance(other, Series):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: "Series") -> Self:
        if not isinstance(other, Series):
            return NotImplemented
        return self.div(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._name == other._name and self._data == other._data

    __hash__ = None

    def __repr__(self) -> str:
        return f"Series({self._name!r}, {self._data!r})"
