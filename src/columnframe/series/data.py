"""Typed storage for the values of a column.

:class:`SeriesData` holds an ordered sequence of values
that are all of the same :class:`Kind`. The values are
stored in a :class:`pyarrow.Array` of the Arrow type
associated to the kind.

Arrow arrays are immutable, so operations that modify
the storage in place (``push``, ``erase``, ``sort``, ...)
compute a new array and replace the old one.
This also means that arrays handed out by :meth:`SeriesData.to_arrow`
or shared by :meth:`SeriesData.copy` can never be modified
behind the back of their owner.

>>> data = SeriesData.ints([3, 1, 2])
>>> data.kind
<Kind.INT: 'int'>
>>> data.argsort().to_pylist()
[1, 2, 0]
>>> data.to_pylist()
[1, 2, 3]
"""

from typing import Any, Iterable, Iterator, Self, Sequence

import pyarrow as pa

from ..compute import arithmetic, sorting
from ..dtypes import DType, Kind
from ..errors import EmptyArrayError, IndexOutOfBounds, InvalidType

__all__ = ("SeriesData",)


class SeriesData:
    """A homogeneous sequence of INT, FLOAT, BOOL or STR values.

    The kind is decided when the storage is created and
    never changes, operations that produce values of a different
    kind (like arithmetic) return a new :class:`SeriesData`.
    """

    __slots__ = ("_kind", "_array")

    def __init__(self, kind: Kind, values: Iterable[Any] | pa.Array = ()) -> None:
        """
        :param kind: The kind of the stored values.
        :param values: Python values or a :class:`pyarrow.Array`,
                       all of them must be of ``kind``.
        """
        self._kind = kind
        if isinstance(values, (pa.Array, pa.ChunkedArray)):
            self._array = _normalize_array(kind, values)
        else:
            self._array = pa.array(
                [_check_value(kind, v) for v in values], type=kind.arrow_type
            )

    @classmethod
    def ints(cls, values: Iterable[int] = ()) -> Self:
        return cls(Kind.INT, values)

    @classmethod
    def floats(cls, values: Iterable[float] = ()) -> Self:
        return cls(Kind.FLOAT, values)

    @classmethod
    def bools(cls, values: Iterable[bool] = ()) -> Self:
        return cls(Kind.BOOL, values)

    @classmethod
    def strings(cls, values: Iterable[str] = ()) -> Self:
        return cls(Kind.STR, values)

    @classmethod
    def from_arrow(cls, array: pa.Array | pa.ChunkedArray) -> Self:
        """Wrap an Arrow array detecting the kind from its type.

        Arrays with nulls or of unsupported types are refused
        with :class:`InvalidType`.
        """
        return cls(Kind.of_arrow_type(array.type), array)

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> Self:
        """Build the storage detecting the kind from the first value."""
        if not values:
            raise InvalidType("Can't detect the kind of an empty list of values")
        return cls(Kind.of_value(values[0]), values)

    @property
    def kind(self) -> Kind:
        return self._kind

    def length(self) -> int:
        return len(self._array)

    def empty(self) -> bool:
        return len(self._array) == 0

    def __len__(self) -> int:
        return len(self._array)

    def get(self, index: int) -> DType:
        """Read the value at ``index`` wrapped in a :class:`DType`."""
        return DType(self._kind, self._array[index].as_py())

    def __iter__(self) -> Iterator[DType]:
        for value in self._array.to_pylist():
            yield DType(self._kind, value)

    def to_pylist(self) -> list[Any]:
        return self._array.to_pylist()

    def to_arrow(self) -> pa.Array:
        return self._array

    def copy(self) -> Self:
        """An independent storage with the same values.

        The Arrow buffers are shared, but as they are immutable
        and every mutation replaces them, the two storages
        can't affect each other.
        """
        return self.__class__(self._kind, self._array)

    def check_value(self, value: Any) -> Any:
        """Validate that ``value`` can be stored and return its Python value.

        Raises :class:`InvalidType` when the value is of another kind.
        """
        return _check_value(self._kind, value)

    def push(self, value: Any) -> None:
        """Append a value at the end.

        :param value: A :class:`DType` or a Python value of the same kind.
        """
        value = _check_value(self._kind, value)
        self._array = pa.concat_arrays(
            [self._array, pa.array([value], type=self._kind.arrow_type)]
        )

    def extend(self, other: "SeriesData") -> None:
        """Append all the values of ``other`` at the end."""
        self._array = arithmetic.concatenate(self._array, other._array)

    def erase(self, index: int) -> None:
        """Remove the value at ``index`` shifting the following ones."""
        length = len(self._array)
        if length == 0:
            raise EmptyArrayError(f"Can't erase index {index} from an empty column")
        if index < 0 or index >= length:
            raise IndexOutOfBounds(f"Index {index} is out of bounds")
        self._array = pa.concat_arrays(
            [self._array.slice(0, index), self._array.slice(index + 1)]
        )

    def sort(self) -> None:
        """Sort the values in place in ascending order."""
        self._array = sorting.sort(self._array)

    def argsort(self, descending: bool = False) -> pa.Array:
        """Sort the values in place and return the permutation applied.

        The permutation can then be passed to :meth:`reorder` of other
        storages to move their values the same way.
        When ``descending`` is set the stable ascending permutation is
        reversed, so equal values end up in reverse original order.
        """
        permutation = sorting.sort_indices(self._array, descending=descending)
        self._array = sorting.apply_permutation(self._array, permutation)
        return permutation

    def reorder(self, permutation: pa.Array | Sequence[int]) -> None:
        """Move the values in place according to ``permutation``."""
        self._array = sorting.apply_permutation(self._array, permutation)

    def take(self, indices: pa.Array | Sequence[int]) -> Self:
        """A new storage with the values at ``indices``."""
        return self.__class__(self._kind, self._array.take(indices))

    def slice(self, offset: int, length: int) -> Self:
        """A new storage with ``length`` values starting at ``offset``."""
        return self.__class__(self._kind, self._array.slice(offset, length))

    def merge(self, other: "SeriesData") -> Self:
        """Concatenate two storages of the same kind into a new one."""
        return self.__class__(
            self._kind, arithmetic.concatenate(self._array, other._array)
        )

    def add(self, other: "SeriesData") -> Self:
        return self.from_arrow(arithmetic.add(self._array, other._array))

    def sub(self, other: "SeriesData") -> Self:
        return self.from_arrow(arithmetic.sub(self._array, other._array))

    def mul(self, other: "SeriesData") -> Self:
        return self.from_arrow(arithmetic.mul(self._array, other._array))

    def div(self, other: "SeriesData") -> Self:
        return self.from_arrow(arithmetic.div(self._array, other._array))

    def __add__(self, other: "SeriesData") -> Self:
        if not isinstance(other, SeriesData):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "SeriesData") -> Self:
        if not isinstance(other, SeriesData):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: "SeriesData") -> Self:
        if not isinstance(other, SeriesData):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: "SeriesData") -> Self:
        if not isinstance(other, SeriesData):
            return NotImplemented
        return self.div(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeriesData):
            return NotImplemented
        return self._kind is other._kind and self._array.equals(other._array)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SeriesData({self._kind}, {self._array.to_pylist()!r})"


_INT64_VALUES = range(-(2**63), 2**63)


def _check_value(kind: Kind, value: Any) -> Any:
    """Unwrap ``value`` ensuring it's of ``kind`` and fits its Arrow type.

    Tagged values must match ``kind`` exactly, plain Python
    integers are also accepted for ``FLOAT``.
    Integers must fit 64 bits and text must be encodable as UTF-8.
    """
    if isinstance(value, DType):
        if value.kind is not kind:
            raise InvalidType(f"Expected a value of kind {kind}, got {value.kind}")
        value = value.value
    else:
        value = DType(kind, value).value

    if kind is Kind.INT and value not in _INT64_VALUES:
        raise InvalidType(f"Value {value} doesn't fit a 64 bit integer")
    if kind is Kind.STR:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidType(f"Value {value!r} is not valid UTF-8 text") from e
    return value


def _normalize_array(kind: Kind, array: pa.Array | pa.ChunkedArray) -> pa.Array:
    """Convert an Arrow array to the storage type of ``kind``."""
    if isinstance(array, pa.ChunkedArray):
        array = array.combine_chunks()
    if Kind.of_arrow_type(array.type) is not kind:
        raise InvalidType(f"Expected an array of kind {kind}, got {array.type}")
    if array.null_count:
        raise InvalidType("Columns can't contain null values")
    if array.type != kind.arrow_type:
        array = array.cast(kind.arrow_type)
    return array
