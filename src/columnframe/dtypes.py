"""Element kinds and single values.

Every column stores elements of exactly one :class:`Kind`.
Each kind is backed by a specific Arrow type:

========== ============ ==============
Kind       Python type  Arrow type
========== ============ ==============
INT        ``int``      ``int64``
FLOAT      ``float``    ``float64``
BOOL       ``bool``     ``bool``
STR        ``str``      ``string``
========== ============ ==============

Single elements travel around wrapped in a :class:`DType`,
which carries the value together with its kind. That's what
is returned when reading a cell and what is accepted when
adding a row or filtering:

>>> DType.of(3)
DType(INT, 3)
>>> DType.of(True).kind
<Kind.BOOL: 'bool'>
>>> DType.of(1) == DType.of(1.0)
False
"""

import enum
import functools
from typing import Any, Self

import pyarrow as pa

from .errors import InvalidType

__all__ = ("Kind", "DType")


class Kind(enum.Enum):
    """The kinds of elements a column can store."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"

    @property
    def arrow_type(self) -> pa.DataType:
        """The Arrow type used to store elements of this kind."""
        return _ARROW_TYPES[self]

    @property
    def python_type(self) -> type:
        """The Python type of elements of this kind."""
        return _PYTHON_TYPES[self]

    @property
    def is_numeric(self) -> bool:
        return self in (Kind.INT, Kind.FLOAT)

    @classmethod
    def of_value(cls, value: Any) -> "Kind":
        """Detect the kind of a Python value.

        ``bool`` is checked before ``int`` as in Python
        booleans are integers too.
        """
        for python_type, kind in (
            (bool, cls.BOOL),
            (int, cls.INT),
            (float, cls.FLOAT),
            (str, cls.STR),
        ):
            if isinstance(value, python_type):
                return kind
        raise InvalidType(f"Unsupported value {value!r} of type {type(value).__name__}")

    @classmethod
    def of_arrow_type(cls, arrow_type: pa.DataType) -> "Kind":
        """Detect the kind that can store an Arrow type.

        Any integer width maps to ``INT``, any float width to ``FLOAT``
        and both string types to ``STR``.
        """
        if pa.types.is_boolean(arrow_type):
            return cls.BOOL
        if pa.types.is_integer(arrow_type):
            return cls.INT
        if pa.types.is_floating(arrow_type):
            return cls.FLOAT
        if pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
            return cls.STR
        raise InvalidType(f"Unsupported arrow type {arrow_type}")

    def __str__(self) -> str:
        return self.name


_ARROW_TYPES = {
    Kind.INT: pa.int64(),
    Kind.FLOAT: pa.float64(),
    Kind.BOOL: pa.bool_(),
    Kind.STR: pa.string(),
}

_PYTHON_TYPES = {
    Kind.INT: int,
    Kind.FLOAT: float,
    Kind.BOOL: bool,
    Kind.STR: str,
}


@functools.total_ordering
class DType:
    """A single value tagged with its kind.

    Two values are equal only when both their kind and
    their value are equal, so ``DType.of(1) != DType.of(1.0)``.

    Values of the same kind are ordered by their natural order,
    ordering values of different kinds raises :class:`TypeError`.
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind: Kind, value: Any) -> None:
        """
        :param kind: The kind of the value.
        :param value: The Python value, must be of the type stored by ``kind``.
                      Integers are accepted for ``FLOAT`` and converted.
        """
        if kind is Kind.FLOAT and Kind.of_value(value) is Kind.INT:
            try:
                value = float(value)
            except OverflowError:
                raise InvalidType(f"Value {value} is too large for a float") from None
        if Kind.of_value(value) is not kind:
            raise InvalidType(f"Value {value!r} is not of kind {kind}")
        self.kind = kind
        self.value = value

    @classmethod
    def of(cls, value: Any) -> Self:
        """Wrap a Python value detecting its kind.

        When ``value`` is already a :class:`DType` it's returned as is.
        """
        if isinstance(value, DType):
            return value
        return cls(Kind.of_value(value), value)

    def as_py(self) -> Any:
        """The wrapped Python value."""
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DType):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DType):
            return NotImplemented
        if self.kind is not other.kind:
            raise TypeError(f"Can't order {self.kind} and {other.kind} values")
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"DType({self.kind}, {self.value!r})"

    def __str__(self) -> str:
        if self.kind is Kind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)
