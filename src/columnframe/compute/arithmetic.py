"""Arithmetic between columns with type promotion.

Arithmetic is always performed between two arrays
and the kinds of the two arrays decide what happens:

* ``INT`` with ``INT`` and ``FLOAT`` with ``FLOAT`` are
  computed elementwise and keep their kind.
* ``INT`` with ``FLOAT`` (in any order) promotes the integers
  to floats and computes a ``FLOAT`` result.
* ``STR`` with ``STR`` only supports addition, which
  concatenates the two sequences one after the other
  instead of working elementwise.
* Any other combination is refused with :class:`UnsupportedOperation`,
  values are never silently coerced.

Elementwise operations require arrays of the same length,
there is no broadcasting.

>>> import pyarrow as pa
>>> add(pa.array([1.5, 2.0, 3.5]), pa.array([4, 5, 6])).to_pylist()
[5.5, 7.0, 9.5]
>>> add(pa.array(["a"]), pa.array(["b", "c"])).to_pylist()
['a', 'b', 'c']
"""

import pyarrow as pa
import pyarrow.compute as pc

from ..dtypes import Kind
from ..errors import InconsistentSeriesLength, InvalidType, UnsupportedOperation

__all__ = ("add", "sub", "mul", "div", "binary_operation", "concatenate", "promote")

# Integer overflow is reported instead of wrapping around,
# divide is not checked so that float division by zero gives inf.
# Integer division by zero is always an error in Arrow.
OPERATORS = {
    "add": pc.add_checked,
    "sub": pc.subtract_checked,
    "mul": pc.multiply_checked,
    "div": pc.divide,
}


def promote(array: pa.Array, kind: Kind) -> pa.Array:
    """Cast an array to the Arrow type of ``kind``.

    Used to widen integers to floats before mixed arithmetic.
    """
    if array.type == kind.arrow_type:
        return array
    return pc.cast(array, kind.arrow_type)


def binary_operation(op: str, left: pa.Array, right: pa.Array) -> pa.Array:
    """Apply the ``op`` arithmetic operator to two arrays.

    :param op: One of ``add``, ``sub``, ``mul``, ``div``.
    :param left: The left operand.
    :param right: The right operand.
    """
    try:
        func = OPERATORS[op]
    except KeyError:
        raise ValueError(f"Unknown arithmetic operator: {op}") from None

    left_kind = Kind.of_arrow_type(left.type)
    right_kind = Kind.of_arrow_type(right.type)

    if left_kind is Kind.STR and right_kind is Kind.STR and op == "add":
        return concatenate(left, right)

    if not (left_kind.is_numeric and right_kind.is_numeric):
        raise UnsupportedOperation(
            f"Unsupported operation {op} between {left_kind} and {right_kind}"
        )

    if len(left) != len(right):
        raise InconsistentSeriesLength(
            f"Can't {op} columns of length {len(left)} and {len(right)}"
        )

    if left_kind is not right_kind:
        left = promote(left, Kind.FLOAT)
        right = promote(right, Kind.FLOAT)
    return func(left, right)


def concatenate(left: pa.Array, right: pa.Array) -> pa.Array:
    """Append the values of ``right`` after those of ``left``.

    Both arrays must be of the same kind, otherwise
    :class:`InvalidType` is raised.
    """
    left_kind = Kind.of_arrow_type(left.type)
    right_kind = Kind.of_arrow_type(right.type)
    if left_kind is not right_kind:
        raise InvalidType(f"Can't concatenate {left_kind} and {right_kind} columns")
    return pa.concat_arrays([left, promote(right, left_kind)])


def add(left: pa.Array, right: pa.Array) -> pa.Array:
    """Sum two arrays, or concatenate them when both are text."""
    return binary_operation("add", left, right)


def sub(left: pa.Array, right: pa.Array) -> pa.Array:
    """Subtract ``right`` from ``left`` elementwise."""
    return binary_operation("sub", left, right)


def mul(left: pa.Array, right: pa.Array) -> pa.Array:
    """Multiply two arrays elementwise."""
    return binary_operation("mul", left, right)


def div(left: pa.Array, right: pa.Array) -> pa.Array:
    """Divide ``left`` by ``right`` elementwise.

    Integer division truncates towards zero and
    dividing an integer by zero raises :class:`pyarrow.ArrowInvalid`.
    """
    return binary_operation("div", left, right)
