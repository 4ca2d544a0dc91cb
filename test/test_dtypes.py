import pyarrow as pa
import pytest

from columnframe.dtypes import DType, Kind
from columnframe.errors import InvalidType


@pytest.mark.parametrize(
    "value,kind",
    [(1, Kind.INT), (1.5, Kind.FLOAT), (True, Kind.BOOL), ("a", Kind.STR)],
)
def test_kind_of_value(value, kind):
    assert Kind.of_value(value) is kind
    assert DType.of(value).kind is kind


def test_kind_of_unsupported_value():
    with pytest.raises(InvalidType, match="Unsupported value"):
        Kind.of_value(None)


@pytest.mark.parametrize(
    "arrow_type,kind",
    [
        (pa.int32(), Kind.INT),
        (pa.int64(), Kind.INT),
        (pa.uint8(), Kind.INT),
        (pa.float32(), Kind.FLOAT),
        (pa.float64(), Kind.FLOAT),
        (pa.bool_(), Kind.BOOL),
        (pa.string(), Kind.STR),
        (pa.large_string(), Kind.STR),
    ],
)
def test_kind_of_arrow_type(arrow_type, kind):
    assert Kind.of_arrow_type(arrow_type) is kind


def test_kind_of_unsupported_arrow_type():
    with pytest.raises(InvalidType, match="Unsupported arrow type"):
        Kind.of_arrow_type(pa.date32())


def test_kind_types():
    assert Kind.INT.arrow_type == pa.int64()
    assert Kind.STR.arrow_type == pa.string()
    assert Kind.BOOL.python_type is bool
    assert Kind.FLOAT.is_numeric
    assert not Kind.BOOL.is_numeric


def test_dtype_equality_includes_kind():
    assert DType.of(1) == DType(Kind.INT, 1)
    assert DType.of(1) != DType.of(1.0)
    assert DType.of(True) != DType.of(1)


def test_dtype_float_accepts_int():
    value = DType(Kind.FLOAT, 2)
    assert value.value == 2.0
    assert isinstance(value.value, float)


@pytest.mark.parametrize(
    "kind,value", [(Kind.INT, "1"), (Kind.INT, True), (Kind.INT, 1.0), (Kind.STR, 1)]
)
def test_dtype_rejects_wrong_kind(kind, value):
    with pytest.raises(InvalidType):
        DType(kind, value)


def test_dtype_of_returns_dtype_unchanged():
    value = DType.of(1)
    assert DType.of(value) is value


def test_dtype_ordering():
    assert sorted([DType.of(3), DType.of(1), DType.of(2)]) == [
        DType.of(1),
        DType.of(2),
        DType.of(3),
    ]
    assert DType.of(False) < DType.of(True)
    assert DType.of("a") < DType.of("b")
    assert DType.of(1) <= DType.of(1)
    assert DType.of(2.5) > DType.of(1.5)


def test_dtype_ordering_across_kinds():
    with pytest.raises(TypeError):
        DType.of(1) < DType.of(1.5)


def test_dtype_hashable():
    assert len({DType.of(1), DType.of(1), DType.of(1.0)}) == 2


def test_dtype_str_and_repr():
    assert str(DType.of(True)) == "true"
    assert str(DType.of(1.5)) == "1.5"
    assert str(DType.of("text")) == "text"
    assert repr(DType.of("a")) == "DType(STR, 'a')"
    assert DType.of(3).as_py() == 3
