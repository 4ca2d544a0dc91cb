import pyarrow as pa
import pytest

from columnframe.dtypes import DType, Kind
from columnframe.errors import IndexOutOfBounds, InvalidType, UnsupportedOperation
from columnframe.series import Series, SeriesData


def test_create_from_values():
    series = Series("a", [1, 2, 3])
    assert series.name == "a"
    assert series.kind is Kind.INT
    assert series.data == SeriesData.ints([1, 2, 3])
    assert len(series) == 3


def test_create_from_empty_values():
    with pytest.raises(InvalidType):
        Series("a", [])
    assert len(Series("a", SeriesData.ints())) == 0


def test_create_from_arrow():
    series = Series.from_arrow("s", pa.array(["x", "y"]))
    assert series.kind is Kind.STR
    assert series.to_pylist() == ["x", "y"]
    assert series.to_arrow().equals(pa.array(["x", "y"]))


def test_get():
    series = Series("b", SeriesData.floats([1.5, 2.5]))
    assert series.get(1) == DType(Kind.FLOAT, 2.5)


def test_get_on_empty_series():
    series = Series("a", SeriesData.ints())
    with pytest.raises(IndexOutOfBounds) as excinfo:
        series.get(0)
    assert str(excinfo.value) == "Index 0 is out of bounds"


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_get_out_of_bounds(index):
    series = Series("a", SeriesData.ints([1, 2]))
    with pytest.raises(IndexOutOfBounds, match=f"Index {index} is out of bounds"):
        series.get(index)


def test_rename():
    series = Series("a", [1])
    series.rename("b")
    assert series.name == "b"


def test_copy_is_independent():
    series = Series("a", [1, 2])
    copied = series.copy()
    copied.data.push(3)
    copied.rename("b")
    assert series == Series("a", [1, 2])
    assert copied == Series("b", [1, 2, 3])


def test_float_plus_int_promotes():
    a = Series("a", SeriesData.floats([1.5, 2, 3.5]))
    b = Series("b", SeriesData.ints([4, 5, 6]))
    assert a + b == Series("a", SeriesData.floats([5.5, 7, 9.5]))
    assert a.add(b).kind is Kind.FLOAT


def test_result_takes_left_name():
    a = Series("a", [10, 20])
    b = Series("b", [2, 5])
    assert (b - a).name == "b"
    assert (a * b) == Series("a", [20, 100])
    assert (a / b) == Series("a", [5, 4])
    assert a.sub(b) == Series("a", [8, 15])
    assert a.mul(b) == a * b
    assert a.div(b) == a / b


def test_string_add_concatenates():
    result = Series("a", ["x"]) + Series("b", ["y", "z"])
    assert result == Series("a", SeriesData.strings(["x", "y", "z"]))
    assert len(result) == 3


def test_unsupported_arithmetic():
    with pytest.raises(UnsupportedOperation):
        Series("a", [True]) + Series("b", [1])


def test_arithmetic_with_other_objects():
    with pytest.raises(TypeError):
        Series("a", [1]) + 1


def test_merge():
    merged = Series("a", [True]).merge(Series("b", [False, True]))
    assert merged == Series("a", [True, False, True])


def test_merge_different_kinds():
    with pytest.raises(InvalidType):
        Series("a", [1]).merge(Series("b", ["1"]))


def test_argsort_does_not_reorder():
    series = Series("x", [3, 1, 2])
    assert series.argsort().to_pylist() == [1, 2, 0]
    assert series.argsort(descending=True).to_pylist() == [0, 2, 1]
    assert series.to_pylist() == [3, 1, 2]


def test_sort():
    series = Series("x", ["b", "c", "a"])
    series.sort()
    assert series.to_pylist() == ["a", "b", "c"]
    series.sort(descending=True)
    assert series.to_pylist() == ["c", "b", "a"]


def test_iter_and_repr():
    series = Series("x", [1, 2])
    assert list(series) == [DType.of(1), DType.of(2)]
    assert repr(series) == "Series('x', SeriesData(INT, [1, 2]))"
