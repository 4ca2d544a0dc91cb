import pyarrow as pa
import pytest

from columnframe.compute import selection
from columnframe.errors import IndexOutOfBounds


def test_check_row():
    assert selection.check_row(0, 3) == 0
    assert selection.check_row(2, 3) == 2


@pytest.mark.parametrize("row", [-1, 3, 10])
def test_check_row_out_of_bounds(row):
    with pytest.raises(IndexOutOfBounds, match=f"Index {row} is out of bounds"):
        selection.check_row(row, 3)


@pytest.mark.parametrize(
    "row_range,expected",
    [
        ((1, 3), (1, 2)),
        (range(1, 3), (1, 2)),
        ((0, 5), (0, 5)),
        ((0, 0), (0, 0)),
        ((5, 5), (5, 0)),
    ],
)
def test_range_slice(row_range, expected):
    assert selection.range_slice(row_range, 5) == expected


@pytest.mark.parametrize("row_range", [(-1, 2), (6, 6), (3, 2), (0, 6)])
def test_range_slice_out_of_bounds(row_range):
    with pytest.raises(IndexOutOfBounds):
        selection.range_slice(row_range, 5)


def test_range_slice_with_step():
    with pytest.raises(ValueError, match="step"):
        selection.range_slice(range(0, 4, 2), 5)


def test_row_indices_are_sorted():
    assert selection.row_indices([3, 1], 5).to_pylist() == [1, 3]
    assert selection.row_indices((4, 0, 4), 5).to_pylist() == [0, 4, 4]
    assert selection.row_indices([], 5).type == pa.int64()


@pytest.mark.parametrize("indices", [[0, 5], [-1], [2, 7, 1]])
def test_row_indices_out_of_bounds(indices):
    with pytest.raises(IndexOutOfBounds):
        selection.row_indices(indices, 5)


@pytest.mark.parametrize(
    "n,expected", [(3, (0, 3)), (5, (0, 5)), (10, (0, 5)), (0, (0, 0)), (-1, (0, 0))]
)
def test_head_slice(n, expected):
    assert selection.head_slice(n, 5) == expected


@pytest.mark.parametrize(
    "n,expected", [(2, (3, 2)), (5, (0, 5)), (10, (0, 5)), (0, (5, 0)), (-3, (5, 0))]
)
def test_tail_slice(n, expected):
    assert selection.tail_slice(n, 5) == expected


def test_matching_rows():
    values = pa.array([1, 5, 3, 8])
    assert selection.matching_rows(values, lambda v: v.value > 2) == [1, 2, 3]
    assert selection.matching_rows(values, lambda v: False) == []


def test_matching_rows_receives_tagged_values():
    seen = []
    selection.matching_rows(pa.array([True, False]), seen.append)
    assert [value.as_py() for value in seen] == [True, False]
    assert all(str(value.kind) == "BOOL" for value in seen)
