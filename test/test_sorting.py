import pyarrow as pa
import pytest

from columnframe.compute import sorting
from columnframe.errors import InconsistentSeriesLength


@pytest.mark.parametrize(
    "values,expected",
    [
        ([5, 3, 1, 4, 2], [2, 4, 1, 3, 0]),
        ([2.5, -1.0, 0.5], [1, 2, 0]),
        ([True, False, True, False], [1, 3, 0, 2]),
        (["b", "a", "c"], [1, 0, 2]),
    ],
)
def test_sort_indices_ascending(values, expected):
    assert sorting.sort_indices(pa.array(values)).to_pylist() == expected


def test_sort_indices_is_stable():
    values = pa.array([1, 0, 1, 0, 1])
    assert sorting.sort_indices(values).to_pylist() == [1, 3, 0, 2, 4]


def test_sort_indices_descending_without_ties():
    values = pa.array([1, 2, 3, 4, 5])
    assert sorting.sort_indices(values, descending=True).to_pylist() == [4, 3, 2, 1, 0]


def test_sort_indices_descending_reverses_ties():
    values = pa.array([1, 0, 1, 0, 1])
    # Not a stable descending sort: ties come out in reverse original order.
    assert sorting.sort_indices(values, descending=True).to_pylist() == [4, 2, 0, 3, 1]


def test_sort_indices_does_not_modify_array():
    values = pa.array([3, 1, 2])
    sorting.sort_indices(values)
    assert values.to_pylist() == [3, 1, 2]


def test_reverse():
    assert sorting.reverse(pa.array(["a", "b", "c"])).to_pylist() == ["c", "b", "a"]
    assert sorting.reverse(pa.array([], type=pa.int64())).to_pylist() == []


@pytest.mark.parametrize("permutation", [[2, 0, 1], pa.array([2, 0, 1])])
def test_apply_permutation(permutation):
    values = pa.array(["a", "b", "c"])
    assert sorting.apply_permutation(values, permutation).to_pylist() == ["c", "a", "b"]


def test_apply_permutation_wrong_length():
    with pytest.raises(InconsistentSeriesLength):
        sorting.apply_permutation(pa.array([1, 2, 3]), [0, 1])


def test_same_permutation_keeps_columns_aligned():
    keys = pa.array([3, 1, 2])
    labels = pa.array(["three", "one", "two"])
    permutation = sorting.sort_indices(keys)
    assert sorting.apply_permutation(keys, permutation).to_pylist() == [1, 2, 3]
    assert sorting.apply_permutation(labels, permutation).to_pylist() == [
        "one",
        "two",
        "three",
    ]


def test_sort():
    assert sorting.sort(pa.array([5, 3, 1, 4, 2])).to_pylist() == [1, 2, 3, 4, 5]


def test_sort_indices_empty():
    assert sorting.sort_indices(pa.array([], type=pa.int64())).to_pylist() == []
