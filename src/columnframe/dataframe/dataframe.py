"""The DataFrame object itself."""

import logging
import sys
from typing import Any, Callable, Iterable, Mapping, Self, Sequence, TextIO

import pyarrow as pa

from ..compute import selection
from ..config import config
from ..dtypes import DType
from ..errors import (
    ColumnNotFoundError,
    DuplicateColumnError,
    InconsistentSeriesLength,
    IndexOutOfBounds,
    InvalidType,
)
from ..series import Series, SeriesData
from ..utils import tabulate

logger = logging.getLogger(__name__)


class DataFrame:
    """Data structure that handles data in rows and columns.

    A DataFrame is an ordered list of :class:`Series` of the same
    length, each with a unique name. Columns can be looked up by name
    through an index that maps each name to the position of the column.

    The DataFrame is eager, all data is kept in memory and
    operations are applied immediately. Operations that add or remove
    rows and columns, or sort the data, modify the DataFrame in place.
    Selections, filters and stacking return a new DataFrame.

    The DataFrame owns its columns, the series provided when
    creating it or adding columns are copied, and so are the ones
    returned by :meth:`column`.

    >>> df = DataFrame.from_pydict({"A": [1, 2, 3], "B": [1.5, 2.0, 3.5]})
    >>> df.shape
    (3, 2)
    >>> df.sort("A", descending=True)
    >>> df.column("B").to_pylist()
    [3.5, 2.0, 1.5]
    """

    def __init__(self, columns: Iterable[Series] | None = None) -> None:
        """
        :param columns: The columns of the table, all of the same length.
                        The length of the first column is the expected one.
        """
        columns = [column.copy() for column in columns or ()]
        num_rows = len(columns[0]) if columns else 0

        index = {}
        for position, column in enumerate(columns):
            if len(column) != num_rows:
                raise InconsistentSeriesLength(
                    f"Column {column.name} has {len(column)} rows, expected {num_rows}"
                )
            if column.name in index:
                raise DuplicateColumnError(f"Column {column.name} already exists")
            index[column.name] = position

        self._columns = columns
        self._index = index
        self._num_rows = num_rows

    @classmethod
    def from_pydict(cls, mapping: Mapping[str, Sequence[Any] | SeriesData]) -> Self:
        """Create a DataFrame from a ``{name: values}`` dictionary.

        :param mapping: The values of each column, either a :class:`SeriesData`
                        or a non empty list of Python values.
        """
        return cls(Series(name, values) for name, values in mapping.items())

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a DataFrame out of the data of a :class:`pyarrow.Table`.

        Only integer, floating point, boolean and string columns
        without nulls are supported.
        """
        return cls(
            Series.from_arrow(name, column)
            for name, column in zip(table.column_names, table.columns)
        )

    def to_arrow(self) -> pa.Table:
        """The content of the DataFrame as a :class:`pyarrow.Table`."""
        return pa.table(
            [column.to_arrow() for column in self._columns],
            names=[column.name for column in self._columns],
        )

    def to_pydict(self) -> dict[str, list[Any]]:
        """The content of the DataFrame as a ``{name: values}`` dictionary."""
        return {column.name: column.to_pylist() for column in self._columns}

    @property
    def shape(self) -> tuple[int, int]:
        """The ``(rows, columns)`` size of the DataFrame."""
        return self._num_rows, len(self._columns)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self._columns]

    @property
    def columns(self) -> list[Series]:
        """Copies of the columns, in order."""
        return [column.copy() for column in self._columns]

    @property
    def index(self) -> dict[str, int]:
        """Copy of the mapping from column names to their positions."""
        return dict(self._index)

    def __len__(self) -> int:
        return self._num_rows

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __getitem__(self, name: str) -> Series:
        return self.column(name)

    def _position(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise ColumnNotFoundError(f"Column {name} not found") from None

    def column(self, name: str) -> Series:
        """A copy of the column named ``name``."""
        return self._columns[self._position(name)].copy()

    def add_column(self, column: Series) -> None:
        """Append a column at the end of the DataFrame.

        The column must have as many rows as the DataFrame.
        Only a DataFrame with no rows and no columns adopts
        the length of the new column.
        """
        if (self._columns or self._num_rows) and len(column) != self._num_rows:
            raise InconsistentSeriesLength(
                f"Column {column.name} has {len(column)} rows, expected {self._num_rows}"
            )
        if column.name in self._index:
            raise DuplicateColumnError(f"Column {column.name} already exists")

        logger.debug("Adding column %s at position %d", column.name, len(self._columns))
        self._index[column.name] = len(self._columns)
        self._columns.append(column.copy())
        self._num_rows = len(column)

    def drop_column(self, name: str) -> None:
        """Remove the column named ``name``.

        The columns after it move one position back.
        Dropping the last column keeps the number of rows.
        """
        position = self._position(name)
        logger.debug("Dropping column %s at position %d", name, position)
        del self._columns[position]
        del self._index[name]
        for other, other_position in self._index.items():
            if other_position > position:
                self._index[other] = other_position - 1

    def rename(self, old: str, new: str) -> None:
        """Change the name of a column, keeping its position."""
        position = self._position(old)
        if new == old:
            return
        if new in self._index:
            raise DuplicateColumnError(f"Column {new} already exists")

        logger.debug("Renaming column %s to %s", old, new)
        self._columns[position].rename(new)
        del self._index[old]
        self._index[new] = position

    def select_columns(self, names: Sequence[str]) -> Self:
        """A new DataFrame with only the requested columns, in the requested order.

        The number of rows is preserved even when no column is requested.
        Requesting the same column twice raises :class:`DuplicateColumnError`,
        as column names must be unique.
        """
        return self._new(
            (self._columns[self._position(name)] for name in names), self._num_rows
        )

    def drop_row(self, row: int) -> None:
        """Remove the row at position ``row`` from every column."""
        selection.check_row(row, self._num_rows)
        logger.debug("Dropping row %d", row)
        for column in self._columns:
            column.data.erase(row)
        self._num_rows -= 1

    def add_row(self, values: Sequence[Any]) -> None:
        """Append a row at the end of the DataFrame.

        :param values: One value per column, in the order of the columns.
                       Each value is a :class:`DType` or a Python value
                       that must be of the same kind of its column.

        All values are validated before the row is added, so if any
        of them is of the wrong kind or can't be stored no column is modified.
        """
        if len(values) != len(self._columns):
            raise InconsistentSeriesLength(
                f"Row has {len(values)} values, expected {len(self._columns)}"
            )

        checked = []
        for column, value in zip(self._columns, values):
            try:
                checked.append(column.data.check_value(value))
            except InvalidType as e:
                raise InvalidType(f"Invalid value for column {column.name}: {e}") from e

        logger.debug("Adding row %d", self._num_rows)
        for column, value in zip(self._columns, checked):
            column.data.push(value)
        self._num_rows += 1

    def select_rows(
        self,
        row_range: tuple[int, int] | range | None = None,
        indices: Iterable[int] | None = None,
    ) -> Self:
        """A new DataFrame with only some of the rows.

        :param row_range: The half-open ``(begin, end)`` range of rows to keep.
                          When provided ``indices`` is ignored.
        :param indices: The positions of the rows to keep. They are sorted,
                        so rows are always kept in their original order.

        When neither is provided an empty DataFrame is returned.
        """
        if row_range is not None:
            offset, length = selection.range_slice(row_range, self._num_rows)
            return self._slice(offset, length)

        if indices is not None:
            positions = selection.row_indices(indices, self._num_rows)
            return self._new(
                (
                    Series(column.name, column.data.take(positions))
                    for column in self._columns
                ),
                len(positions),
            )

        return self.__class__()

    def filter(self, column_name: str, predicate: Callable[[DType], bool]) -> Self:
        """A new DataFrame with the rows where ``predicate`` is true.

        :param column_name: The column whose values are checked.
        :param predicate: Receives the value of the column for
                          each row as a :class:`DType`.

        >>> df = DataFrame.from_pydict({"n": [1, 5, 3], "s": ["a", "b", "c"]})
        >>> df.filter("n", lambda v: v.value >= 3).column("s").to_pylist()
        ['b', 'c']
        """
        column = self._columns[self._position(column_name)]
        rows = selection.matching_rows(column.to_arrow(), predicate)
        return self.select_rows(indices=rows)

    def sort(self, column_name: str, descending: bool = False) -> None:
        """Sort the rows of the DataFrame by the values of a column.

        The permutation that sorts ``column_name`` is applied to
        every column, so rows stay consistent.
        Sorting is stable, while ``descending`` reverses the ascending
        order as a whole, so rows with equal values end up in reverse
        order compared to the one they had.
        """
        target = self._columns[self._position(column_name)]
        permutation = target.argsort(descending=descending)
        logger.debug("Sorting by %s (descending=%s)", column_name, descending)
        for column in self._columns:
            column.data.reorder(permutation)

    def vstack(self, other: "DataFrame") -> Self:
        """A new DataFrame with the rows of ``other`` after those of this one.

        Columns are matched by name and must be of the same kind.
        """
        if len(self._columns) != len(other._columns):
            raise InconsistentSeriesLength(
                f"Can't stack {len(other._columns)} columns "
                f"under {len(self._columns)} columns"
            )
        logger.debug("Stacking %d rows under %d rows", other._num_rows, self._num_rows)
        return self._new(
            (
                column.merge(other._columns[other._position(column.name)])
                for column in self._columns
            ),
            self._num_rows + other._num_rows,
        )

    def hstack(self, other: "DataFrame") -> Self:
        """A new DataFrame with the columns of ``other`` and of this one.

        The columns of ``other`` come first, followed by the columns
        of this DataFrame that ``other`` doesn't have. When both
        have a column with the same name, the one of ``other`` is kept.
        """
        columns = list(other._columns)
        columns.extend(
            column for column in self._columns if column.name not in other._index
        )
        return self.__class__(columns)

    def limit(self, n: int) -> Self:
        """A new DataFrame with the first ``n`` rows."""
        return self._slice(*selection.head_slice(n, self._num_rows))

    def tail(self, n: int) -> Self:
        """A new DataFrame with the last ``n`` rows."""
        return self._slice(*selection.tail_slice(n, self._num_rows))

    def _slice(self, offset: int, length: int) -> Self:
        return self._new(
            (
                Series(column.name, column.data.slice(offset, length))
                for column in self._columns
            ),
            length,
        )

    def _new(self, columns: Iterable[Series], num_rows: int) -> Self:
        """A new DataFrame that has ``num_rows`` rows even without columns."""
        frame = self.__class__(columns)
        frame._num_rows = num_rows
        return frame

    def item(self, row: int, column: int | str) -> DType:
        """Read the value of a single cell.

        :param row: The position of the row.
        :param column: The name or the position of the column.
        """
        if isinstance(column, str):
            position = self._position(column)
        else:
            if column < 0 or column >= len(self._columns):
                raise IndexOutOfBounds(f"Column {column} is out of bounds")
            position = column
        return self._columns[position].get(row)

    def clear(self) -> None:
        """Remove all rows and columns."""
        logger.debug("Clearing %d columns", len(self._columns))
        self._columns = []
        self._index = {}
        self._num_rows = 0

    def clone(self) -> Self:
        """A new independent DataFrame with the same data."""
        return self._new(self._columns, self._num_rows)

    def head(self, n: int | None = None, file: TextIO | None = None) -> None:
        """Print the first rows of the DataFrame.

        :param n: How many rows to print, defaults to ``config.head_rows``.
        :param file: Where to write, defaults to ``sys.stdout``.
        """
        if n is None:
            n = config.head_rows
        print(tabulate.tabulate(self, max_rows=n), end="", file=file or sys.stdout)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFrame):
            return NotImplemented
        return self.shape == other.shape and self._columns == other._columns

    __hash__ = None

    def __str__(self) -> str:
        return tabulate.tabulate(self)

    def __repr__(self) -> str:
        columns = ", ".join(f"{c.name}: {c.kind}" for c in self._columns)
        return f"DataFrame(shape={self.shape}, columns=[{columns}])"
