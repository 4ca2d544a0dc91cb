"""Format a DataFrame into tab separated text for print.

The ``tabulate`` function takes a :class:`columnframe.DataFrame`
and renders it as text: a header line with the column names,
followed by one line per row prefixed by the row position.
Every field is followed by a tab and every line ends with a newline.

Example:

    >>> from columnframe import DataFrame
    >>> df = DataFrame.from_pydict({
    ...     "Product": ["Videogame", "Laptop"],
    ...     "Quantity": [8, 7],
    ...     "Available": [True, False],
    ... })
    >>> tabulate(df).splitlines()
    ['\\tProduct\\tQuantity\\tAvailable\\t', '0\\tVideogame\\t8\\ttrue\\t', '1\\tLaptop\\t7\\tfalse\\t']
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..dataframe import DataFrame


def tabulate(df: "DataFrame", max_rows: int | None = None) -> str:
    """Format a DataFrame into tab separated text.

    Will produce a string like::

        \\tProduct\\tQuantity\\t
        0\\tVideogame\\t8\\t
        1\\tLaptop\\t7\\t

    :param df: The DataFrame to format.
    :param max_rows: Only format the first ``max_rows`` rows,
                     all rows are formatted when ``None``.
    """
    num_rows = df.num_rows if max_rows is None else max(0, min(max_rows, df.num_rows))
    columns = [column.to_pylist()[:num_rows] for column in df.columns]

    lines = [maketablerow("", df.column_names)]
    lines.extend(
        maketablerow(str(row), [format_value(values[row]) for values in columns])
        for row in range(num_rows)
    )
    return "".join(lines)


def maketablerow(label: str, cells: list[str]) -> str:
    """Make a table line with the given label and cells."""
    return label + "\t" + "".join(cell + "\t" for cell in cells) + "\n"


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    Booleans are printed as ``true`` and ``false``,
    everything else as returned by :func:`str`.
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)
