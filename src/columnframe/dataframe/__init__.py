"""In-memory tables of named columns.

A :class:`DataFrame` is a table made of named columns
(:class:`columnframe.Series`) that all have the same number of rows.

Tables can be created from columns, from a dictionary of values
or from a :class:`pyarrow.Table`::

    >>> from columnframe import DataFrame
    >>> df = DataFrame.from_pydict({
    ...     "animals": ["Flamingo", "Horse", "Brittle stars", "Centipede"],
    ...     "n_legs": [2, 4, 5, 100],
    ... })
    >>> df.shape
    (4, 2)

They can be modified in place by adding and removing rows or columns,
renaming columns and sorting the rows::

    >>> df.add_row(["Spider", 8])
    >>> df.sort("n_legs", descending=True)
    >>> df.column("animals").to_pylist()
    ['Centipede', 'Spider', 'Brittle stars', 'Horse', 'Flamingo']

Or used to create new tables by selecting, filtering and stacking them::

    >>> many_legs = df.filter("n_legs", lambda value: value.as_py() > 4)
    >>> many_legs.select_columns(["animals"]).to_pydict()
    {'animals': ['Centipede', 'Spider', 'Brittle stars']}
"""

from .dataframe import DataFrame

__all__ = ("DataFrame",)
