"""Errors raised by columnframe.

All structural errors inherit from :class:`ColumnFrameError`
and from the builtin exception that best describes them,
so that callers can catch them either way::

    try:
        df.column("missing")
    except KeyError:
        ...

Errors are always raised before a table or column is modified,
so after catching one the object is still in a consistent state.
"""

__all__ = (
    "ColumnFrameError",
    "InconsistentSeriesLength",
    "DuplicateColumnError",
    "ColumnNotFoundError",
    "IndexOutOfBounds",
    "InvalidType",
    "EmptyArrayError",
    "UnsupportedOperation",
)


class ColumnFrameError(Exception):
    """Base class for all errors raised by columnframe."""


class InconsistentSeriesLength(ColumnFrameError, ValueError):
    """Columns or rows do not have the expected number of elements."""


class DuplicateColumnError(ColumnFrameError, ValueError):
    """A column with the same name already exists in the table."""


class ColumnNotFoundError(ColumnFrameError, KeyError):
    """The requested column does not exist in the table."""

    def __str__(self) -> str:
        # KeyError would repr() the message, keep it readable.
        return str(self.args[0]) if self.args else ""


class IndexOutOfBounds(ColumnFrameError, IndexError):
    """A row, cell or column position is outside the valid range."""


class InvalidType(ColumnFrameError, TypeError):
    """A value or column is not of the kind expected."""


class EmptyArrayError(ColumnFrameError, IndexError):
    """Tried to remove an element from an empty column."""


class UnsupportedOperation(ColumnFrameError, TypeError):
    """Arithmetic between two kinds that can't be combined."""
