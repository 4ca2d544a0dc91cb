"""Process wide configuration of columnframe.

The options are stored on a single :class:`Config` instance
available as ``columnframe.config.config``::

    >>> from columnframe.config import config
    >>> config.head_rows
    5

Logging is configured through the same object, the level
is applied to the ``columnframe`` logger::

    >>> import logging
    >>> config.log_level = logging.DEBUG
    >>> logging.getLogger("columnframe").level == logging.DEBUG
    True
    >>> config.reset()
"""

import logging

__all__ = ("Config", "config")

LOGGER_NAME = "columnframe"


class Config:
    """Options that tune the behavior of the library."""

    DEFAULT_HEAD_ROWS = 5

    def __init__(self) -> None:
        self._head_rows = self.DEFAULT_HEAD_ROWS

    @property
    def head_rows(self) -> int:
        """How many rows :meth:`DataFrame.head` prints by default."""
        return self._head_rows

    @head_rows.setter
    def head_rows(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"head_rows must be non-negative, got {value}")
        self._head_rows = value

    @property
    def log_level(self) -> int:
        """Level of the ``columnframe`` logger."""
        return logging.getLogger(LOGGER_NAME).level

    @log_level.setter
    def log_level(self, level: int) -> None:
        logging.getLogger(LOGGER_NAME).setLevel(level)

    def enable_debug(self) -> None:
        """Log every structural mutation of tables and columns."""
        self.log_level = logging.DEBUG

    def reset(self) -> None:
        """Restore the default options."""
        self._head_rows = self.DEFAULT_HEAD_ROWS
        self.log_level = logging.NOTSET

    def __repr__(self) -> str:
        return f"Config(head_rows={self.head_rows}, log_level={self.log_level})"


config = Config()
