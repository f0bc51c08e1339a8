# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Log levels for grabbag.

Named levels are a :class:`LogLevel`; numeric standard library levels
(``NOTSET``, custom levels such as 15) are accepted wherever a level is
configured and passed through unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    """Standard logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return int(getattr(logging, self.value))

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Convert a level name, in any case, to a LogLevel.

        Raises:
            ValueError: If the string doesn't match a valid level
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}")

    @classmethod
    def from_stdlib_level(cls, value: int) -> LogLevel:
        """Convert one of the five named numeric levels to a LogLevel.

        Raises:
            ValueError: If ``value`` is not a named level (``NOTSET``, custom levels)
        """
        for level in cls:
            if level.to_stdlib_level() == value:
                return level
        raise ValueError(f"No named log level for {value}")


def stdlib_level(level: LogLevel | str | int) -> int:
    """Resolve a configured level to the integer the ``logging`` module uses.

    Integers are returned as is, so ``NOTSET`` and custom levels survive.
    """
    if isinstance(level, LogLevel):
        return level.to_stdlib_level()
    if isinstance(level, int):
        if level < 0:
            raise ValueError(f"Invalid log level: {level}")
        return level
    return LogLevel.from_string(level).to_stdlib_level()
