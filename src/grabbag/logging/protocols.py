# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Logging interface definitions for grabbag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for loggers used across grabbag.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def debug(self, message: str, **kwargs: Any) -> None: ...

    def info(self, message: str, **kwargs: Any) -> None: ...

    def warning(self, message: str, **kwargs: Any) -> None: ...

    def error(self, message: str, **kwargs: Any) -> None: ...

    def critical(self, message: str, **kwargs: Any) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger that adds ``kwargs`` to every record."""
        ...

    def context(self, **kwargs: Any) -> AbstractContextManager[None]:
        """Temporarily add ``kwargs`` to every record."""
        ...
