# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Logger implementation for grabbag.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from grabbag.logging.config import LoggingSettings
from grabbag.logging.level import LogLevel, stdlib_level

if TYPE_CHECKING:
    from collections.abc import Generator

# Record attribute carrying the structured context of a log call
CONTEXT_ATTR = "grabbag_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data."""
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **extra,
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, cls=GrabbagJsonEncoder)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output."""
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return str(value)
        try:
            return json.dumps(value, cls=GrabbagJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class GrabbagJsonEncoder(json.JSONEncoder):
    """JSON encoder with string fallbacks for types found in log context."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if hasattr(obj, "model_dump"):  # Pydantic v2 models
            return obj.model_dump()
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        return str(obj)


class GrabbagLogger:
    """Default structured logger for grabbag.

    Context passed as keyword arguments, bound with :meth:`bind` or scoped with
    :meth:`context` is attached to each record and rendered by
    :class:`StructuredFormatter`.
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        level: LogLevel | str | int | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
            level: Optional level overriding the configured one
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

        self._configure(self._settings.level if level is None else level)

    def _configure(self, level: LogLevel | str | int) -> None:
        self._logger.setLevel(stdlib_level(level))

        # Replace only the handlers this class installed
        for handler in list(self._logger.handlers):
            if getattr(handler, "_grabbag_console", False):
                self._logger.removeHandler(handler)

        if self._settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(
                StructuredFormatter(
                    json_format=self._settings.json_format,
                    include_timestamp=self._settings.include_timestamp,
                    include_level=self._settings.include_level,
                )
            )
            console._grabbag_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(console)

    @property
    def stdlib_logger(self) -> logging.Logger:
        """The underlying standard library logger."""
        return self._logger

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return

        exc_info = kwargs.pop("exc_info", None)

        combined_context = {**self._bound_context, **self._context, **kwargs}

        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: combined_context},
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel | str | int) -> None:
        """Set the logger's level. Numeric levels are applied unchanged."""
        self._logger.setLevel(stdlib_level(level))

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> GrabbagLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        logger = GrabbagLogger(
            self.name,
            settings=self._settings,
            level=self._logger.level,
        )
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


def get_logger(name: str, level: LogLevel | str | int | None = None) -> GrabbagLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    return GrabbagLogger(name, settings=LoggingSettings.load(), level=level)
