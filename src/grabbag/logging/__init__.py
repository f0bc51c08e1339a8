# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Public API for the grabbag logging system.

This module exports structured logging built on the standard library
``logging`` module, configured through ``GRABBAG_LOGGING_*`` settings.
"""

from __future__ import annotations

from grabbag.logging.config import LoggingSettings
from grabbag.logging.level import LogLevel, stdlib_level
from grabbag.logging.logger import (
    GrabbagJsonEncoder,
    GrabbagLogger,
    StructuredFormatter,
    get_logger,
)
from grabbag.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    "stdlib_level",
    # Implementation
    "GrabbagLogger",
    "GrabbagJsonEncoder",
    "StructuredFormatter",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
