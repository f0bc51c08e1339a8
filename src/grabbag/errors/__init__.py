# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Error handling for grabbag.
"""

from __future__ import annotations

from grabbag.errors.base import (
    ARGUMENT,
    INTERNAL,
    INTERNAL_ERROR,
    INVALID_ARGUMENT,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    GrabbagError,
    InvalidArgumentError,
)
from grabbag.errors.registry import registry

__all__ = [
    # Categories and codes
    "ARGUMENT",
    "INTERNAL",
    "INTERNAL_ERROR",
    "INVALID_ARGUMENT",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    # Base errors
    "GrabbagError",
    "InvalidArgumentError",
    "registry",
]
