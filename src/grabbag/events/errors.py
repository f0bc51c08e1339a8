# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Error types specific to the events package.
"""

from __future__ import annotations

from typing import Any, Final

from grabbag.errors.base import ErrorCategory, ErrorCode, GrabbagError

__all__ = [
    "EVENT",
    "EventErrorCode",
    "EventError",
    "EventNotFoundError",
    "HandlerSignatureError",
]

EVENT: Final = ErrorCategory.get_or_create("EVENT")


class EventErrorCode:
    """Error codes for the event system."""

    EVENT_NOT_FOUND: Final = ErrorCode.get_or_create("EVENT_NOT_FOUND", EVENT)
    HANDLER_SIGNATURE: Final = ErrorCode.get_or_create("EVENT_HANDLER_SIGNATURE", EVENT)


class EventError(GrabbagError):
    """Base class for all event-related errors."""


class EventNotFoundError(EventError):
    """Raised when a handler declaration names an event its source type lacks."""

    def __init__(self, event_name: str, object_name: str, **context: Any):
        super().__init__(
            message=f"The event {event_name} couldn't be found in the object {object_name}",
            code=EventErrorCode.EVENT_NOT_FOUND,
            event_name=event_name,
            object_name=object_name,
            **context,
        )


class HandlerSignatureError(EventError):
    """Raised when a declared handler cannot accept the arguments its event passes."""

    def __init__(self, event_name: str, handler_name: str, reason: str, **context: Any):
        super().__init__(
            message=f"Handler '{handler_name}' can't handle event '{event_name}': {reason}",
            code=EventErrorCode.HANDLER_SIGNATURE,
            event_name=event_name,
            handler_name=handler_name,
            reason=reason,
            **context,
        )
