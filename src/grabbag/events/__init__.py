# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Event publish points and automatic listener wiring.
"""

from grabbag.events.config import EventManagerSettings
from grabbag.events.decorators import HandledEvent, get_handled_events, handles
from grabbag.events.errors import (
    EventError,
    EventErrorCode,
    EventNotFoundError,
    HandlerSignatureError,
)
from grabbag.events.event import BoundEvent, Event, Subscription, iter_events
from grabbag.events.manager import EventManager, ManagedSubscription

__all__ = [
    # Publish points
    "Event",
    "BoundEvent",
    "Subscription",
    "iter_events",
    # Wiring
    "EventManager",
    "EventManagerSettings",
    "ManagedSubscription",
    "HandledEvent",
    "handles",
    "get_handled_events",
    # Errors
    "EventError",
    "EventErrorCode",
    "EventNotFoundError",
    "HandlerSignatureError",
]
