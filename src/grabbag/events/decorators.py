# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Decorators for event handling.

This module provides the ``handles`` decorator that declares which events a
listener method should be wired to by :class:`grabbag.events.EventManager`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from grabbag.errors import InvalidArgumentError
from grabbag.events.errors import EventNotFoundError
from grabbag.events.event import Event, iter_events

T = TypeVar("T", bound=Callable[..., Any])

HANDLED_EVENTS_ATTR = "_handled_events"


@dataclass(frozen=True, slots=True)
class HandledEvent:
    """One ``@handles`` declaration on a method."""

    event_name: str
    source_type: type | None = None

    def applies_to(self, source_type: type) -> bool:
        """Whether this declaration targets events of ``source_type``."""
        return self.source_type is None or issubclass(source_type, self.source_type)


def handles(event: Event | str, source_type: type | None = None) -> Callable[[T], T]:
    """Declare the decorated method as a handler of ``event``.

    The decorator can be stacked to handle several events with one method.

    Args:
        event: The event, or its name
        source_type: Class declaring the event. Defaults to the owner of ``event``
            when an :class:`Event` is given; when None the declaration applies to
            any source exposing an event with that name

    Returns:
        A decorator function

    Raises:
        EventNotFoundError: If ``source_type`` declares no event with that name
        InvalidArgumentError: If the event name is empty
    """
    if isinstance(event, Event):
        event_name = event.name
        if source_type is None:
            source_type = event.owner
    else:
        event_name = event

    if not event_name:
        raise InvalidArgumentError("event", "must name an event")

    if source_type is not None and not any(
        declared.name == event_name for declared in iter_events(source_type)
    ):
        raise EventNotFoundError(event_name, source_type.__name__)

    declaration = HandledEvent(event_name, source_type)

    def decorator(handler: T) -> T:
        existing: tuple[HandledEvent, ...] = getattr(handler, HANDLED_EVENTS_ATTR, ())
        setattr(handler, HANDLED_EVENTS_ATTR, (*existing, declaration))
        return handler

    return decorator


def get_handled_events(handler: Callable[..., Any]) -> tuple[HandledEvent, ...]:
    """Return the ``@handles`` declarations on ``handler``, outermost last."""
    return getattr(handler, HANDLED_EVENTS_ATTR, ())
