# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Automatic wiring of listener methods to the events of a source object.

:class:`EventManager` inspects a listener with ``inspect`` and subscribes each
of its methods that handles one of the source's events, either because the
method is decorated with :func:`grabbag.events.handles` or because its name
follows the ``on_<event>`` convention. Matching relies on reflection, so it is
meant for setting up listeners, not for adding and removing handlers in a hot
path.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from grabbag.errors import InvalidArgumentError
from grabbag.events.config import EventManagerSettings
from grabbag.events.decorators import get_handled_events
from grabbag.events.errors import HandlerSignatureError
from grabbag.events.event import BoundEvent, Event, iter_events
from grabbag.logging import LoggerProtocol, get_logger

TSource = TypeVar("TSource")

__all__ = ["EventManager", "ManagedSubscription"]


@dataclass(frozen=True, slots=True)
class ManagedSubscription:
    """A subscription made by an :class:`EventManager` for one listener method."""

    event_name: str
    handler_name: str
    handle: int


@dataclass(frozen=True, slots=True)
class _Match:
    event: Event
    handler_name: str
    handler: Callable[..., Any]


class EventManager(Generic[TSource]):
    """Wires listener methods to the events of a single source.

    Args:
        source: The object exposing the events
        settings: Matching options; loaded from ``GRABBAG_EVENTS_*`` when None
        logger: Logger for wiring diagnostics

    Raises:
        InvalidArgumentError: If ``source`` is None
    """

    def __init__(
        self,
        source: TSource,
        *,
        settings: EventManagerSettings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        InvalidArgumentError.ensure_not_none(source, "source")
        self._source = source
        self._settings = settings or EventManagerSettings()
        self._logger = (logger or get_logger(__name__)).bind(
            source=type(source).__qualname__
        )
        # id(listener) -> (listener, subscriptions); the listener is kept so its id stays unique
        self._handlers: dict[int, tuple[object, list[ManagedSubscription]]] = {}

    @property
    def source(self) -> TSource:
        """The source of the events."""
        return self._source

    @property
    def settings(self) -> EventManagerSettings:
        return self._settings

    @property
    def bound(self) -> bool:
        """True while at least one subscription made by this manager is active."""
        return any(subscriptions for _, subscriptions in self._handlers.values())

    @property
    def listeners(self) -> tuple[object, ...]:
        return tuple(listener for listener, _ in self._handlers.values())

    def subscriptions(self, listener: object) -> tuple[ManagedSubscription, ...]:
        """Return the subscriptions this manager made for ``listener``."""
        entry = self._handlers.get(id(listener))
        return tuple(entry[1]) if entry else ()

    def add_handlers(self, *listeners: object) -> None:
        """Subscribe every method of ``listeners`` that handles an event of the source.

        Events without a matching method are left alone. All listeners are
        matched before anything is subscribed, so a rejected handler leaves the
        source untouched.

        Raises:
            InvalidArgumentError: If no listener is given or a listener is None
            HandlerSignatureError: If a method declared with ``@handles`` can't
                accept the arguments of its event
        """
        if not listeners:
            raise InvalidArgumentError("listeners", "must contain at least one listener")
        for listener in listeners:
            InvalidArgumentError.ensure_not_none(listener, "listener")

        events = iter_events(type(self._source))
        planned = [(listener, self._match(listener, events)) for listener in listeners]

        for listener, matches in planned:
            self._subscribe(listener, matches)

    def remove_handlers(self, listener: object) -> int:
        """Unsubscribe everything this manager subscribed for ``listener``.

        Returns:
            The number of subscriptions removed from the source

        Raises:
            InvalidArgumentError: If ``listener`` is None
        """
        InvalidArgumentError.ensure_not_none(listener, "listener")

        entry = self._handlers.pop(id(listener), None)
        if entry is None:
            return 0

        removed = 0
        for subscription in entry[1]:
            if self._bound_event(subscription.event_name).unsubscribe(subscription.handle):
                removed += 1

        self._logger.info(
            "Removed event handlers",
            listener=type(listener).__qualname__,
            removed=removed,
        )
        return removed

    def _bound_event(self, event_name: str) -> BoundEvent:
        return getattr(self._source, event_name)

    def _subscribe(self, listener: object, matches: list[_Match]) -> None:
        listener_name = type(listener).__qualname__
        entry = self._handlers.get(id(listener))
        subscriptions = entry[1] if entry else []

        wired = 0
        for match in matches:
            if not self._settings.allow_duplicate_subscription and any(
                existing.event_name == match.event.name
                and existing.handler_name == match.handler_name
                for existing in subscriptions
            ):
                self._logger.debug(
                    "Skipped duplicate subscription",
                    event=match.event.name,
                    handler=f"{listener_name}.{match.handler_name}",
                )
                continue

            handle = self._bound_event(match.event.name).subscribe(match.handler)
            subscriptions.append(
                ManagedSubscription(match.event.name, match.handler_name, handle)
            )
            wired += 1
            self._logger.debug(
                "Subscribed event handler",
                event=match.event.name,
                handler=f"{listener_name}.{match.handler_name}",
                handle=handle,
            )

        if subscriptions:
            self._handlers[id(listener)] = (listener, subscriptions)

        self._logger.info(
            "Added event handlers",
            listener=listener_name,
            subscribed=wired,
        )

    def _match(self, listener: object, events: list[Event]) -> list[_Match]:
        events_by_name = {event.name: event for event in events}
        source_type = type(self._source)
        prefix = self._settings.handler_prefix
        matches: list[_Match] = []

        for name, handler in self._iter_methods(listener):
            matched: set[str] = set()

            for declaration in get_handled_events(handler):
                if not declaration.applies_to(source_type):
                    continue
                event = events_by_name.get(declaration.event_name)
                if event is None:
                    self._logger.debug(
                        "Declared event not found on source",
                        event=declaration.event_name,
                        handler=name,
                    )
                    continue
                if event.name in matched:
                    continue
                if not event.accepts(handler):
                    raise HandlerSignatureError(
                        event.qualname,
                        f"{type(listener).__qualname__}.{name}",
                        f"expected a callable accepting {event.arity} positional argument(s)",
                    )
                matches.append(_Match(event, name, handler))
                matched.add(event.name)

            if not self._settings.match_by_name or not name.startswith(prefix):
                continue
            event = events_by_name.get(name[len(prefix):])
            if event is None or event.name in matched:
                continue
            if event.accepts(handler):
                matches.append(_Match(event, name, handler))
            else:
                self._logger.debug(
                    "Skipped handler with incompatible signature",
                    event=event.name,
                    handler=name,
                    arity=event.arity,
                )

        return matches

    def _iter_methods(self, listener: object) -> Iterator[tuple[str, Callable[..., Any]]]:
        # Inspect the class so instance properties are never evaluated
        for name, _ in inspect.getmembers(type(listener), inspect.isroutine):
            if name.startswith("__") and name.endswith("__"):
                continue
            if name.startswith("_") and not self._settings.include_private:
                continue
            yield name, getattr(listener, name)
