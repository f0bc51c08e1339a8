# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Event publish points.

An :class:`Event` is declared on a class body::

    class Button:
        clicked = Event(arity=1)

Each instance then owns a :class:`BoundEvent` with its own ordered list of
callbacks. Subscribing returns a handle and unsubscribing takes that handle back,
so the same callable may be subscribed more than once and removed one
subscription at a time. Firing calls every callback synchronously, in
subscription order, before returning.
"""

from __future__ import annotations

import inspect
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, overload

from grabbag.errors import InvalidArgumentError

__all__ = ["BoundEvent", "Event", "Subscription", "iter_events"]

_handles = itertools.count(1)


@dataclass(frozen=True, slots=True)
class Subscription:
    """A callback attached to a bound event, identified by its handle."""

    handle: int
    callback: Callable[..., Any]


class BoundEvent:
    """The observer list of one event on one source instance."""

    __slots__ = ("_event", "_subscriptions")

    def __init__(self, event: Event) -> None:
        self._event = event
        self._subscriptions: list[Subscription] = []

    @property
    def event(self) -> Event:
        """The declaring :class:`Event`."""
        return self._event

    @property
    def name(self) -> str:
        return self._event.name

    @property
    def arity(self) -> int | None:
        return self._event.arity

    @property
    def subscriptions(self) -> tuple[Subscription, ...]:
        return tuple(self._subscriptions)

    def subscribe(self, callback: Callable[..., Any]) -> int:
        """Append ``callback`` to the observer list.

        Returns:
            The handle identifying this subscription

        Raises:
            InvalidArgumentError: If ``callback`` is None or not callable
        """
        InvalidArgumentError.ensure_not_none(callback, "callback")
        if not callable(callback):
            raise InvalidArgumentError("callback", "must be callable")

        subscription = Subscription(next(_handles), callback)
        self._subscriptions.append(subscription)
        return subscription.handle

    def unsubscribe(self, handle: int) -> bool:
        """Remove the subscription identified by ``handle``.

        Returns:
            True if a subscription was removed
        """
        for index, subscription in enumerate(self._subscriptions):
            if subscription.handle == handle:
                del self._subscriptions[index]
                return True
        return False

    def clear(self) -> None:
        self._subscriptions.clear()

    def fire(self, *args: Any, **kwargs: Any) -> bool:
        """Invoke every subscribed callback with the given arguments.

        Callbacks subscribed or removed while firing take effect on the next fire.
        An exception raised by a callback propagates and skips the remaining ones.

        Returns:
            True if at least one callback was invoked
        """
        snapshot = list(self._subscriptions)
        for subscription in snapshot:
            subscription.callback(*args, **kwargs)
        return bool(snapshot)

    async def fire_async(self, *args: Any, **kwargs: Any) -> bool:
        """Like :meth:`fire`, awaiting callbacks that return awaitables.

        Callbacks run one after the other; each awaitable is awaited before
        the next callback is called.
        """
        snapshot = list(self._subscriptions)
        for subscription in snapshot:
            result = subscription.callback(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        return bool(snapshot)

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __repr__(self) -> str:
        return f"<BoundEvent {self._event.qualname} subscribers={len(self)}>"


class Event:
    """Descriptor declaring a named publish point on a class.

    Args:
        doc: Optional description of the event
        arity: Number of positional arguments the event is fired with,
            or None when it varies
    """

    def __init__(self, doc: str | None = None, *, arity: int | None = None) -> None:
        if arity is not None and arity < 0:
            raise InvalidArgumentError("arity", "must not be negative")
        self.__doc__ = doc
        self.arity = arity
        self.name: str = ""
        self.owner: type | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    @property
    def qualname(self) -> str:
        owner = self.owner.__qualname__ if self.owner is not None else "<unbound>"
        return f"{owner}.{self.name}"

    @property
    def _storage_key(self) -> str:
        return f"__event_{self.name}"

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> Event: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> BoundEvent: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Event | BoundEvent:
        if instance is None:
            return self
        state = instance.__dict__
        bound = state.get(self._storage_key)
        if bound is None:
            bound = state[self._storage_key] = BoundEvent(self)
        return bound

    def __set__(self, instance: object, value: Any) -> None:
        raise AttributeError(f"can't assign to event {self.qualname}")

    def accepts(self, handler: Callable[..., Any]) -> bool:
        """Whether ``handler`` can be called with this event's positional arguments.

        Handlers are always accepted when the arity is unknown or the handler's
        signature can't be inspected.
        """
        if self.arity is None:
            return True
        try:
            signature = inspect.signature(handler)
        except (TypeError, ValueError):
            return True
        try:
            signature.bind(*([None] * self.arity))
        except TypeError:
            return False
        return True

    def __repr__(self) -> str:
        return f"<Event {self.qualname} arity={self.arity}>"


def iter_events(cls: type) -> list[Event]:
    """Return the events declared on ``cls`` and its bases, nearest first."""
    seen: set[str] = set()
    found: list[Event] = []
    for klass in cls.__mro__:
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if isinstance(attr, Event):
                found.append(attr)
    return found
