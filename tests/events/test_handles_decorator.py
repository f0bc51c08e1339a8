"""Tests for the @handles declaration."""

from __future__ import annotations

import pytest

from grabbag.errors import InvalidArgumentError
from grabbag.events import (
    Event,
    EventErrorCode,
    EventNotFoundError,
    HandledEvent,
    get_handled_events,
    handles,
)


class Door:
    opened = Event(arity=0)
    closed = Event(arity=0)


class SlidingDoor(Door):
    pass


class TestHandles:
    """Tests for declaring handlers."""

    def test_event_object_records_owner(self) -> None:
        @handles(Door.opened)
        def handler() -> None: ...

        assert get_handled_events(handler) == (HandledEvent("opened", Door),)

    def test_name_with_source_type(self) -> None:
        @handles("closed", Door)
        def handler() -> None: ...

        assert get_handled_events(handler) == (HandledEvent("closed", Door),)

    def test_name_only(self) -> None:
        @handles("closed")
        def handler() -> None: ...

        (declaration,) = get_handled_events(handler)
        assert declaration.source_type is None
        assert declaration.applies_to(object)

    def test_stacked_declarations(self) -> None:
        @handles(Door.closed)
        @handles(Door.opened)
        def handler() -> None: ...

        names = [declaration.event_name for declaration in get_handled_events(handler)]
        assert names == ["opened", "closed"]

    def test_decorator_returns_the_function(self) -> None:
        def handler() -> None: ...

        assert handles(Door.opened)(handler) is handler

    def test_undecorated_function(self) -> None:
        def handler() -> None: ...

        assert get_handled_events(handler) == ()

    def test_applies_to_subclasses(self) -> None:
        declaration = HandledEvent("opened", Door)

        assert declaration.applies_to(SlidingDoor)
        assert not declaration.applies_to(object)

    def test_inherited_event_found_on_subclass(self) -> None:
        @handles("opened", SlidingDoor)
        def handler() -> None: ...

        assert get_handled_events(handler)[0].source_type is SlidingDoor

    def test_unknown_event_raises(self) -> None:
        with pytest.raises(EventNotFoundError) as excinfo:
            handles("slammed", Door)

        error = excinfo.value
        assert error.code == EventErrorCode.EVENT_NOT_FOUND
        assert error.message == "The event slammed couldn't be found in the object Door"
        assert error.context["object_name"] == "Door"

    def test_empty_name_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            handles("")
