"""Top-level pytest configuration for grabbag."""

from __future__ import annotations

import os

import pytest

from grabbag.events import EventManagerSettings
from grabbag.logging import GrabbagLogger, LoggingSettings
from grabbag.testing import EventListener, EventSource


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GRABBAG_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("GRABBAG_"):
            monkeypatch.delenv(key)


@pytest.fixture
def debug_logger() -> GrabbagLogger:
    """Logger that emits everything through propagation only (no console output)."""
    return GrabbagLogger(
        "grabbag.tests",
        settings=LoggingSettings(level="DEBUG", console_enabled=False),
    )


@pytest.fixture
def settings() -> EventManagerSettings:
    return EventManagerSettings()


@pytest.fixture
def source() -> EventSource:
    return EventSource()


@pytest.fixture
def listener() -> EventListener:
    return EventListener()
