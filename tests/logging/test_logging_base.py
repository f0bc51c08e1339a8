"""Tests for the grabbag logging system."""

from __future__ import annotations

import json
import logging
import uuid
from enum import Enum

import pytest
from pydantic import ValidationError

from grabbag.logging import (
    GrabbagLogger,
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    get_logger,
    stdlib_level,
)
from grabbag.logging.logger import CONTEXT_ATTR


class Colour(Enum):
    RED = "red"


def _record(message: str = "hello", **context: object) -> logging.LogRecord:
    record = logging.LogRecord("grabbag.tests", logging.INFO, __file__, 1, message, None, None)
    setattr(record, CONTEXT_ATTR, context)
    return record


class TestLogLevel:
    """Tests for the LogLevel enum."""

    def test_log_level_values(self) -> None:
        assert LogLevel.DEBUG.value == "DEBUG"
        assert LogLevel.CRITICAL.value == "CRITICAL"

    def test_to_stdlib_level(self) -> None:
        assert LogLevel.WARNING.to_stdlib_level() == logging.WARNING

    def test_from_string(self) -> None:
        assert LogLevel.from_string("debug") is LogLevel.DEBUG
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_from_stdlib_level(self) -> None:
        assert LogLevel.from_stdlib_level(logging.INFO) is LogLevel.INFO
        with pytest.raises(ValueError):
            LogLevel.from_stdlib_level(logging.NOTSET)
        with pytest.raises(ValueError):
            LogLevel.from_stdlib_level(15)

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (LogLevel.ERROR, logging.ERROR),
            ("info", logging.INFO),
            (logging.NOTSET, logging.NOTSET),
            (15, 15),
        ],
    )
    def test_stdlib_level(self, level: LogLevel | str | int, expected: int) -> None:
        assert stdlib_level(level) == expected

    def test_stdlib_level_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            stdlib_level(-1)


class TestLoggingSettings:
    """Tests for environment-driven logging settings."""

    def test_defaults(self) -> None:
        settings = LoggingSettings.load()

        assert settings.level == "WARNING"
        assert settings.json_format is False
        assert settings.console_enabled is True

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRABBAG_LOGGING_LEVEL", "debug")
        monkeypatch.setenv("GRABBAG_LOGGING_JSON_FORMAT", "true")

        settings = LoggingSettings.load()

        assert settings.level == "DEBUG"
        assert settings.json_format is True

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="loud")

    def test_level_accepts_enum(self) -> None:
        assert LoggingSettings(level=LogLevel.ERROR).level == "ERROR"

    def test_level_accepts_named_number(self) -> None:
        assert LoggingSettings(level=logging.DEBUG).level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingSettings(level=15)


class TestStructuredFormatter:
    """Tests for text and JSON rendering of context."""

    def test_text_without_context(self) -> None:
        formatter = StructuredFormatter(include_timestamp=False, include_level=False)

        assert formatter.format(_record()) == "hello"

    def test_text_with_context(self) -> None:
        formatter = StructuredFormatter(include_timestamp=False)
        output = formatter.format(
            _record(event="test", note="two words", colour=Colour.RED, count=2)
        )

        assert output == 'hello [INFO] event=test note="two words" colour=RED count=2'

    def test_json(self) -> None:
        formatter = StructuredFormatter(json_format=True, include_timestamp=False)
        marker = uuid.uuid4()
        data = json.loads(formatter.format(_record(event="test", marker=marker)))

        assert data == {
            "message": "hello",
            "logger": "grabbag.tests",
            "event": "test",
            "marker": str(marker),
            "level": "INFO",
        }


class TestGrabbagLogger:
    """Tests for the structured logger."""

    def test_context_reaches_record(
        self, caplog: pytest.LogCaptureFixture, debug_logger: GrabbagLogger
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="grabbag.tests"):
            debug_logger.info("wired", event="test")

        (record,) = caplog.records
        assert record.getMessage() == "wired"
        assert getattr(record, CONTEXT_ATTR) == {"event": "test"}

    def test_bind_and_context(
        self, caplog: pytest.LogCaptureFixture, debug_logger: GrabbagLogger
    ) -> None:
        bound = debug_logger.bind(source="EventSource")

        with caplog.at_level(logging.DEBUG, logger="grabbag.tests"):
            with bound.context(listener="EventListener"):
                bound.debug("inside")
            bound.debug("outside", handle=1)

        inside, outside = caplog.records
        assert getattr(inside, CONTEXT_ATTR) == {
            "source": "EventSource",
            "listener": "EventListener",
        }
        assert getattr(outside, CONTEXT_ATTR) == {"source": "EventSource", "handle": 1}

    def test_level_filters(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = GrabbagLogger(
            "grabbag.tests.quiet",
            settings=LoggingSettings(level="ERROR", console_enabled=False),
        )

        with caplog.at_level(logging.DEBUG):
            logger.set_level(LogLevel.ERROR)
            logger.warning("dropped")
            logger.error("kept")

        assert [r.getMessage() for r in caplog.records] == ["kept"]

    def test_console_handler_not_duplicated(self) -> None:
        settings = LoggingSettings(console_enabled=True)
        GrabbagLogger("grabbag.tests.console", settings=settings)
        logger = GrabbagLogger("grabbag.tests.console", settings=settings)

        consoles = [
            h
            for h in logger.stdlib_logger.handlers
            if getattr(h, "_grabbag_console", False)
        ]
        assert len(consoles) == 1

    def test_get_logger_uses_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRABBAG_LOGGING_LEVEL", "INFO")
        monkeypatch.setenv("GRABBAG_LOGGING_CONSOLE_ENABLED", "false")

        logger = get_logger("grabbag.tests.env")

        assert logger.stdlib_logger.level == logging.INFO
        assert logger.settings.console_enabled is False

    def test_level_override(self) -> None:
        logger = get_logger("grabbag.tests.override", level=LogLevel.DEBUG)
        assert logger.stdlib_logger.level == logging.DEBUG

    def test_bind_keeps_notset_level(self) -> None:
        logger = GrabbagLogger(
            "grabbag.tests.notset",
            settings=LoggingSettings(console_enabled=False),
            level=logging.NOTSET,
        )

        bound = logger.bind(request="r-1")

        assert logger.stdlib_logger.level == logging.NOTSET
        assert bound.stdlib_logger.level == logging.NOTSET

    def test_bind_keeps_custom_level(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = GrabbagLogger(
            "grabbag.tests.custom",
            settings=LoggingSettings(console_enabled=False),
            level=15,
        )
        caplog.set_level(15, logger="grabbag.tests.custom")

        bound = logger.bind(request="r-2")
        bound.debug("hidden")
        bound.info("shown")

        assert bound.stdlib_logger.level == 15
        assert [r.getMessage() for r in caplog.records] == ["shown"]

    def test_set_level_accepts_numbers(self) -> None:
        logger = GrabbagLogger(
            "grabbag.tests.set_level",
            settings=LoggingSettings(console_enabled=False),
        )

        logger.set_level(logging.NOTSET)
        assert logger.stdlib_logger.level == logging.NOTSET
        logger.set_level("error")
        assert logger.stdlib_logger.level == logging.ERROR
