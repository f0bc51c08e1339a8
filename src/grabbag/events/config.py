# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Events module configuration.

This module provides configuration settings for the event manager.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EventManagerSettings(BaseSettings):
    """Configuration settings for :class:`grabbag.events.EventManager`."""

    model_config = SettingsConfigDict(
        env_prefix="GRABBAG_EVENTS_",
        extra="ignore",
        case_sensitive=False,
        validate_assignment=True,
    )

    allow_duplicate_subscription: bool = Field(
        default=True,
        description="Subscribe again when a listener method is already wired to the event",
    )

    # Handler matching
    match_by_name: bool = Field(
        default=True,
        description="Wire methods named <handler_prefix><event name> without a declaration",
    )
    handler_prefix: str = Field(
        default="on_",
        description="Prefix of handler methods matched by name",
    )
    include_private: bool = Field(
        default=False,
        description="Also consider listener methods whose names start with an underscore",
    )

    @field_validator("handler_prefix")
    @classmethod
    def validate_handler_prefix(cls, v: str) -> str:
        """The prefix must be usable at the start of a method name."""
        if not v or not (v + "x").isidentifier():
            raise ValueError(f"handler_prefix must start a valid identifier, got {v!r}")
        return v
