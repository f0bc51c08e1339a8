# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Test doubles for code built on grabbag.
"""

from grabbag.testing.stubs import EventListener, EventSource, ValueStub

__all__ = ["EventListener", "EventSource", "ValueStub"]
