# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
grabbag: small generic utilities.

- :mod:`grabbag.events`: event publish points and automatic listener wiring
- :mod:`grabbag.collections`: equality contracts with 64-bit hashes
- :mod:`grabbag.testing`: stubs for tests
"""

__version__ = "0.1.0"
