# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag

"""
Equality contracts with 64-bit hashes.
"""

from grabbag.collections.equality import (
    INT64_MAX,
    INT64_MIN,
    DefaultEqualityComparer64,
    EqualityComparer64,
    Equatable64,
    combine_hash64,
    to_int64,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "DefaultEqualityComparer64",
    "EqualityComparer64",
    "Equatable64",
    "combine_hash64",
    "to_int64",
]
