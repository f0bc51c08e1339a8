# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: grabbag
"""
Equality with 64-bit hashes.

``Equatable64`` is the capability a value type opts into to provide its own
equality and a wide hash. ``EqualityComparer64`` lets a hash container take that
logic from the outside, with ``DefaultEqualityComparer64`` covering builtin
scalars, text and any ``Equatable64`` implementer.
"""

from __future__ import annotations

import hashlib
import numbers
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from grabbag.errors import InvalidArgumentError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_UINT64_MASK = 2**64 - 1
_HASH_SEED = 3074457345618258791
_HASH_MULTIPLIER = 3074457345618258799


@runtime_checkable
class Equatable64(Protocol[T]):
    """A value that defines its own equality and a signed 64-bit hash.

    Implementations must keep both consistent: when ``a.equals(b)`` is true,
    ``a.hash64() == b.hash64()``.
    """

    def equals(self, other: T) -> bool: ...

    def hash64(self) -> int: ...


@runtime_checkable
class EqualityComparer64(Protocol[T_contra]):
    """External equality and 64-bit hashing for values of one type."""

    def equals(self, x: T_contra | None, y: T_contra | None) -> bool: ...

    def hash64(self, obj: T_contra) -> int: ...


def to_int64(value: int) -> int:
    """Wrap an integer of any size into the signed 64-bit range."""
    value &= _UINT64_MASK
    if value > INT64_MAX:
        value -= 2**64
    return value


def combine_hash64(*values: int) -> int:
    """Fold integer hash parts into a single signed 64-bit hash.

    Order matters: ``combine_hash64(1, 2) != combine_hash64(2, 1)`` in general.
    """
    result = _HASH_SEED
    for value in values:
        part = value & _UINT64_MASK
        result = (result + (result + part) * _HASH_MULTIPLIER) & _UINT64_MASK
    return to_int64(result)


def _digest64(data: bytes) -> int:
    digest = hashlib.blake2b(data, digest_size=8).digest()
    return int.from_bytes(digest, "little", signed=True)


def _number_hash64(value: numbers.Number) -> int:
    # Equal numbers of different types (1, 1.0, Decimal(1), True) share a hash:
    # whole values hash as their int, the rest use the cross-type numeric hash()
    real: Any = value
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        if value.imag:
            return to_int64(hash(value))
        real = value.real
    try:
        whole = int(real)
    except (OverflowError, ValueError, TypeError):
        return to_int64(hash(value))
    if whole == real:
        return to_int64(whole)
    return to_int64(hash(value))


class DefaultEqualityComparer64(EqualityComparer64[Any]):
    """Comparer used when a container is not given one."""

    default: ClassVar[DefaultEqualityComparer64]

    def equals(self, x: Any, y: Any) -> bool:
        if x is None:
            return y is None
        if y is None:
            return False
        if isinstance(x, Equatable64):
            return bool(x.equals(y))
        return bool(x == y)

    def hash64(self, obj: Any) -> int:
        """Return a signed 64-bit hash for ``obj``.

        Raises:
            InvalidArgumentError: If ``obj`` is None
        """
        if obj is None:
            raise InvalidArgumentError("obj")
        if isinstance(obj, Equatable64):
            return to_int64(obj.hash64())
        if isinstance(obj, numbers.Number):
            return _number_hash64(obj)
        if isinstance(obj, str):
            # str hashing is salted per process; digest keeps it stable
            return _digest64(obj.encode("utf-8", "surrogatepass"))
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return _digest64(bytes(obj))
        return to_int64(hash(obj))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DefaultEqualityComparer64.default = DefaultEqualityComparer64()
