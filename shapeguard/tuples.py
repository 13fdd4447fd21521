# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tuple guards: sequences of an exact length.

The expected length is a second runtime argument, so these guards do not fit
the one-argument :class:`~shapeguard.guard.Guard` shape. :class:`TupleGuard`
mirrors its surface with *length* threaded through every entry point::

    is_tuple([1, 2], 2)                  # True
    is_tuple.strict((1,), 2)             # raises GuardTypeError
    is_tuple.optional(UNDEFINED, 2)      # True
    is_tuple.or_(2, is_null)(None)       # True
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, TypeGuard, TypeVar, Union

from .exceptions import ConfigurationError
from .guard import Guard, create_type_guard, type_mismatch
from .helpers import Helpers
from .sentinels import UNDEFINED, FailureType

T2 = TypeVar("T2")


def _valid_length(length: Any) -> bool:
    return isinstance(length, int) and not isinstance(length, bool) and length >= 0


def _matches(value: Any, length: int) -> bool:
    return isinstance(value, (list, tuple)) and _valid_length(length) and len(value) == length


class LengthCheck:
    """Boolean test plus ``strict`` / ``assert_``, each taking the expected length."""

    __slots__ = ("_check", "_name", "_failure_text")

    def __init__(self, check: Callable[[Any, int], bool], name: str, failure_text: str):
        object.__setattr__(self, "_check", check)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_failure_text", failure_text)

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, attr: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, value: Any, length: int) -> bool:
        return self._check(value, length)

    def test(self, value: Any, length: int) -> bool:
        return self._check(value, length)

    def strict(self, value: Any, length: int, message: Optional[str] = None) -> bool:
        """Return True when *value* has *length* items, otherwise raise :class:`GuardTypeError`."""
        if not self._check(value, length):
            raise type_mismatch(
                self._name, value, message, self._failure_text.format(length=length)
            )
        return True

    def assert_(self, value: Any, length: int, message: Optional[str] = None) -> bool:
        return self.strict(value, length, message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name}>"


class TupleGuard(LengthCheck):
    """Guard for a list or tuple of exactly *length* items (zero allowed)."""

    __slots__ = ("_optional",)

    def __init__(self) -> None:
        super().__init__(
            _matches,
            "is_tuple",
            "Type guard failed. Value is not a tuple of length {length}.",
        )
        optional = LengthCheck(
            lambda value, length: value is UNDEFINED or _matches(value, length),
            "is_tuple.optional",
            "Type guard failed. Value is not a tuple of length {length} or undefined.",
        )
        object.__setattr__(self, "_optional", optional)

    def __call__(self, value: Any, length: int) -> TypeGuard[Sequence[Any]]:
        return _matches(value, length)

    @property
    def optional(self) -> LengthCheck:
        """Accepts ``UNDEFINED`` or a tuple of the given length."""
        return self._optional

    def or_(self, length: int, guard: Guard[T2]) -> Guard[Union[Sequence[Any], T2]]:
        """Return a guard for "tuple of *length* items, or *guard*'s shape".

        The tuple shape is checked first; otherwise *guard*'s parser decides.
        """
        if not _valid_length(length):
            raise ConfigurationError(f"Tuple length must be a non-negative int, got {length!r}")
        if not isinstance(guard, Guard):
            raise ConfigurationError(
                f"Cannot combine is_tuple with {type(guard).__name__}; expected a Guard"
            )

        fallback = guard._parser

        def parse_tuple_or(value: Any, helpers: Helpers) -> Union[Sequence[Any], T2, FailureType]:
            if _matches(value, length):
                return value
            return fallback(value, helpers)

        return create_type_guard(parse_tuple_or, name=f"is_tuple[{length}] | {guard.name}")


is_tuple = TupleGuard()


__all__ = [
    "LengthCheck",
    "TupleGuard",
    "is_tuple",
]
