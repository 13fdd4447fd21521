# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The guard factory.

A *parser* (validation function) receives an untrusted value plus the helper
bundle and returns either the validated value or :data:`FAILURE`.
:func:`create_type_guard` lifts such a parser into a :class:`Guard`:

.. code-block:: python

    from shapeguard import FAILURE, create_type_guard

    def parse_point(value, helpers):
        if helpers.has(value, "x", is_number) and helpers.has(value, "y", is_number):
            return value
        return FAILURE

    is_point = create_type_guard(parse_point)

    is_point({"x": 1, "y": 2})             # True
    is_point.strict({"x": 1}, "bad point")  # raises GuardTypeError("bad point")
    is_point.optional(UNDEFINED)            # True
    (is_point | is_null)(None)              # True

Guards have two channels. Calling the guard (or ``test``, ``optional``,
``not_empty``) is total and returns a bool. ``strict`` and ``assert_`` raise
:class:`GuardTypeError` instead of returning ``False``.
"""

from __future__ import annotations

import logging
import reprlib
from typing import Any, Callable, Generic, Optional, TypeGuard, TypeVar, Union

from .config import get_settings
from .exceptions import ConfigurationError, GuardTypeError
from .helpers import HELPERS, Helpers
from .sentinels import FAILURE, UNDEFINED, FailureType
from .telemetry import record_strict_failure

logger = logging.getLogger(__name__)

T = TypeVar("T")
T2 = TypeVar("T2")

Parser = Callable[[Any, Helpers], Union[T, FailureType]]
"""A validation function: ``(value, helpers) -> T | FAILURE``. Must not raise."""

_repr = reprlib.Repr()
_repr.maxstring = 60
_repr.maxother = 60


def _parser_name(parser: Callable[..., Any]) -> str:
    return getattr(parser, "__qualname__", None) or getattr(parser, "__name__", None) or repr(parser)


def type_mismatch(
    guard_name: str,
    value: Any,
    message: Optional[str],
    default: str,
) -> GuardTypeError:
    """Build (and report) the error raised when *value* fails *guard_name*."""

    value_type = type(value).__name__
    custom = message is not None
    if message is None:
        message = f"{default} Received {value_type}."
        if get_settings().verbose_errors:
            message = f"{message[:-1]}: {_repr.repr(value)}."

    logger.debug("Guard %s rejected a value of type %s", guard_name, value_type)
    record_strict_failure(guard_name)

    return GuardTypeError(
        message,
        guard_name=guard_name,
        value_type=value_type,
        custom_message=custom,
    )


class Check(Generic[T]):
    """A boolean predicate with ``strict`` and ``assert_`` entry points.

    ``not_empty`` and ``optional`` on every :class:`Guard` are instances of this
    class; :class:`Guard` extends it with composition.
    """

    __slots__ = ("_check", "_name", "_failure_text")

    def __init__(self, check: Callable[[Any], bool], name: str, failure_text: Optional[str] = None):
        failure_text = failure_text or f"Type guard failed. Parser {name} returned FAILURE."
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

    def __call__(self, value: Any) -> TypeGuard[T]:
        return self._check(value)

    def test(self, value: Any) -> TypeGuard[T]:
        """Return True if *value* matches. Never raises."""
        return self._check(value)

    def strict(self, value: Any, message: Optional[str] = None) -> TypeGuard[T]:
        """Return True if *value* matches, otherwise raise :class:`GuardTypeError`.

        *message* replaces the default error text. Never returns False.
        """
        if not self._check(value):
            raise type_mismatch(self._name, value, message, self._failure_text)
        return True

    def assert_(self, value: Any, message: Optional[str] = None) -> bool:
        """Assertion-style spelling of :meth:`strict`.

        Static checkers cannot narrow through this call; after it returns the
        caller may treat *value* as ``T`` (cast if the checker needs telling).
        """
        return self.strict(value, message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name}>"


class Guard(Check[T]):
    """A type guard built from exactly one parser. Immutable and reentrant."""

    __slots__ = ("_parser", "_not_empty", "_optional")

    def __init__(self, parser: Parser[T], name: Optional[str] = None):
        if not callable(parser):
            raise ConfigurationError(
                f"Guard parser must be callable, got {type(parser).__name__}"
            )

        name = name or _parser_name(parser)
        super().__init__(self._matches, name)
        object.__setattr__(self, "_parser", parser)

        # reject emptiness first, validate second
        not_empty: Check[T] = Check(
            lambda value: not _is_empty(value) and self._matches(value),
            f"{name}.not_empty",
        )
        optional: Check[Optional[T]] = Check(
            lambda value: value is UNDEFINED or self._matches(value),
            f"{name}.optional",
        )
        object.__setattr__(self, "_not_empty", not_empty)
        object.__setattr__(self, "_optional", optional)

    def _matches(self, value: Any) -> bool:
        return self._parser(value, HELPERS) is not FAILURE

    @property
    def not_empty(self) -> Check[T]:
        """Guard that rejects empty values (``None``, ``UNDEFINED``, ``""``, ``[]``, ``()``, ``{}``) first."""
        return self._not_empty

    @property
    def optional(self) -> Check[Optional[T]]:
        """Guard that also accepts ``UNDEFINED``."""
        return self._optional

    def or_(self, other: "Guard[T2]") -> "Guard[Union[T, T2]]":
        """Return a guard for the union of this shape and *other*'s.

        The parsers are called directly: left first, and its result is kept
        when it succeeds; otherwise the right parser decides.
        """
        if not isinstance(other, Guard):
            raise ConfigurationError(
                f"Cannot combine guard {self._name} with {type(other).__name__}",
                hint="use is_tuple.or_(length, guard) for tuple shapes",
            )
        return create_type_guard(
            _union_parser(self._parser, other._parser),
            name=f"{self._name} | {other._name}",
        )

    def __or__(self, other: Any) -> "Guard[Any]":
        if not isinstance(other, Guard):
            return NotImplemented
        return self.or_(other)


def _union_parser(left: Parser[T], right: Parser[T2]) -> Parser[Union[T, T2]]:
    def parse_union(value: Any, helpers: Helpers) -> Union[T, T2, FailureType]:
        result = left(value, helpers)
        if result is not FAILURE:
            return result
        return right(value, helpers)

    return parse_union


_empty_guard: Optional["Guard[Any]"] = None


def _is_empty(value: Any) -> bool:
    # primitives is built on this module, so is_empty is bound on first use
    global _empty_guard
    if _empty_guard is None:
        from .primitives import is_empty

        _empty_guard = is_empty
    return _empty_guard(value)


def create_type_guard(parser: Parser[T], name: Optional[str] = None) -> Guard[T]:
    """Lift *parser* into a :class:`Guard`.

    :param parser: validation function ``(value, helpers) -> T | FAILURE``. It
                   should perform whatever checks are needed to establish that
                   the value has the target shape, and must not raise.
    :param name: label used in default error messages; defaults to the
                 parser's qualified name.
    :raises ConfigurationError: if *parser* is not callable.
    """

    return Guard(parser, name)


__all__ = [
    "Check",
    "Guard",
    "Parser",
    "create_type_guard",
    "type_mismatch",
]
