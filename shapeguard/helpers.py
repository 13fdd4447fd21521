# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Structural helpers offered to every validation function.

The four helpers are pure and total: whatever they are handed, they answer
``True`` or ``False`` and never raise on their own account. A guard passed in
by the caller is trusted to be equally well behaved.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Final, Hashable, Optional

from .sentinels import UNDEFINED

Predicate = Callable[[Any], bool]


def _has_attributes(container: Any) -> bool:
    """Builtin values (str, list, int, None, ...) expose methods, not fields."""

    return type(container).__module__ != "builtins"


def _lookup(container: Any, key: Hashable) -> Any:
    """Return ``container[key]`` (or the attribute *key*), else ``UNDEFINED``."""

    if isinstance(container, Mapping):
        try:
            if key not in container:
                return UNDEFINED
            return container[key]
        except (TypeError, KeyError):
            # unhashable key, or a mapping whose __contains__ and __getitem__ disagree
            return UNDEFINED

    if not _has_attributes(container) or not isinstance(key, str):
        return UNDEFINED

    try:
        return getattr(container, key)
    except Exception:
        # a property on an untrusted object may raise anything
        return UNDEFINED


def _is_present(container: Any, key: Hashable) -> bool:
    if isinstance(container, Mapping):
        try:
            return key in container
        except TypeError:
            return False
    return _lookup(container, key) is not UNDEFINED


def has_property(container: Any, key: Hashable, guard: Optional[Predicate] = None) -> bool:
    """Return True when *key* is present in *container*.

    Mappings are checked by key, user-defined objects by attribute name.
    Builtin values such as strings and lists have no properties here. When
    *guard* is given, the value stored under *key* must also satisfy it.
    """

    if not _is_present(container, key):
        return False

    return guard(_lookup(container, key)) if guard is not None else True


def has_optional_property(
    container: Any, key: Hashable, guard: Optional[Predicate] = None
) -> bool:
    """Return True when *key* is absent, holds ``UNDEFINED``, or satisfies :func:`has_property`.

    ``None`` counts as a present value, so ``{"k": None}`` only passes when
    *guard* accepts ``None``.
    """

    if _lookup(container, key) is UNDEFINED:
        return True

    return has_property(container, key, guard)


def tuple_has(sequence: Any, index: int, guard: Predicate) -> bool:
    """Return True when *index* is a valid slot of *sequence* and *guard* holds there.

    Only non-negative indexes count as slots; an out-of-range index is simply
    ``False``.
    """

    if not isinstance(sequence, (list, tuple)):
        return False
    if not isinstance(index, int) or isinstance(index, bool):
        return False
    if not 0 <= index < len(sequence):
        return False

    return guard(sequence[index])


def includes(fixed_set: Iterable[Any], value: Any) -> bool:
    """Return True when *value* is one of the literals in *fixed_set*.

    Comparison is type-strict: ``True`` is not ``1`` and ``1.0`` is not ``1``.
    """

    if not isinstance(fixed_set, Iterable):
        return False

    for candidate in fixed_set:
        if candidate is value:
            return True
        if type(candidate) is type(value) and candidate == value:
            return True
    return False


@dataclass(frozen=True)
class Helpers:
    """The helper bundle passed as the second argument of every validation function."""

    has: Callable[..., bool] = has_property
    has_optional: Callable[..., bool] = has_optional_property
    tuple_has: Callable[..., bool] = tuple_has
    includes: Callable[..., bool] = includes


HELPERS: Final[Helpers] = Helpers()


__all__ = [
    "HELPERS",
    "Helpers",
    "Predicate",
    "has_optional_property",
    "has_property",
    "includes",
    "tuple_has",
]
