# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Nullishness and emptiness guards, built only by composing the factory.

``is_empty`` is what every ``Guard.not_empty`` rejects up front.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .guard import Guard, create_type_guard
from .helpers import Helpers
from .sentinels import FAILURE, UNDEFINED, FailureType, UndefinedType


def _parse_null(value: Any, helpers: Helpers) -> Union[None, FailureType]:
    return None if value is None else FAILURE


def _parse_undefined(value: Any, helpers: Helpers) -> Union[UndefinedType, FailureType]:
    return UNDEFINED if value is UNDEFINED else FAILURE


def _parse_empty_string(value: Any, helpers: Helpers) -> Union[str, FailureType]:
    return value if isinstance(value, str) and value == "" else FAILURE


def _parse_empty_sequence(value: Any, helpers: Helpers) -> Union[list, tuple, FailureType]:
    return value if isinstance(value, (list, tuple)) and len(value) == 0 else FAILURE


def _parse_empty_mapping(value: Any, helpers: Helpers) -> Union[Mapping, FailureType]:
    return value if isinstance(value, Mapping) and len(value) == 0 else FAILURE


is_null: Guard[None] = create_type_guard(_parse_null, name="is_null")
is_undefined: Guard[UndefinedType] = create_type_guard(_parse_undefined, name="is_undefined")

is_nil = is_null | is_undefined

is_empty_string: Guard[str] = create_type_guard(_parse_empty_string, name="is_empty_string")
is_empty_sequence: Guard[Union[list, tuple]] = create_type_guard(
    _parse_empty_sequence, name="is_empty_sequence"
)
is_empty_mapping: Guard[Mapping] = create_type_guard(_parse_empty_mapping, name="is_empty_mapping")

is_empty = is_null | is_undefined | is_empty_string | is_empty_sequence | is_empty_mapping


__all__ = [
    "is_empty",
    "is_empty_mapping",
    "is_empty_sequence",
    "is_empty_string",
    "is_nil",
    "is_null",
    "is_undefined",
]
