# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Ready-made guards for primitive and JSON shapes.

Every guard here is an ordinary parser lifted through
:func:`~shapeguard.guard.create_type_guard`; nothing in this module is special
to the factory.

``bool`` is a subclass of ``int`` in Python, but the number guards reject it:
``True`` is a boolean, not the number one.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Union

from .guard import Guard, create_type_guard
from .helpers import Helpers
from .sentinels import FAILURE, FailureType
from .types import JsonArray, JsonObject, JsonPrimitive, JsonValue

_NUMERIC_STRING = re.compile(r"-?\d*\.?\d+", re.ASCII)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_json_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (bool, str)) or _is_number(value)


def _is_json_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(_is_json_value(item) for item in value)


def _is_json_object(value: Any) -> bool:
    if type(value) is not dict:
        return False
    return all(isinstance(k, str) and _is_json_value(v) for k, v in value.items())


def _is_json_value(value: Any) -> bool:
    return _is_json_primitive(value) or _is_json_array(value) or _is_json_object(value)


def _parse_boolean(value: Any, helpers: Helpers) -> Union[bool, FailureType]:
    return value if isinstance(value, bool) else FAILURE


def _parse_string(value: Any, helpers: Helpers) -> Union[str, FailureType]:
    return value if isinstance(value, str) else FAILURE


def _parse_number(value: Any, helpers: Helpers) -> Union[int, float, FailureType]:
    return value if _is_number(value) else FAILURE


def _parse_binary(value: Any, helpers: Helpers) -> Union[int, FailureType]:
    return value if _is_number(value) and helpers.includes((0, 1), value) else FAILURE


def _parse_numeric(value: Any, helpers: Helpers) -> Union[int, float, str, FailureType]:
    # Validates only: a numeric string is returned unchanged, never converted.
    if _is_number(value):
        return value
    if isinstance(value, str) and _NUMERIC_STRING.fullmatch(value):
        return value
    return FAILURE


def _parse_function(value: Any, helpers: Helpers) -> Union[Callable[..., Any], FailureType]:
    return value if callable(value) else FAILURE


def _parse_mapping(value: Any, helpers: Helpers) -> Union[Mapping, FailureType]:
    return value if isinstance(value, Mapping) else FAILURE


def _parse_array(value: Any, helpers: Helpers) -> Union[list, tuple, FailureType]:
    return value if isinstance(value, (list, tuple)) else FAILURE


def _parse_date(value: Any, helpers: Helpers) -> Union[datetime.date, FailureType]:
    return value if isinstance(value, datetime.date) else FAILURE


def _parse_iterable(value: Any, helpers: Helpers) -> Union[Iterable, FailureType]:
    if isinstance(value, (str, bytes, bytearray)):
        return FAILURE
    return value if isinstance(value, Iterable) else FAILURE


def _parse_json_primitive(value: Any, helpers: Helpers) -> Union[JsonPrimitive, FailureType]:
    return value if _is_json_primitive(value) else FAILURE


def _parse_json_array(value: Any, helpers: Helpers) -> Union[JsonArray, FailureType]:
    return value if _is_json_array(value) else FAILURE


def _parse_json_object(value: Any, helpers: Helpers) -> Union[JsonObject, FailureType]:
    return value if _is_json_object(value) else FAILURE


def _parse_json_value(value: Any, helpers: Helpers) -> Union[JsonValue, FailureType]:
    # None is a valid JSON value and FAILURE keeps it distinguishable.
    return value if _is_json_value(value) else FAILURE


is_boolean: Guard[bool] = create_type_guard(_parse_boolean, name="is_boolean")
is_string: Guard[str] = create_type_guard(_parse_string, name="is_string")
is_number: Guard[Union[int, float]] = create_type_guard(_parse_number, name="is_number")
is_binary: Guard[int] = create_type_guard(_parse_binary, name="is_binary")
is_numeric: Guard[Union[int, float, str]] = create_type_guard(_parse_numeric, name="is_numeric")
is_function: Guard[Callable[..., Any]] = create_type_guard(_parse_function, name="is_function")
is_mapping: Guard[Mapping] = create_type_guard(_parse_mapping, name="is_mapping")
is_array: Guard[Union[list, tuple]] = create_type_guard(_parse_array, name="is_array")
is_date: Guard[datetime.date] = create_type_guard(_parse_date, name="is_date")
is_iterable: Guard[Iterable] = create_type_guard(_parse_iterable, name="is_iterable")

is_json_primitive: Guard[JsonPrimitive] = create_type_guard(
    _parse_json_primitive, name="is_json_primitive"
)
is_json_array: Guard[JsonArray] = create_type_guard(_parse_json_array, name="is_json_array")
is_json_object: Guard[JsonObject] = create_type_guard(_parse_json_object, name="is_json_object")
is_json_value: Guard[JsonValue] = create_type_guard(_parse_json_value, name="is_json_value")


__all__ = [
    "is_array",
    "is_binary",
    "is_boolean",
    "is_date",
    "is_function",
    "is_iterable",
    "is_json_array",
    "is_json_object",
    "is_json_primitive",
    "is_json_value",
    "is_mapping",
    "is_number",
    "is_numeric",
    "is_string",
]
