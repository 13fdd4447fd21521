# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""shapeguard - composable runtime type guards for untrusted data.

.. code-block:: python

    from shapeguard import FAILURE, create_type_guard, is_number, is_string

    def parse_user(value, helpers):
        if (
            helpers.has(value, "name", is_string.not_empty)
            and helpers.has_optional(value, "age", is_number)
        ):
            return value
        return FAILURE

    is_user = create_type_guard(parse_user)

    if is_user(payload):
        ...
    is_user.strict(payload, "payload is not a user")
"""

import logging

from ._version import __version__
from .config import Settings, get_settings, reset_settings
from .exceptions import ConfigurationError, GuardTypeError, ShapeGuardError
from .guard import Check, Guard, Parser, create_type_guard
from .helpers import (
    HELPERS,
    Helpers,
    has_optional_property,
    has_property,
    includes,
    tuple_has,
)
from .primitives import (
    is_empty,
    is_empty_mapping,
    is_empty_sequence,
    is_empty_string,
    is_nil,
    is_null,
    is_undefined,
)
from .sentinels import FAILURE, UNDEFINED
from .standard import (
    is_array,
    is_binary,
    is_boolean,
    is_date,
    is_function,
    is_iterable,
    is_json_array,
    is_json_object,
    is_json_primitive,
    is_json_value,
    is_mapping,
    is_number,
    is_numeric,
    is_string,
)
from .tuples import LengthCheck, TupleGuard, is_tuple
from .types import JsonArray, JsonObject, JsonPrimitive, JsonValue

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # factory
    "Check",
    "Guard",
    "Parser",
    "create_type_guard",
    # helpers
    "HELPERS",
    "Helpers",
    "has_optional_property",
    "has_property",
    "includes",
    "tuple_has",
    # sentinels
    "FAILURE",
    "UNDEFINED",
    # tuples
    "LengthCheck",
    "TupleGuard",
    "is_tuple",
    # primitives
    "is_empty",
    "is_empty_mapping",
    "is_empty_sequence",
    "is_empty_string",
    "is_nil",
    "is_null",
    "is_undefined",
    # standard guards
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
    # errors and settings
    "ConfigurationError",
    "GuardTypeError",
    "ShapeGuardError",
    "Settings",
    "get_settings",
    "reset_settings",
    # JSON aliases
    "JsonArray",
    "JsonObject",
    "JsonPrimitive",
    "JsonValue",
]
