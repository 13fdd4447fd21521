# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Type aliases for JSON-shaped data."""

from __future__ import annotations

from typing import Dict, List, Sequence, Union

JsonPrimitive = Union[str, int, float, bool, None]
JsonArray = Sequence["JsonValue"]
JsonObject = Dict[str, "JsonValue"]
JsonValue = Union[JsonPrimitive, List["JsonValue"], JsonArray, JsonObject]

__all__ = [
    "JsonArray",
    "JsonObject",
    "JsonPrimitive",
    "JsonValue",
]
