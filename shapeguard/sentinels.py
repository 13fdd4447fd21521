# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Sentinel values shared by every guard.

``FAILURE`` is what a validation function returns when the value does not
match. Because it is a dedicated object, ``None``, ``False``, ``0`` and ``""``
remain ordinary success values.

``UNDEFINED`` marks an absent value. It is distinct from ``None``, which is a
present value meaning "nothing".
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal


class Failure(Enum):
    FAILURE = "FAILURE"

    def __repr__(self) -> str:
        return "FAILURE"


class Undefined(Enum):
    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


FAILURE: Final = Failure.FAILURE
UNDEFINED: Final = Undefined.UNDEFINED

FailureType = Literal[Failure.FAILURE]
UndefinedType = Literal[Undefined.UNDEFINED]


__all__ = [
    "FAILURE",
    "UNDEFINED",
    "Failure",
    "FailureType",
    "Undefined",
    "UndefinedType",
]
