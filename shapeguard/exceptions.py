# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exceptions raised by shapeguard."""

from __future__ import annotations

from typing import Optional


class ShapeGuardError(Exception):
    """Base class for all errors raised by shapeguard."""


class GuardTypeError(ShapeGuardError, TypeError):
    """Raised by ``strict`` / ``assert_`` when a value does not match its guard.

    Subclasses :class:`TypeError` so callers that only know about the builtin
    type-mismatch error still catch it.
    """

    def __init__(
        self,
        message: str,
        *,
        guard_name: str,
        value_type: str,
        custom_message: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.guard_name = guard_name
        self.value_type = value_type
        self.custom_message = custom_message


class ConfigurationError(ShapeGuardError, ValueError):
    """Raised when a guard is built incorrectly (never for a checked value)."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)
        self.hint = hint


__all__ = [
    "ConfigurationError",
    "GuardTypeError",
    "ShapeGuardError",
]
