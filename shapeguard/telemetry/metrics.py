# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for shapeguard."""

from __future__ import annotations

import logging

from ..config import get_settings
from .runtime import meter

logger = logging.getLogger(__name__)

strict_failure_total = meter.create_counter(
    name="shapeguard.guard.strict_failure.total",
    description="Counts strict/assert guard checks that rejected a value.",
    unit="1",
)


def record_strict_failure(guard_name: str) -> None:
    """Count one strict failure for *guard_name* when telemetry is enabled."""

    if not get_settings().telemetry_enabled:
        return

    try:
        strict_failure_total.add(1, {"guard": guard_name})
    except Exception:
        # Telemetry must never replace the GuardTypeError the caller expects
        logger.debug("Failed to record strict failure for %s", guard_name, exc_info=True)


__all__ = [
    "record_strict_failure",
    "strict_failure_total",
]
