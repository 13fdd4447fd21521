# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry instruments for guard failures."""

from .metrics import record_strict_failure, strict_failure_total

__all__ = [
    "record_strict_failure",
    "strict_failure_total",
]
