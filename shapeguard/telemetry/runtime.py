# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter used by shapeguard instruments."""

from __future__ import annotations

from opentelemetry import metrics

from .._version import __version__

# Proxies to whatever provider the host application installs; no-op otherwise.
meter = metrics.get_meter("shapeguard", __version__)

__all__ = ["meter"]
