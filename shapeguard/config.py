# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Settings are read once and cached; guards only consult them on the raising
path, so the boolean channel stays independent of the environment.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass

_ENV_PREFIX = "SHAPEGUARD_"
_FALSY = ("", "0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(f"{_ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


@dataclass(frozen=True)
class Settings:
    """Runtime settings for failure reporting."""

    verbose_errors: bool = False  # include a repr of the rejected value in default messages
    telemetry_enabled: bool = True

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            verbose_errors=_env_flag("VERBOSE_ERRORS", False),
            telemetry_enabled=_env_flag("TELEMETRY", True),
        )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them from the environment once."""

    return Settings.from_env()


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""

    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
