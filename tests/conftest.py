"""Pytest fixtures shared by the shapeguard test-suite."""
from __future__ import annotations

from typing import Any

import pytest

from shapeguard import reset_settings


class RecordingCounter:  # pylint: disable=too-few-public-methods
    """Stands in for an OpenTelemetry counter and remembers every ``add``."""

    def __init__(self):
        self.calls: list[tuple[int, dict[str, Any]]] = []

    def add(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):  # noqa: D401
    """Every test starts from default settings with no SHAPEGUARD_* overrides."""
    monkeypatch.delenv("SHAPEGUARD_VERBOSE_ERRORS", raising=False)
    monkeypatch.delenv("SHAPEGUARD_TELEMETRY", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def failure_counter(monkeypatch) -> RecordingCounter:
    """Swap the strict-failure counter for a recorder."""
    counter = RecordingCounter()
    monkeypatch.setattr("shapeguard.telemetry.metrics.strict_failure_total", counter)
    return counter


@pytest.fixture(autouse=True)
def _quiet_logs(caplog):  # noqa: D401
    """Only warnings and above are captured unless a test asks for DEBUG."""
    caplog.set_level("WARNING")
    yield
