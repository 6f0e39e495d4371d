"""Shared test fixtures for the blctl test suite.

This module provides reusable fixtures for:
- Fake sysfs backlight directories under tmp_path
- Config, device store and engine objects wired to those directories
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from blctl.config import BacklightConfig
from blctl.device import DeviceStore
from blctl.engine import PercentageEngine

MakeBacklight = Callable[..., Path]

# ============================================================================
# Fake sysfs Fixtures
# ============================================================================


@pytest.fixture
def make_backlight(tmp_path: Path) -> MakeBacklight:
    """Return a factory that writes ``brightness``/``max_brightness`` files.

    Passing None for either value leaves that file out.
    """

    def _make(current: str | None = "50", maximum: str | None = "200", name: str = "test_backlight") -> Path:
        device = tmp_path / name
        device.mkdir(parents=True, exist_ok=True)
        if current is not None:
            (device / "brightness").write_text(current, encoding="ascii")
        if maximum is not None:
            (device / "max_brightness").write_text(maximum, encoding="ascii")
        return device

    return _make


@pytest.fixture
def backlight_dir(make_backlight: MakeBacklight) -> Path:
    """Backlight at 50 of 200 (25%)."""
    return make_backlight()


# ============================================================================
# Core Object Fixtures
# ============================================================================


@pytest.fixture
def config(backlight_dir: Path) -> BacklightConfig:
    return BacklightConfig(device_dir=backlight_dir)


@pytest.fixture
def store(config: BacklightConfig) -> DeviceStore:
    return DeviceStore(config)


@pytest.fixture
def engine(store: DeviceStore) -> PercentageEngine:
    return PercentageEngine(store)
