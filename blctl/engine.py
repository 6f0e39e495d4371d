"""Percentage conversion and the get/set/adjust operations on a backlight."""

from __future__ import annotations

import logging
import math

from blctl.device import DeviceStore
from blctl.errors import InvalidInputError, OutOfRangeError

LOGGER = logging.getLogger(__name__)

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0


def round_half_up(value: float) -> int:
    """Round a non-negative value, sending an exact .5 fraction upwards."""
    whole = math.floor(value)
    if value - whole >= 0.5:
        return whole + 1
    return whole


def clamp_percentage(value: float) -> float:
    """Clamp into [0, 100]. NaN is passed through for the caller to reject."""
    if value < MIN_PERCENTAGE:
        return MIN_PERCENTAGE
    if value > MAX_PERCENTAGE:
        return MAX_PERCENTAGE
    return value


class PercentageEngine:
    """Maps between raw device brightness and a percentage of the maximum.

    Every call re-reads the device; nothing is cached between operations.
    """

    def __init__(self, store: DeviceStore) -> None:
        self._store = store

    def get_current_raw(self) -> int:
        name = self._store.config.brightness_file
        value = self._store.read_integer(name)
        if value < 0:
            raise OutOfRangeError(name, value)
        return value

    def get_maximum_raw(self) -> int:
        name = self._store.config.max_brightness_file
        value = self._store.read_integer(name)
        if value <= 0:
            raise OutOfRangeError(name, value)
        return value

    def get_percentage(self) -> float:
        current = self.get_current_raw()
        maximum = self.get_maximum_raw()
        return 100.0 * current / maximum

    def set_percentage(self, target: float) -> int:
        """Write ``target`` percent of the maximum and return the raw value written.

        Targets outside [0, 100] are rejected rather than clamped and the
        device is left untouched.
        """
        if math.isnan(target):
            raise InvalidInputError(target, "to a value that is not a number")
        if target < MIN_PERCENTAGE:
            raise InvalidInputError(target, "to a negative value")
        if target > MAX_PERCENTAGE:
            raise InvalidInputError(target, "to a value exceeding 100%")

        maximum = self.get_maximum_raw()
        raw = round_half_up(target * maximum / 100.0)
        LOGGER.debug("[engine] Setting %.2f%% of %d -> %d", target, maximum, raw)
        self._store.write_integer(self._store.config.brightness_file, raw)
        return raw

    def adjust_percentage(self, delta: float) -> int:
        """Shift the brightness by ``delta`` percent, clamping at 0 and 100."""
        current = self.get_percentage()
        target = clamp_percentage(current + delta)
        LOGGER.debug("[engine] Adjusting %.2f%% by %+.2f -> %.2f%%", current, delta, target)
        return self.set_percentage(target)
