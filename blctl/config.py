"""Configuration helpers for blctl.

The backlight directory is resolved from, in order: an explicit override, the
``BLCTL_BACKLIGHT_DEVICE`` environment variable, a ``BACKLIGHT=`` line in
``/etc/blctl.conf`` and finally the first sysfs backlight that exposes both
control files. When nothing is found the built-in default directory is used.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from blctl.utils import parse_int, strip_or_none

LOGGER = logging.getLogger(__name__)

DEFAULT_CONF_PATH = Path("/etc/blctl.conf")
SYSFS_BACKLIGHT_ROOT = Path("/sys/class/backlight")
DEFAULT_BACKLIGHT_DIR = SYSFS_BACKLIGHT_ROOT / "intel_backlight"

BRIGHTNESS_FILE = "brightness"
MAX_BRIGHTNESS_FILE = "max_brightness"

FALLBACK_PATH_MAX = 4096
DEFAULT_LOG_LEVEL = "WARNING"


def platform_path_max() -> int:
    """Return the platform's maximum path length."""
    try:
        value = os.pathconf("/", "PC_PATH_MAX")
    except (OSError, ValueError, AttributeError):
        return FALLBACK_PATH_MAX
    return value if value > 0 else FALLBACK_PATH_MAX


def read_conf(path: Path) -> dict[str, str]:
    """Read ``KEY=VALUE`` pairs from a conf file; a missing file yields {}."""
    values: dict[str, str] = {}
    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                values[key.strip().upper()] = value.strip().strip("\"'")
    except FileNotFoundError:
        pass
    except OSError as exc:
        LOGGER.debug("[config] Unable to read %s: %s", path, exc)
    return values


def find_backlight_device(root: Path = SYSFS_BACKLIGHT_ROOT) -> Path | None:
    """Return the first backlight directory under ``root`` with both control files."""
    try:
        candidates = sorted(root.iterdir())
    except OSError:
        return None
    for device in candidates:
        if (device / BRIGHTNESS_FILE).exists() and (device / MAX_BRIGHTNESS_FILE).exists():
            return device
    return None


@dataclass(frozen=True)
class BacklightConfig:
    device_dir: Path
    brightness_file: str = BRIGHTNESS_FILE
    max_brightness_file: str = MAX_BRIGHTNESS_FILE
    path_max: int = FALLBACK_PATH_MAX
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        device: str | Path | None = None,
        sysfs_root: Path = SYSFS_BACKLIGHT_ROOT,
    ) -> BacklightConfig:
        source = os.environ if env is None else env
        conf_path = Path(source.get("BLCTL_CONF") or DEFAULT_CONF_PATH)
        conf = read_conf(conf_path)

        device_dir = _resolve_device_dir(
            explicit=device,
            env_value=strip_or_none(source.get("BLCTL_BACKLIGHT_DEVICE")),
            conf_value=strip_or_none(conf.get("BACKLIGHT")),
            sysfs_root=sysfs_root,
        )

        path_max = parse_int(source.get("BLCTL_PATH_MAX") or conf.get("PATH_MAX"), platform_path_max())
        if path_max <= 0:
            path_max = platform_path_max()

        log_level = (strip_or_none(source.get("BLCTL_LOG_LEVEL")) or conf.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

        return BacklightConfig(device_dir=device_dir, path_max=path_max, log_level=log_level)


def _resolve_device_dir(
    explicit: str | Path | None,
    env_value: str | None,
    conf_value: str | None,
    sysfs_root: Path,
) -> Path:
    if explicit:
        return Path(explicit)
    if env_value:
        return Path(env_value)
    if conf_value:
        return Path(conf_value)
    detected = find_backlight_device(sysfs_root)
    if detected is not None:
        LOGGER.debug("[config] Auto-detected backlight device %s", detected)
        return detected
    return DEFAULT_BACKLIGHT_DIR
