"""Tests for blctl.config — backlight directory resolution and settings."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from blctl.config import (
    DEFAULT_BACKLIGHT_DIR,
    FALLBACK_PATH_MAX,
    BacklightConfig,
    find_backlight_device,
    platform_path_max,
    read_conf,
)

# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def _sysfs_device(root: Path, name: str, *, complete: bool = True) -> Path:
    device = root / name
    device.mkdir(parents=True)
    (device / "brightness").write_text("1", encoding="ascii")
    if complete:
        (device / "max_brightness").write_text("10", encoding="ascii")
    return device


@pytest.fixture
def conf_file(tmp_path: Path) -> Path:
    return tmp_path / "blctl.conf"


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    root = tmp_path / "sysfs"
    root.mkdir()
    return root


def _from_env(conf_file: Path, sysfs_root: Path, overrides: dict[str, str] | None = None, **kwargs) -> BacklightConfig:
    env = {"BLCTL_CONF": str(conf_file)}
    if overrides:
        env.update(overrides)
    return BacklightConfig.from_env(env, sysfs_root=sysfs_root, **kwargs)


# ===================================================================
# read_conf
# ===================================================================


class TestReadConf:
    def test_missing_file_returns_empty(self, conf_file: Path) -> None:
        assert read_conf(conf_file) == {}

    def test_parses_assignments(self, conf_file: Path) -> None:
        conf_file.write_text(
            "# backlight settings\n\nbacklight = /sys/class/backlight/acpi_video0\nLOG_LEVEL='debug'\nnot a pair\n",
            encoding="utf-8",
        )
        assert read_conf(conf_file) == {
            "BACKLIGHT": "/sys/class/backlight/acpi_video0",
            "LOG_LEVEL": "debug",
        }

    def test_strips_double_quotes(self, conf_file: Path) -> None:
        conf_file.write_text('BACKLIGHT="/dev/null/bl"\n', encoding="utf-8")
        assert read_conf(conf_file)["BACKLIGHT"] == "/dev/null/bl"


# ===================================================================
# find_backlight_device
# ===================================================================


class TestFindBacklightDevice:
    def test_skips_devices_without_both_files(self, empty_root: Path) -> None:
        _sysfs_device(empty_root, "a_partial", complete=False)
        full = _sysfs_device(empty_root, "b_full")
        assert find_backlight_device(empty_root) == full

    def test_picks_first_in_name_order(self, empty_root: Path) -> None:
        _sysfs_device(empty_root, "nvidia_0")
        first = _sysfs_device(empty_root, "amdgpu_bl0")
        assert find_backlight_device(empty_root) == first

    def test_missing_root(self, tmp_path: Path) -> None:
        assert find_backlight_device(tmp_path / "absent") is None

    def test_empty_root(self, empty_root: Path) -> None:
        assert find_backlight_device(empty_root) is None


# ===================================================================
# BacklightConfig.from_env
# ===================================================================


class TestDeviceResolution:
    def test_explicit_device_wins(self, conf_file: Path, empty_root: Path) -> None:
        conf_file.write_text("BACKLIGHT=/from/conf\n", encoding="utf-8")
        config = _from_env(conf_file, empty_root, {"BLCTL_BACKLIGHT_DEVICE": "/from/env"}, device="/explicit")
        assert config.device_dir == Path("/explicit")

    def test_env_beats_conf(self, conf_file: Path, empty_root: Path) -> None:
        conf_file.write_text("BACKLIGHT=/from/conf\n", encoding="utf-8")
        config = _from_env(conf_file, empty_root, {"BLCTL_BACKLIGHT_DEVICE": " /from/env "})
        assert config.device_dir == Path("/from/env")

    def test_conf_beats_detection(self, conf_file: Path, empty_root: Path) -> None:
        _sysfs_device(empty_root, "intel_backlight")
        conf_file.write_text("BACKLIGHT=/from/conf\n", encoding="utf-8")
        assert _from_env(conf_file, empty_root).device_dir == Path("/from/conf")

    def test_detects_sysfs_device(self, conf_file: Path, empty_root: Path) -> None:
        device = _sysfs_device(empty_root, "acpi_video0")
        assert _from_env(conf_file, empty_root).device_dir == device

    def test_falls_back_to_default(self, conf_file: Path, empty_root: Path) -> None:
        assert _from_env(conf_file, empty_root).device_dir == DEFAULT_BACKLIGHT_DIR

    def test_blank_env_value_is_ignored(self, conf_file: Path, empty_root: Path) -> None:
        conf_file.write_text("BACKLIGHT=/from/conf\n", encoding="utf-8")
        config = _from_env(conf_file, empty_root, {"BLCTL_BACKLIGHT_DEVICE": "   "})
        assert config.device_dir == Path("/from/conf")

    def test_uses_standard_file_names(self, conf_file: Path, empty_root: Path) -> None:
        config = _from_env(conf_file, empty_root)
        assert config.brightness_file == "brightness"
        assert config.max_brightness_file == "max_brightness"


class TestSettings:
    def test_path_max_from_env(self, conf_file: Path, empty_root: Path) -> None:
        assert _from_env(conf_file, empty_root, {"BLCTL_PATH_MAX": "64"}).path_max == 64

    @pytest.mark.parametrize("raw", ["lots", "0", "-5"])
    def test_invalid_path_max_uses_platform_limit(self, conf_file: Path, empty_root: Path, raw: str) -> None:
        assert _from_env(conf_file, empty_root, {"BLCTL_PATH_MAX": raw}).path_max == platform_path_max()

    def test_log_level_defaults_to_warning(self, conf_file: Path, empty_root: Path) -> None:
        assert _from_env(conf_file, empty_root).log_level == "WARNING"

    def test_log_level_is_normalized(self, conf_file: Path, empty_root: Path) -> None:
        assert _from_env(conf_file, empty_root, {"BLCTL_LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_log_level_from_conf(self, conf_file: Path, empty_root: Path) -> None:
        conf_file.write_text("LOG_LEVEL=info\n", encoding="utf-8")
        assert _from_env(conf_file, empty_root).log_level == "INFO"


class TestPlatformPathMax:
    def test_positive(self) -> None:
        assert platform_path_max() > 0

    def test_falls_back_when_unavailable(self) -> None:
        with patch("blctl.config.os.pathconf", side_effect=OSError("unsupported")):
            assert platform_path_max() == FALLBACK_PATH_MAX

    def test_falls_back_on_nonsense(self) -> None:
        with patch("blctl.config.os.pathconf", return_value=-1):
            assert platform_path_max() == FALLBACK_PATH_MAX
