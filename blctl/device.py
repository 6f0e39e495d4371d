"""Raw integer access to a backlight's sysfs control files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from blctl.config import BacklightConfig
from blctl.errors import (
    CloseFailedError,
    OpenFailedError,
    ParseFailedError,
    PathTooLongError,
    WriteFailedError,
)
from blctl.utils import scan_int

LOGGER = logging.getLogger(__name__)

# Longest slice of unparsable file content echoed back in diagnostics.
_PREVIEW_CHARS = 32


@contextmanager
def control_handle(path: Path, mode: str) -> Iterator[TextIO]:
    """Open ``path`` for a single read or write and always close it.

    A close failure after a clean body raises CloseFailedError. When the body
    already raised, the close failure is logged and attached to the original
    exception as a note so both are reported.
    """
    try:
        handle = path.open(mode, encoding="ascii")
    except OSError as exc:
        raise OpenFailedError(path, exc.errno) from exc

    try:
        yield handle
    except BaseException as primary:
        try:
            handle.close()
        except OSError as exc:
            close_error = CloseFailedError(path, exc.errno)
            LOGGER.error("[device] %s", close_error)
            primary.add_note(str(close_error))
        raise

    try:
        handle.close()
    except OSError as exc:
        raise CloseFailedError(path, exc.errno) from exc


class DeviceStore:
    """Reads and writes plain decimal integers under the backlight directory."""

    def __init__(self, config: BacklightConfig) -> None:
        self._config = config

    @property
    def config(self) -> BacklightConfig:
        return self._config

    def path_for(self, name: str) -> Path:
        path = self._config.device_dir / name
        if len(os.fsencode(path)) > self._config.path_max:
            raise PathTooLongError(path, self._config.path_max)
        return path

    def read_integer(self, name: str) -> int:
        path = self.path_for(name)
        with control_handle(path, "r") as handle:
            try:
                content = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise ParseFailedError(f"'{path}'", "", detail=str(exc)) from exc
            value = scan_int(content)
            if value is None:
                raise ParseFailedError(f"'{path}'", content.strip()[:_PREVIEW_CHARS])
        LOGGER.debug("[device] Read %d from %s", value, path)
        return value

    def write_integer(self, name: str, value: int) -> None:
        path = self.path_for(name)
        with control_handle(path, "w") as handle:
            try:
                written = handle.write(str(value))
            except OSError as exc:
                raise WriteFailedError(path, exc.errno) from exc
            if written < 1:
                raise WriteFailedError(path)
        LOGGER.debug("[device] Wrote %d to %s", value, path)
