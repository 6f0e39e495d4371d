"""Typed failures raised while reading or adjusting a backlight."""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path


class ErrorKind(StrEnum):
    PATH_TOO_LONG = "path_too_long"
    OPEN_FAILED = "open_failed"
    CLOSE_FAILED = "close_failed"
    PARSE_FAILED = "parse_failed"
    WRITE_FAILED = "write_failed"
    OUT_OF_RANGE = "out_of_range"
    INVALID_INPUT = "invalid_input"


def _describe_errno(errno: int | None) -> str:
    if errno is None:
        return "unknown error"
    return os.strerror(errno)


class BacklightError(RuntimeError):
    """Base class for every backlight failure."""

    kind: ErrorKind


class PathTooLongError(BacklightError):
    """Raised when a control file path exceeds the platform path limit."""

    kind = ErrorKind.PATH_TOO_LONG

    def __init__(self, path: Path, limit: int) -> None:
        self.path = path
        self.limit = limit
        super().__init__(f"Failed to form the path to the sysfs control file '{path}': longer than {limit} bytes")


class OpenFailedError(BacklightError):
    """Raised when a control file cannot be opened."""

    kind = ErrorKind.OPEN_FAILED

    def __init__(self, path: Path, errno: int | None) -> None:
        self.path = path
        self.errno = errno
        super().__init__(f"Failed to open file '{path}': {_describe_errno(errno)}")


class CloseFailedError(BacklightError):
    """Raised when closing a control file handle fails."""

    kind = ErrorKind.CLOSE_FAILED

    def __init__(self, path: Path, errno: int | None) -> None:
        self.path = path
        self.errno = errno
        super().__init__(f"Failed to close the file handle for '{path}': {_describe_errno(errno)}")


class ParseFailedError(BacklightError):
    """Raised when a control file or user input holds no usable number."""

    kind = ErrorKind.PARSE_FAILED

    def __init__(self, source: str, raw: str, expected: str = "integer", detail: str | None = None) -> None:
        self.source = source
        self.raw = raw
        self.expected = expected
        message = f"Failed to parse {source} (expected {expected}, got '{raw}')"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class WriteFailedError(BacklightError):
    """Raised when an integer cannot be written to a control file."""

    kind = ErrorKind.WRITE_FAILED

    def __init__(self, path: Path, errno: int | None = None) -> None:
        self.path = path
        self.errno = errno
        super().__init__(f"Failed to write an integer to file '{path}': {_describe_errno(errno)}")


class OutOfRangeError(BacklightError):
    """Raised when the device reports a value outside its physical range."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Backlight reported an out-of-range {name} value: {value}")


class InvalidInputError(BacklightError):
    """Raised when a requested absolute percentage is outside [0, 100]."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: float, reason: str) -> None:
        self.value = value
        super().__init__(f"Cannot set backlight brightness percentage {reason}")
