"""
Number scanning and environment parsing helpers

Provides common helpers for:
- Token scanning: Leading-number extraction in the manner of scanf (scan_int, scan_float)
- Env parsing: Lenient conversion with fallback defaults (parse_int, strip_or_none)

The scanners are strict (they return None when no number is present) while
the env parsers never fail and fall back to the supplied default.
"""

from __future__ import annotations

import re

# Range of the C int that sysfs attributes are scanned into.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_TOKEN_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_TOKEN_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)


def scan_int(text: str) -> int | None:
    """Return the integer at the start of ``text`` or None.

    Leading whitespace and an optional sign are accepted; anything after the
    ASCII digits is ignored. Values outside [INT_MIN, INT_MAX] yield None.
    """
    match = _INT_TOKEN_RE.match(text)
    if match is None:
        return None
    token = match.group(1).lstrip("+-").lstrip("0")
    if len(token) > len(str(INT_MAX)):
        return None
    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def scan_float(text: str) -> float | None:
    """Return the floating-point number at the start of ``text`` or None.

    Accepts decimal and exponent notation as well as ``inf``/``infinity`` and
    ``nan`` in any case. Trailing characters are ignored. Hexadecimal floats
    such as ``0x1p3`` are not recognised; only their leading ``0`` is read.
    """
    match = _FLOAT_TOKEN_RE.match(text)
    if match is None:
        return None
    return float(match.group(1))


def strip_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_int(value: str | None, default: int) -> int:
    """Best-effort int parser with fallback."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default

