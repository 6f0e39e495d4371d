import sys

import atheris

with atheris.instrument_imports():
    from blctl.utils import parse_int, scan_float, scan_int, strip_or_none


def TestOneInput(data: bytes) -> None:
    """Fuzz the number scanners with arbitrary sysfs-style content."""
    value = data.decode("utf-8", errors="ignore")

    # Scanners return None instead of raising
    number = scan_int(value)
    if number is not None and not value.lstrip().startswith("-"):
        assert number >= 0
    scan_float(value)

    # Env parsers fall back to the default
    assert isinstance(parse_int(value, default=0), int)
    strip_or_none(value)


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
