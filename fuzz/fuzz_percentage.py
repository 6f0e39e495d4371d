import math
import sys

import atheris

with atheris.instrument_imports():
    from blctl.cli import parse_percentage
    from blctl.engine import clamp_percentage, round_half_up
    from blctl.errors import ParseFailedError


def TestOneInput(data: bytes) -> None:
    """Fuzz percentage parsing and the clamp/round pipeline."""
    provider = atheris.FuzzedDataProvider(data)
    maximum = provider.ConsumeIntInRange(1, 1_000_000)
    raw = provider.ConsumeUnicodeNoSurrogates(64)

    try:
        delta = parse_percentage(raw)
    except ParseFailedError:
        return  # Expected for non-numeric input

    target = clamp_percentage(50.0 + delta)
    if math.isnan(target):
        return

    written = round_half_up(target * maximum / 100.0)
    assert 0 <= written <= maximum


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
