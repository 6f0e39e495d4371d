"""Command-line front end for blctl."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from blctl import __version__
from blctl.config import SYSFS_BACKLIGHT_ROOT, BacklightConfig
from blctl.device import DeviceStore
from blctl.engine import PercentageEngine
from blctl.errors import BacklightError, ParseFailedError
from blctl.utils import scan_float

LOGGER = logging.getLogger(__name__)

ABOUT = (
    f"Read a backlight's brightness from {SYSFS_BACKLIGHT_ROOT}/<device> and display it "
    "as a percentage of the backlight's maximum brightness. The brightness can also be "
    "adjusted before it is displayed, either by setting it to an explicit percentage "
    "or by adjusting it by the given amount."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blctl", description=ABOUT)
    change = parser.add_mutually_exclusive_group()
    change.add_argument("-a", "--adjust", metavar="PCT", help="Adjust backlight brightness by the given percentage.")
    change.add_argument("-s", "--set", metavar="PCT", help="Set the backlight brightness to the given percentage.")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the brightness of the backlight.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"blctl v{__version__}",
        help="Print version information.",
    )
    parser.add_argument("--device", help="Backlight directory (overrides BLCTL_BACKLIGHT_DEVICE and /etc/blctl.conf).")
    parser.add_argument("--log-level", help="Logging level (defaults to BLCTL_LOG_LEVEL or WARNING).")
    return parser


# Options whose value is glued on so dash-led input such as "-5%" is not taken for a flag.
_GLUED_VALUE_OPTIONS = {"-a": "-a=", "-s": "-s=", "--adjust": "--adjust=", "--set": "--set="}


def attach_option_values(argv: Sequence[str]) -> list[str]:
    """Join each ``-a``/``-s`` option with the token that follows it."""
    tokens = list(argv)
    joined: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            joined.extend(tokens[index:])
            break
        prefix = _GLUED_VALUE_OPTIONS.get(token)
        if prefix is not None and index + 1 < len(tokens):
            joined.append(prefix + tokens[index + 1])
            index += 2
            continue
        joined.append(token)
        index += 1
    return joined


def parse_percentage(raw: str) -> float:
    """Scan a user-supplied percentage, raising ParseFailedError when absent."""
    value = scan_float(raw)
    if value is None:
        raise ParseFailedError("input", raw, expected="percentage")
    return value


def run(args: argparse.Namespace, engine: PercentageEngine) -> float | None:
    """Carry out the requested change and return the percentage to print.

    Returns None when output is suppressed with ``--quiet``.
    """
    if args.set is not None:
        engine.set_percentage(parse_percentage(args.set))
    elif args.adjust is not None:
        engine.adjust_percentage(parse_percentage(args.adjust))

    if args.quiet:
        return None
    return engine.get_percentage()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(attach_option_values(sys.argv[1:] if argv is None else argv))

    config = BacklightConfig.from_env(device=args.device)
    level = (args.log_level or config.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    LOGGER.debug("Using backlight directory %s", config.device_dir)

    engine = PercentageEngine(DeviceStore(config))
    try:
        percentage = run(args, engine)
    except BacklightError as exc:
        print(f"ERROR: {exc}.", file=sys.stderr)
        return 1

    if percentage is not None:
        print(f"{percentage:.1f}")
    return 0
