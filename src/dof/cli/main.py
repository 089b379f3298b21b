"""CLI main module for the depth-of-field calculator.

Usage:
    dof
    dof <format>
    dof <format> <focalLength> <aperture> <focusDistanceMeters>

Every argument is positional; a token starting with ``-`` is a value like
any other. Results are written to stdout, usage text to stderr. Set
``DOF_LOG_LEVEL=DEBUG`` for diagnostic logging on stderr.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import TextIO

from ..core.config import LensParameters, SensorFormat, load_runtime_config
from ..core.errors import DofError, ParseError
from ..core.formats import iter_formats, lookup_format
from ..core.logging import get_logger, setup_logging
from ..core.units import mm_to_m
from ..physics.geometry import STANDARD_APERTURES, depth_of_field

PROG = "dof"
LABEL_WIDTH = 21

logger = get_logger(__name__)


def usage(stderr: TextIO) -> None:
    """Print the format listing."""
    print(f"usage: {PROG} fmt", file=stderr)
    for name, width, height in iter_formats():
        print(f"{name:<20} {width:3.1f}mm x {height:3.1f}mm", file=stderr)


def usage_lens(stderr: TextIO) -> None:
    """Print the lens argument usage."""
    print(f"usage: {PROG} fmt focalLength aperture focusDistance", file=stderr)
    apertures = " ".join(f"{n:g}" if n >= 10 else f"{n:.1f}" for n in STANDARD_APERTURES)
    print(f"standard apertures: {apertures}", file=stderr)


def parse_number(token: str) -> float:
    """Parse a command-line token as a float.

    Digit separators and surrounding whitespace are rejected; ``inf`` and
    ``nan`` spellings are accepted.

    Raises:
        ParseError: If the token is not a number
    """
    if "_" in token or token != token.strip():
        raise ParseError(token, "invalid syntax")
    try:
        return float(token)
    except ValueError as e:
        raise ParseError(token, str(e)) from e


def format_number(value: float, spec: str) -> str:
    """Format a float, spelling non-finite values as +Inf, -Inf and NaN."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(value, spec)


def _line(label: str, value: str, stdout: TextIO) -> None:
    print(f"{label:<{LABEL_WIDTH}}{value}", file=stdout)


def print_geometry(fmt: SensorFormat, stdout: TextIO) -> None:
    _line("format", fmt.name, stdout)
    _line("image size", f"{fmt.width_mm:3.1f}mm x {fmt.height_mm:3.1f}mm", stdout)
    _line("diagonal", f"{fmt.diagonal_mm:.3f}mm", stdout)
    _line("circle of confusion", f"{fmt.circle_of_confusion_mm:.6f}mm", stdout)


def print_lens(fmt: SensorFormat, lens: LensParameters, stdout: TextIO) -> None:
    dof_mm = depth_of_field(
        lens.focal_length_mm,
        lens.aperture,
        lens.focus_distance_mm,
        fmt.circle_of_confusion_mm,
    )
    logger.bind(format=fmt.name).debug("computed depth of field", {"dof_mm": dof_mm})

    _line("focal length", f"{format_number(lens.focal_length_mm, '.1f')}mm", stdout)
    _line("aperture", f"f/{format_number(lens.aperture, '.1f')}", stdout)
    _line("focus distance", f"{format_number(lens.focus_distance_mm, '.1f')}mm", stdout)
    _line("depth of field", f"{format_number(dof_mm, '.1f')}mm", stdout)


def run(args: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    """Dispatch on the number of positional arguments.

    Missing or unknown input prints usage and succeeds. A lens value that
    does not parse raises ParseError before any lens output is written.

    Args:
        args: Positional arguments, not including the program name
        stdout: Stream for results
        stderr: Stream for usage text

    Returns:
        Exit status
    """
    if len(args) < 1:
        usage(stderr)
        return 0

    fmt = lookup_format(args[0])
    if fmt is None:
        logger.debug("unknown format", {"name": args[0]})
        usage(stderr)
        return 0

    print_geometry(fmt, stdout)

    if len(args) == 1:
        return 0

    if len(args) < 4:
        usage_lens(stderr)
        return 0

    focal_length = parse_number(args[1])
    aperture = parse_number(args[2])
    focus_distance_m = parse_number(args[3])
    lens = LensParameters.from_cli(focal_length, aperture, focus_distance_m)
    logger.debug(
        "parsed lens parameters",
        {**lens.model_dump(), "focus_distance_m": mm_to_m(lens.focus_distance_mm)},
    )

    print_lens(fmt, lens, stdout)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = load_runtime_config()
        setup_logging(config.log_level)
        return run(args, sys.stdout, sys.stderr)
    except DofError as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
