"""CLI entry point: orientation-tools prints body orientations at an epoch."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, TextIO

from orientation_tools.angle_utils import dms_string
from orientation_tools.config import dtype_from_name, get_default_dtype
from orientation_tools.constants import BODY_NAMES
from orientation_tools.orientation import orientation, parse_body, raw_orientation
from orientation_tools.time_utils import millennia_from_jd, millennia_from_string

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ORIENTATION_TOOLS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ORIENTATION_TOOLS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _elapsed_millennia(args: argparse.Namespace) -> float:
    """Return elapsed Julian millennia from --millennia, --jd or --time.

    Raises:
        ValueError: If --time cannot be parsed.
    """
    if args.millennia is not None:
        return args.millennia
    if args.jd is not None:
        return millennia_from_jd(args.jd)
    if args.time is not None:
        t = millennia_from_string(args.time)
        if t is None:
            raise ValueError(f'Invalid date/time {args.time!r}')
        return t
    return 0.0


def _format_angle(value: float, use_dms: bool) -> str:
    if use_dms:
        return dms_string(value, 'dms')
    return f'{value:14.8f}'


def write_orientations(
    stream: TextIO,
    bodies: list[str],
    elapsed: float,
    *,
    raw: bool = False,
    dtype: type | None = None,
    use_dms: bool = False,
) -> None:
    """Write one line per body: name, report angles or VSOP87 angles.

    Raises:
        UnsupportedBodyError: If any body is not supported (nothing is written
            for bodies after it).
    """
    compute = raw_orientation if raw else orientation
    for name in bodies:
        a, b, c = compute(name, elapsed, dtype=dtype)
        fields = [_format_angle(float(v), use_dms) for v in (a, b, c)]
        stream.write(f'{name:<8s} ' + '  '.join(fields) + '\n')


def main(argv: list[str] | None = None) -> int:
    """Entry point for orientation-tools CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='orientation-tools',
        description='WGCCRE body orientations, converted to the VSOP87 frame.',
    )
    parser.add_argument(
        'bodies',
        nargs='*',
        default=list(BODY_NAMES),
        help='Body names (case-sensitive); default all supported bodies',
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument('--millennia', type=float, help='Julian millennia since J2000')
    when.add_argument('--jd', type=float, help='Julian Date (TDB)')
    when.add_argument('--time', help='UTC date/time string (e.g. "2025-01-01 12:00")')
    parser.add_argument(
        '--raw', action='store_true', help='Print report angles (alpha, delta, W) unconverted'
    )
    parser.add_argument(
        '--dtype', default=None, help='Working precision: float32, float64 or longdouble'
    )
    parser.add_argument('--dms', action='store_true', help='Print angles as d m s')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        dtype = dtype_from_name(args.dtype) if args.dtype else get_default_dtype()
        bodies = [parse_body(name).value for name in args.bodies]
        elapsed = _elapsed_millennia(args)
        logger.info('Elapsed time T=%r Julian millennia', elapsed)
        write_orientations(
            sys.stdout, bodies, elapsed, raw=args.raw, dtype=dtype, use_dms=args.dms
        )
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
