"""Command-line driver for the alternating disks puzzle.

Builds the alternating row, runs one algorithm (or all of them), and
prints the result::

    $ alternating-disks -n 3 -a lawnmower
    algorithm: lawnmower
    before:    L D L D L D
    after:     L L L D D D
    swaps:     3 (expected 3)

Defaults come from ``DISKS_*`` environment variables (see
``alternating_disks.config``); command-line flags override them.

The formatting helpers are pure and return strings; only ``main()``
touches ``stdout``/``stderr``.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import TYPE_CHECKING

from alternating_disks.comparison import compare, format_table, run_algorithm
from alternating_disks.config import ALL_ALGORITHMS, Settings, algorithm_choices
from alternating_disks.logging import Logger, LogLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from alternating_disks.comparison import AlgorithmRun

EXIT_OK = 0
EXIT_USAGE = 2


def format_report(run: AlgorithmRun) -> str:
    """Format a single algorithm run as a labelled block."""
    lines = [
        f"algorithm: {run.algorithm}",
        f"before:    {run.before}",
        f"after:     {run.after}",
        f"swaps:     {run.swap_count} (expected {run.expected})",
    ]
    if not run.is_sorted:
        lines.append("warning:   result is not fully sorted")
    return "\n".join(lines)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"expected an integer, got {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value <= 0:
        msg = f"light count must be positive, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (defaults are filled in by ``main``)."""
    parser = argparse.ArgumentParser(
        prog="alternating-disks",
        description="Sort an alternating row of light and dark disks with adjacent swaps.",
    )
    parser.add_argument(
        "-n",
        "--light-count",
        type=_positive_int,
        default=None,
        help="number of light disks (the row holds twice as many disks)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=algorithm_choices(),
        default=None,
        help="algorithm to run, or 'all' for a comparison table",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="print the sort trace",
    )
    return parser


def run(light_count: int, algorithm: str, *, verbose: bool = False) -> str:
    """Sort the row and return the text to display."""
    logger = Logger()
    if algorithm == ALL_ALGORITHMS:
        output = format_table(compare(light_count, logger=logger))
    else:
        output = format_report(run_algorithm(algorithm, light_count, logger=logger))
    if verbose and len(logger):
        output = f"{logger.render(min_level=LogLevel.DEBUG)}\n\n{output}"
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.  This is the ``alternating-disks`` console entry point.

    Returns:
        The process exit code.

    """
    args = build_parser().parse_args(argv)
    settings = Settings.from_environ(os.environ).with_overrides(
        {
            "LIGHT_COUNT": None if args.light_count is None else str(args.light_count),
            "ALGORITHM": args.algorithm,
            "VERBOSE": None if args.verbose is None else "true",
        }
    )
    try:
        output = run(settings.light_count, settings.algorithm, verbose=settings.verbose)
    except ValueError as exc:
        print(f"alternating-disks: error: {exc}", file=sys.stderr)  # noqa: T201
        return EXIT_USAGE
    print(output)  # noqa: T201
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
