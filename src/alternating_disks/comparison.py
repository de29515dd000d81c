"""Side-by-side comparison of the sorting algorithms.

Runs every registered algorithm on the same alternating row and
collects the results into ``AlgorithmRun`` records, which
``format_table`` renders as a small ASCII table::

    algorithm | n | swaps | expected | sorted
    ----------+---+-------+----------+-------
    alternate | 4 |     6 |        6 | yes
    lawnmower | 4 |     6 |        6 | yes
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from alternating_disks.algorithms import ALGORITHMS, get_algorithm
from alternating_disks.disks import DiskState, expected_swap_count

if TYPE_CHECKING:
    from alternating_disks.logging import Logger


@dataclass(frozen=True)
class AlgorithmRun:
    """The outcome of one algorithm on one row size."""

    algorithm: str
    light_count: int
    before: str
    after: str
    swap_count: int
    expected: int
    is_sorted: bool

    def to_dict(self) -> dict[str, object]:
        """Return the run as a JSON-friendly dict."""
        return asdict(self)


def run_algorithm(name: str, light_count: int, *, logger: Logger | None = None) -> AlgorithmRun:
    """Sort the alternating row of *light_count* with the algorithm *name*.

    Raises:
        KeyError: If *name* is not a registered algorithm.
        DiskCountError: If *light_count* is not positive.

    """
    algorithm = get_algorithm(name)
    before = DiskState(light_count)
    result = algorithm(before, logger=logger)
    return AlgorithmRun(
        algorithm=name,
        light_count=light_count,
        before=before.to_text(),
        after=result.after.to_text(),
        swap_count=result.swap_count,
        expected=expected_swap_count(light_count),
        is_sorted=result.after.is_sorted(),
    )


def compare(light_count: int, *, logger: Logger | None = None) -> list[AlgorithmRun]:
    """Run every registered algorithm on the same row size."""
    return [run_algorithm(name, light_count, logger=logger) for name in ALGORITHMS]


_HEADERS = ("algorithm", "n", "swaps", "expected", "sorted")


def format_table(runs: list[AlgorithmRun]) -> str:
    """Render runs as an ASCII table, one row per run."""
    rows = [
        (
            run.algorithm,
            str(run.light_count),
            str(run.swap_count),
            str(run.expected),
            "yes" if run.is_sorted else "no",
        )
        for run in runs
    ]
    widths = [max(len(cell) for cell in column) for column in zip(_HEADERS, *rows, strict=True)]

    def _line(cells: tuple[str, ...]) -> str:
        # Text columns left-aligned, numbers right-aligned.
        parts = [
            cell.rjust(width) if cell.isdigit() else cell.ljust(width)
            for cell, width in zip(cells, widths, strict=True)
        ]
        return " | ".join(parts).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([_line(_HEADERS), separator, *(_line(row) for row in rows)])
