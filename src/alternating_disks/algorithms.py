"""Sorting algorithms for the alternating disks puzzle.

Both algorithms only ever swap adjacent disks, and only when a dark
disk sits immediately left of a light one.  They differ in the *order*
in which they look at the pairs:

    - **Alternate** — ``2n - 1`` passes.  Even passes look at the pairs
      starting on even indices (0-1, 2-3, ...), odd passes at the pairs
      starting on odd indices (1-2, 3-4, ...).  An odd-even
      transposition sort that only corrects dark-before-light.
    - **Lawnmower** — ``n`` passes.  Each pass sweeps left to right and
      then right to left, like mowing a lawn in rows.  Every pass
      carries the extreme misplaced disks all the way to their side.

Both run their full pass count with no early exit, so the number of
comparisons depends only on the row length.  Both copy the input
first: the caller's row is never touched.

Precondition: the input row is in canonical alternating form.  The
pass counts are derived from that shape, so other rows are not
guaranteed to come out sorted.

All algorithms share the ``SortAlgorithm`` call signature, so callers
can look one up by name in ``ALGORITHMS`` and swap them freely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from alternating_disks.disks import DiskColor, DiskState, SortedDisks
from alternating_disks.logging import LogLevel

if TYPE_CHECKING:
    from alternating_disks.logging import Logger


class SortAlgorithm(Protocol):
    """Call signature shared by every sorting algorithm."""

    def __call__(self, before: DiskState, *, logger: Logger | None = None) -> SortedDisks:
        """Sort a copy of *before* and report the swaps it took."""
        ...


def _needs_swap(disks: DiskState, left_index: int) -> bool:
    """Return True if a dark disk sits directly left of a light one."""
    return (
        disks.get(left_index) is DiskColor.DARK and disks.get(left_index + 1) is DiskColor.LIGHT
    )


def _scan_pairs(disks: DiskState, start: int) -> int:
    """Fix every misordered pair ``(j, j+1)`` for ``j = start, start+2, ...``.

    Returns:
        The number of swaps performed.

    """
    swaps = 0
    for j in range(start, disks.total_count() - 1, 2):
        if _needs_swap(disks, j):
            disks.swap(j)
            swaps += 1
    return swaps


def _sweep_right(disks: DiskState) -> int:
    """Sweep left to right, swapping each dark-light pair in passing."""
    swaps = 0
    for j in range(disks.total_count() - 1):
        if _needs_swap(disks, j):
            disks.swap(j)
            swaps += 1
    return swaps


def _sweep_left(disks: DiskState) -> int:
    """Sweep right to left, pulling each light disk past a dark neighbour."""
    swaps = 0
    for k in range(disks.total_count() - 1, 0, -1):
        if disks.get(k) is DiskColor.LIGHT and disks.get(k - 1) is DiskColor.DARK:
            disks.swap(k - 1)
            swaps += 1
    return swaps


def _record(logger: Logger | None, level: LogLevel, message: str, *, source: str) -> None:
    if logger is not None:
        logger.log(level, message, source=source)


def sort_alternate(before: DiskState, *, logger: Logger | None = None) -> SortedDisks:
    """Sort disks with the alternate (odd-even pass) algorithm.

    Args:
        before: The alternating row to sort.  It is copied, not modified.
        logger: Optional trace log; receives a DEBUG entry for each pass
            that moved a disk and an INFO summary.

    Returns:
        The sorted row and the total number of swaps.

    """
    disks = before.copy()
    swap_count = 0
    for pass_number in range(disks.total_count() - 1):
        swaps = _scan_pairs(disks, pass_number % 2)
        if swaps:
            _record(
                logger,
                LogLevel.DEBUG,
                f"pass {pass_number}: {swaps} swap(s) -> {disks.to_text()}",
                source="alternate",
            )
        swap_count += swaps

    _record(
        logger,
        LogLevel.INFO,
        f"sorted {before.total_count()} disks with {swap_count} swap(s)",
        source="alternate",
    )
    return SortedDisks(after=disks, swap_count=swap_count)


def sort_lawnmower(before: DiskState, *, logger: Logger | None = None) -> SortedDisks:
    """Sort disks with the lawnmower (back-and-forth sweep) algorithm.

    Args:
        before: The alternating row to sort.  It is copied, not modified.
        logger: Optional trace log; receives a DEBUG entry for each pass
            that moved a disk and an INFO summary.

    Returns:
        The sorted row and the total number of swaps.

    """
    disks = before.copy()
    swap_count = 0
    for pass_number in range(disks.light_count()):
        # The right-to-left sweep must see the left-to-right sweep's result.
        swaps = _sweep_right(disks)
        swaps += _sweep_left(disks)
        if swaps:
            _record(
                logger,
                LogLevel.DEBUG,
                f"pass {pass_number}: {swaps} swap(s) -> {disks.to_text()}",
                source="lawnmower",
            )
        swap_count += swaps

    _record(
        logger,
        LogLevel.INFO,
        f"sorted {before.total_count()} disks with {swap_count} swap(s)",
        source="lawnmower",
    )
    return SortedDisks(after=disks, swap_count=swap_count)


ALGORITHMS: dict[str, SortAlgorithm] = {
    "alternate": sort_alternate,
    "lawnmower": sort_lawnmower,
}


def get_algorithm(name: str) -> SortAlgorithm:
    """Look up an algorithm by name.

    Raises:
        KeyError: If *name* is not registered.

    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        known = ", ".join(sorted(ALGORITHMS))
        msg = f"Unknown algorithm {name!r} (known: {known})"
        raise KeyError(msg) from None
