"""Alternating disks — sort light and dark disks with adjacent swaps.

Re-exports public symbols so callers can write::

    from alternating_disks import DiskState, sort_lawnmower
"""

from alternating_disks.algorithms import (
    ALGORITHMS,
    SortAlgorithm,
    get_algorithm,
    sort_alternate,
    sort_lawnmower,
)
from alternating_disks.disks import (
    DiskColor,
    DiskCountError,
    DiskParseError,
    DiskState,
    SortedDisks,
    expected_swap_count,
)

__all__ = [
    "ALGORITHMS",
    "DiskColor",
    "DiskCountError",
    "DiskParseError",
    "DiskState",
    "SortAlgorithm",
    "SortedDisks",
    "expected_swap_count",
    "get_algorithm",
    "sort_alternate",
    "sort_lawnmower",
]
