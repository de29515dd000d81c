"""Tests for the package's public re-exports."""

import alternating_disks
from alternating_disks import DiskState, sort_alternate, sort_lawnmower


class TestPublicApi:
    """Verify the top-level imports."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in alternating_disks.__all__:
            assert hasattr(alternating_disks, name)

    def test_quick_start(self) -> None:
        """The documented one-liner works."""
        row = DiskState(5)
        assert sort_lawnmower(row).after == sort_alternate(row).after
