"""Tests for running and tabulating the algorithms side by side."""

import pytest

from alternating_disks.comparison import AlgorithmRun, compare, format_table, run_algorithm
from alternating_disks.disks import DiskCountError
from alternating_disks.logging import Logger


class TestRunAlgorithm:
    """Verify a single named run."""

    def test_fields(self) -> None:
        """A run records the row before and after plus the counts."""
        run = run_algorithm("alternate", 3)
        assert run == AlgorithmRun(
            algorithm="alternate",
            light_count=3,
            before="L D L D L D",
            after="L L L D D D",
            swap_count=3,
            expected=3,
            is_sorted=True,
        )

    def test_unknown_algorithm_raises(self) -> None:
        """Only registered names can be run."""
        with pytest.raises(KeyError, match="Unknown algorithm"):
            run_algorithm("quick", 3)

    def test_bad_light_count_raises(self) -> None:
        """The row size must be positive."""
        with pytest.raises(DiskCountError):
            run_algorithm("lawnmower", 0)

    def test_to_dict(self) -> None:
        """Runs convert to plain dicts for JSON."""
        data = run_algorithm("lawnmower", 2).to_dict()
        assert data["swap_count"] == 1
        assert data["after"] == "L L D D"
        assert data["is_sorted"] is True


class TestCompare:
    """Verify comparing every algorithm."""

    def test_one_run_per_algorithm(self) -> None:
        """compare() runs both algorithms in registry order."""
        runs = compare(4)
        assert [run.algorithm for run in runs] == ["alternate", "lawnmower"]

    def test_algorithms_agree(self) -> None:
        """Both algorithms reach the same row in the same number of swaps."""
        alternate, lawnmower = compare(7)
        assert alternate.after == lawnmower.after
        assert alternate.swap_count == lawnmower.swap_count == alternate.expected

    def test_shared_logger(self) -> None:
        """A shared logger collects entries from every algorithm."""
        logger = Logger()
        compare(3, logger=logger)
        sources = {entry.source for entry in logger.entries}
        assert sources == {"alternate", "lawnmower"}


class TestFormatTable:
    """Verify the ASCII table."""

    def test_layout(self) -> None:
        """Header, separator, then one line per run."""
        table = format_table(compare(4))
        assert table.splitlines() == [
            "algorithm | n | swaps | expected | sorted",
            "----------+---+-------+----------+-------",
            "alternate | 4 |     6 |        6 | yes",
            "lawnmower | 4 |     6 |        6 | yes",
        ]

    def test_unsorted_run_shows_no(self) -> None:
        """A run whose row is not sorted is flagged."""
        run = AlgorithmRun(
            algorithm="alternate",
            light_count=2,
            before="L D L D",
            after="L D L D",
            swap_count=0,
            expected=1,
            is_sorted=False,
        )
        assert format_table([run]).splitlines()[-1].endswith("| no")

    def test_empty(self) -> None:
        """With no runs only the header and separator remain."""
        assert len(format_table([]).splitlines()) == 2
