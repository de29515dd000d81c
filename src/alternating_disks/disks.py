"""Disk rows — the state container for the alternating disks puzzle.

The puzzle starts with ``2n`` disks in a row, alternating light and
dark::

    L D L D L D

and asks for them to be rearranged so every light disk sits to the
left of every dark disk, using nothing but swaps of *adjacent* disks::

    L L L D D D

This module holds the data side of the puzzle:

- **DiskColor** — the two disk colours.  A StrEnum whose values are the
  tokens used in the text rendering.
- **DiskState** — a fixed-length row of colours with indexed read,
  adjacent swap, and two structural predicates (alternating, sorted).
- **SortedDisks** — the output of a sorting algorithm: the final row
  plus the number of swaps it took to get there.

Design choices:
    - **Fail fast on bad indices** — an out-of-range ``get`` or ``swap``
      raises ``IndexError`` immediately.  The algorithms derive every
      index from the row's own bounds, so a bad index is always a bug.
    - **Rows are mutable, results are not** — ``SortedDisks`` is a
      frozen dataclass holding its own private copy of the row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class DiskColor(StrEnum):
    """The colour of a single disk.

    The value doubles as the disk's token in ``DiskState.to_text()``.
    """

    LIGHT = "L"
    DARK = "D"


class DiskCountError(ValueError):
    """Raised when a row is requested with a non-positive light count."""


class DiskParseError(ValueError):
    """Raised when text or colours cannot form a valid disk row."""


class DiskState:
    """A row of ``2n`` light and dark disks.

    A new row is always in canonical alternating form: light at every
    even index, dark at every odd index.  After construction the row
    only changes through ``swap()``, so its length and its colour
    counts are fixed for its whole lifetime.
    """

    def __init__(self, light_count: int) -> None:
        """Create the alternating row for *light_count* light disks.

        Args:
            light_count: Number of light disks (equal to the number of
                dark disks).  Must be a positive integer.

        Raises:
            DiskCountError: If *light_count* is not a positive int.

        """
        if isinstance(light_count, bool) or not isinstance(light_count, int):
            msg = f"Light count must be an int, got {type(light_count).__name__}"
            raise DiskCountError(msg)
        if light_count <= 0:
            msg = f"Light count must be positive, got {light_count}"
            raise DiskCountError(msg)
        self._colors: list[DiskColor] = [
            DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK for i in range(light_count * 2)
        ]

    # -- Alternate constructors ----------------------------------------------

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor | str]) -> DiskState:
        """Build a row holding exactly *colors*, in order.

        The row need not be alternating, but it must still have an
        even, non-zero length with equal light and dark counts.

        Raises:
            DiskParseError: If the colours cannot form a valid row.

        """
        items: list[DiskColor] = []
        for color in colors:
            try:
                items.append(DiskColor(color))
            except ValueError:
                msg = f"Unknown disk token: {color!r}"
                raise DiskParseError(msg) from None
        if not items:
            msg = "A disk row needs at least two disks"
            raise DiskParseError(msg)
        lights = items.count(DiskColor.LIGHT)
        if lights * 2 != len(items):
            msg = f"Row must hold equal light and dark disks, got {lights} light of {len(items)}"
            raise DiskParseError(msg)
        row = cls(lights)
        row._colors = items
        return row

    @classmethod
    def from_text(cls, text: str) -> DiskState:
        """Parse the output of ``to_text()`` back into a row.

        Tokens are separated by whitespace; each must be ``L`` or ``D``.

        Raises:
            DiskParseError: On an unknown token or an unbalanced row.

        """
        return cls.from_colors(text.split())

    # -- Counts and indices ---------------------------------------------------

    def total_count(self) -> int:
        """Return the number of disks in the row."""
        return len(self._colors)

    def light_count(self) -> int:
        """Return the number of light disks."""
        return self.total_count() // 2

    def dark_count(self) -> int:
        """Return the number of dark disks."""
        return self.light_count()

    def is_index(self, index: int) -> bool:
        """Return True if *index* addresses a disk in this row."""
        return 0 <= index < self.total_count()

    @property
    def colors(self) -> tuple[DiskColor, ...]:
        """Return a snapshot of the row's colours."""
        return tuple(self._colors)

    # -- Access and mutation --------------------------------------------------

    def get(self, index: int) -> DiskColor:
        """Return the colour at *index*.

        Raises:
            IndexError: If *index* is out of range.

        """
        if not self.is_index(index):
            msg = f"Disk index {index} out of range (0..{self.total_count() - 1})"
            raise IndexError(msg)
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at *left_index* and ``left_index + 1``.

        Raises:
            IndexError: If either position is out of range.

        """
        right_index = left_index + 1
        if not self.is_index(left_index) or not self.is_index(right_index):
            msg = f"Cannot swap at {left_index}: row has {self.total_count()} disks"
            raise IndexError(msg)
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def copy(self) -> DiskState:
        """Return an independent copy of this row."""
        return DiskState.from_colors(self._colors)

    # -- Predicates -----------------------------------------------------------

    def is_alternating(self) -> bool:
        """Return True if the row is in canonical alternating form.

        Light at index 0, dark at index 1, light at index 2, and so on
        for the whole row.
        """
        return all(
            color is (DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK)
            for i, color in enumerate(self._colors)
        )

    def is_sorted(self) -> bool:
        """Return True if every light disk is left of every dark disk.

        Equivalently, the first ``light_count()`` positions are light
        and the rest are dark.  Each disk is checked against the side
        it is required to be on.
        """
        boundary = self.light_count()
        return all(
            color is (DiskColor.LIGHT if i < boundary else DiskColor.DARK)
            for i, color in enumerate(self._colors)
        )

    # -- Rendering ------------------------------------------------------------

    def to_text(self) -> str:
        """Render the row as space-separated ``L``/``D`` tokens."""
        return " ".join(color.value for color in self._colors)

    def __str__(self) -> str:
        """Return the same text as ``to_text()``."""
        return self.to_text()

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"DiskState({self.to_text()!r})"

    # -- Sequence protocol ----------------------------------------------------

    def __len__(self) -> int:
        """Return the number of disks."""
        return self.total_count()

    def __iter__(self) -> Iterator[DiskColor]:
        """Iterate over the colours in index order."""
        return iter(tuple(self._colors))

    def __eq__(self, other: object) -> bool:
        """Rows are equal when they hold the same colours in the same order."""
        if not isinstance(other, DiskState):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SortedDisks:
    """The output of a sorting algorithm.

    Attributes:
        after: The row once the algorithm finished.  Stored as a
            private copy, so mutating the row passed in later has no
            effect on the result.
        swap_count: Total adjacent swaps performed.

    """

    after: DiskState
    swap_count: int

    def __post_init__(self) -> None:
        """Snapshot the row and validate the counter."""
        if self.swap_count < 0:
            msg = f"Swap count cannot be negative, got {self.swap_count}"
            raise ValueError(msg)
        object.__setattr__(self, "after", self.after.copy())


def expected_swap_count(light_count: int) -> int:
    """Return the fewest adjacent swaps that sort the alternating row.

    In the alternating row the k-th light disk (0-based) has exactly
    ``k`` dark disks to its left, so the inversions sum to
    ``n * (n - 1) / 2``.
    """
    if light_count <= 0:
        msg = f"Light count must be positive, got {light_count}"
        raise DiskCountError(msg)
    return light_count * (light_count - 1) // 2
