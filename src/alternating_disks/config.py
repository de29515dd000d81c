"""Settings — run configuration via key-value pairs.

Settings are plain ``KEY=VALUE`` string pairs, the same shape as a
process environment, so they can be seeded straight from
``os.environ``.  Only variables carrying the ``DISKS_`` prefix are
picked up, with the prefix stripped:

    - ``DISKS_LIGHT_COUNT`` — number of light disks (default 4).
    - ``DISKS_ALGORITHM`` — ``alternate``, ``lawnmower`` or ``all``.
    - ``DISKS_VERBOSE`` — ``1``/``true``/``yes`` to print the sort trace.

Values stay strings in the store; the typed properties parse them on
access and raise ``ValueError`` for anything malformed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alternating_disks.algorithms import ALGORITHMS

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "DISKS_"
ALL_ALGORITHMS = "all"

_DEFAULTS = {
    "LIGHT_COUNT": "4",
    "ALGORITHM": ALL_ALGORITHMS,
    "VERBOSE": "false",
}
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class Settings:
    """A key-value store for run settings.

    Each instance is an independent copy; modifying one does not
    affect any other.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create settings, optionally pre-populated.

        Args:
            initial: Starting values (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> Settings:
        """Collect every ``DISKS_*`` variable from *environ*."""
        return cls(
            initial={
                key.removeprefix(ENV_PREFIX): value
                for key, value in environ.items()
                if key.startswith(ENV_PREFIX)
            }
        )

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def copy(self) -> Settings:
        """Return an independent copy of these settings."""
        return Settings(initial=self._vars)

    def with_overrides(self, overrides: Mapping[str, str | None]) -> Settings:
        """Return a copy with every non-None value in *overrides* set.

        Command-line flags land here, so they win over the environment
        without touching the settings they were layered on.
        """
        settings = self.copy()
        for key, value in overrides.items():
            if value is not None:
                settings.set(key, value)
        return settings

    def _value(self, key: str) -> str:
        value = self.get(key)
        return (_DEFAULTS[key] if value is None else value).strip()

    @property
    def light_count(self) -> int:
        """Return the configured number of light disks.

        Raises:
            ValueError: If the value is not a positive integer.

        """
        raw = self._value("LIGHT_COUNT")
        try:
            count = int(raw)
        except ValueError:
            msg = f"LIGHT_COUNT must be an integer, got {raw!r}"
            raise ValueError(msg) from None
        if count <= 0:
            msg = f"LIGHT_COUNT must be positive, got {count}"
            raise ValueError(msg)
        return count

    @property
    def algorithm(self) -> str:
        """Return the configured algorithm name (or ``"all"``).

        Raises:
            ValueError: If the name is not a known algorithm.

        """
        name = self._value("ALGORITHM").lower()
        if name != ALL_ALGORITHMS and name not in ALGORITHMS:
            msg = f"ALGORITHM must be one of {algorithm_choices()}, got {name!r}"
            raise ValueError(msg)
        return name

    @property
    def verbose(self) -> bool:
        """Return whether the sort trace should be shown.

        Raises:
            ValueError: If the value is not a recognised boolean.

        """
        raw = self._value("VERBOSE").lower()
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
        msg = f"VERBOSE must be a boolean, got {raw!r}"
        raise ValueError(msg)


def algorithm_choices() -> list[str]:
    """Return every accepted algorithm name, ``"all"`` last."""
    return [*ALGORITHMS, ALL_ALGORITHMS]
