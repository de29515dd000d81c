"""Sort trace logging.

Sorting algorithms can record what they did as they run: one entry
for every pass that moved a disk and a summary once they finish.  The
records are kept in memory so a caller (the CLI, the web app, a test)
can inspect or print them afterwards.

A trace for ``sort_alternate(DiskState(3))`` looks like::

    [DEBUG] alternate: pass 1: 2 swap(s) -> L L D L D D
    [DEBUG] alternate: pass 2: 1 swap(s) -> L L L D D D
    [INFO] alternate: sorted 6 disks with 3 swap(s)

- **LogLevel** — DEBUG for per-pass detail, INFO for run summaries.
- **LogEntry** — one line of the trace, tagged with the algorithm name.
- **Logger** — the trace buffer; one instance can collect several
  algorithms' runs, which ``filter(source=...)`` pulls apart again.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels; IntEnum so ``min_level`` filtering is a plain ``>=``."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One trace line.

    Attributes:
        level: DEBUG for a pass, INFO for a run summary.
        message: What the pass or run did, e.g. ``"pass 0: 1 swap(s) -> L L D D"``.
        source: The algorithm that wrote it (a key of ``ALGORITHMS``).

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only buffer of trace lines.

    The CLI renders it with ``render(min_level=LogLevel.DEBUG)`` under
    ``--verbose``; the web API returns only the INFO summaries.
    """

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were recorded."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log.

        Args:
            level: DEBUG for a pass, INFO for a run summary.
            message: The pass or run description.
            source: Name of the algorithm doing the sorting.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result if result is not self._entries else list(result)

    def render(self, *, min_level: LogLevel = LogLevel.INFO) -> str:
        """Return matching entries as text, one ``str(entry)`` per line."""
        return "\n".join(str(e) for e in self.filter(min_level=min_level))

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of recorded entries."""
        return len(self._entries)
