"""Wall clock abstractions used by the screen scheduler.

The schedule is defined in local wall-clock time. Clocks are injectable so
that the scheduler can be driven deterministically in tests and tools.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from threading import Lock
from typing import Protocol, runtime_checkable


@runtime_checkable
class WallClock(Protocol):
    """Protocol implemented by wall clock providers."""

    def now(self) -> datetime:
        """Return the current local wall-clock time."""


class SystemWallClock:
    """Wall clock backed by the operating system's local time."""

    def now(self) -> datetime:
        return datetime.now()


class SteppedWallClock:
    """Deterministic wall clock used for tests.

    Time advances only when :meth:`advance` or :meth:`set` is called.
    """

    def __init__(self, start: datetime) -> None:
        self._current = start
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._current

    def advance(self, seconds: float) -> datetime:
        """Advance the clock by ``seconds`` (must be non-negative)."""
        if seconds < 0.0:
            raise ValueError("seconds must be non-negative")
        with self._lock:
            self._current += timedelta(seconds=seconds)
            return self._current

    def set(self, value: datetime) -> None:
        with self._lock:
            self._current = value
