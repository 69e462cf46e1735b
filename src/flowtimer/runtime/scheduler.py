"""
Screen scheduler: the polling controller around the pure resolver.

Driven by the host's redraw/idle loop (about once per second). Each eligible
tick re-resolves the active screen and the next transition from the current
wall clock and reports whether the active screen changed.

The controller holds only derived state (last result, last tick time,
run/pause flag). The schedule itself is passed in on every tick and never
mutated.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from enum import Enum, auto
from typing import Callable

from flowtimer.runtime.active_screen_resolver import resolve_active_screen
from flowtimer.runtime.clock import SystemWallClock, WallClock
from flowtimer.runtime.formatting import format_time_until
from flowtimer.runtime.schedule_types import ActiveScreenInfo, ScheduleConfig
from flowtimer.runtime.transition_calculator import calculate_next_transition

MonotonicFn = Callable[[], float]

DEFAULT_MIN_TICK_INTERVAL = 1.0

logger = logging.getLogger(__name__)


class SchedulerStatus(Enum):
    """Run state of the screen scheduler."""

    RUNNING = auto()  # Host should tick when should_tick() allows
    PAUSED = auto()  # Host skips ticks; the wall clock keeps advancing


class ScreenScheduler:
    """
    Caches the active screen and next transition between host ticks.

    Pausing does not bank time: on resume the next tick reflects the real
    wall clock, so whatever changed during the pause shows up at once.
    """

    def __init__(
        self,
        wall_clock: WallClock | None = None,
        monotonic_fn: MonotonicFn = time.monotonic,
        min_tick_interval: float = DEFAULT_MIN_TICK_INTERVAL,
    ) -> None:
        if min_tick_interval < 0.0:
            raise ValueError("min_tick_interval must be non-negative")
        self._clock = wall_clock or SystemWallClock()
        self._monotonic = monotonic_fn
        self._min_tick_interval = min_tick_interval

        self._status = SchedulerStatus.RUNNING
        self._current_screen: ActiveScreenInfo | None = None
        self._next_transition: datetime | None = None
        self._last_tick_monotonic: float | None = None
        self._last_tick_at: datetime | None = None

    @property
    def status(self) -> SchedulerStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status is SchedulerStatus.RUNNING

    @property
    def current_screen(self) -> ActiveScreenInfo | None:
        return self._current_screen

    @property
    def next_transition(self) -> datetime | None:
        return self._next_transition

    @property
    def last_tick_at(self) -> datetime | None:
        """Wall-clock time of the last recomputation, None before the first."""
        return self._last_tick_at

    def should_tick(self) -> bool:
        """True when running and at least ``min_tick_interval`` seconds passed since the last tick."""
        if self._status is not SchedulerStatus.RUNNING:
            return False
        if self._last_tick_monotonic is None:
            return True
        return self._monotonic() - self._last_tick_monotonic >= self._min_tick_interval

    def tick(self, config: ScheduleConfig) -> bool:
        """
        Recompute the active screen and next transition.

        Returns:
            True iff the active screen id differs from the one cached before
            this call (appearing or disappearing counts as a change).
        """
        now = self._clock.now()
        previous_id = self._current_screen.screen_id if self._current_screen else None

        self._current_screen = resolve_active_screen(config, now)
        self._next_transition = calculate_next_transition(config, now)
        self._last_tick_monotonic = self._monotonic()
        self._last_tick_at = now

        current_id = self._current_screen.screen_id if self._current_screen else None
        changed = previous_id != current_id
        if changed:
            logger.info(
                "Active screen changed: %s -> %s (interval=%s, next_transition=%s)",
                previous_id,
                current_id,
                self._current_screen.interval_name if self._current_screen else None,
                self._next_transition.isoformat() if self._next_transition else None,
            )
        return changed

    def force_tick(self, config: ScheduleConfig) -> bool:
        """Recompute now, ignoring the throttle and the pause state."""
        return self.tick(config)

    def toggle_pause(self) -> SchedulerStatus:
        """Flip RUNNING <-> PAUSED and return the new status."""
        if self._status is SchedulerStatus.RUNNING:
            self._status = SchedulerStatus.PAUSED
        else:
            self._status = SchedulerStatus.RUNNING
        logger.debug("Screen scheduler %s", self._status.name.lower())
        return self._status

    def time_until_transition(self) -> str:
        """Countdown text to the cached next transition, measured from the wall clock."""
        return format_time_until(self._next_transition, self._clock.now())
