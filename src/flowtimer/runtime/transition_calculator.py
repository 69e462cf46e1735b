"""
Transition Calculator.

Pure logic: (schedule config, wall-clock now) -> moment of the next screen change.
Mirrors the resolver's interval lookup so that a change reported by the
resolver is never later than the transition computed before it.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import assert_never

from flowtimer.runtime.day_grid import (
    find_active_interval,
    locate_cycle_step,
    minute_of_day,
    next_interval_start,
    next_preempting_start,
)
from flowtimer.runtime.schedule_types import CycleMode, ScheduleConfig, StaticMode, TimeInterval, TimeOfDay


def _at(now: datetime, time_of_day: TimeOfDay) -> datetime:
    """``time_of_day`` on the same calendar day as ``now`` (tzinfo preserved)."""
    return now.replace(hour=time_of_day.hour, minute=time_of_day.minute, second=0, microsecond=0)


def _within_interval(interval: TimeInterval, now: datetime, now_min: int) -> datetime:
    interval_end = _at(now, interval.end)
    mode = interval.mode
    if isinstance(mode, StaticMode):
        return interval_end
    if isinstance(mode, CycleMode):
        located = locate_cycle_step(mode, now_min - interval.start_minutes)
        if located is None:
            # Nothing is displayed until the interval ends.
            return interval_end
        # Step boundaries sit on whole minutes; anchor on the current minute.
        minute_floor = now.replace(second=0, microsecond=0)
        step_end = minute_floor + timedelta(minutes=located.minutes_left_in_step)
        return min(step_end, interval_end)
    assert_never(mode)


def calculate_next_transition(config: ScheduleConfig, now: datetime) -> datetime | None:
    """
    Timestamp of the next state change after ``now``.

    - Static interval: the interval's end.
    - Cycle interval: the end of the current step, clamped to the interval's end.
    - Outside all intervals: the start of the earliest interval beginning later
      today.

    Inside an interval the result is also clamped to the start of any
    overlapping interval listed before it, where that one takes over.

    A degenerate cycle (no steps, zero total) displays nothing until its
    interval ends, so the interval end is returned. Returns None when nothing
    else happens today; callers re-query after the day rolls over.
    """
    now_min = minute_of_day(now)
    interval = find_active_interval(config.intervals, now_min)

    if interval is not None:
        transition = _within_interval(interval, now, now_min)
        preempt = next_preempting_start(config.intervals, interval, now_min)
        if preempt is not None:
            transition = min(transition, _at(now, TimeOfDay.from_minutes(preempt)))
        return transition

    upcoming = next_interval_start(config.intervals, now_min)
    if upcoming is None:
        return None
    return _at(now, upcoming.start)
