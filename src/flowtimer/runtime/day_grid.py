"""
Day grid math: minute offsets, interval lookup and cycle positions, defined once.

Pure functions shared by the resolver, the transition calculator and the daily
schedule builder so that all of them agree on where boundaries fall.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from flowtimer.runtime.constants import SECONDS_PER_MINUTE
from flowtimer.runtime.schedule_types import CycleMode, CycleStep, TimeInterval


@dataclass(frozen=True)
class CyclePosition:
    """Where a moment falls inside a repeating cycle."""

    index: int  # 0-based position in CycleMode.steps
    step: CycleStep
    position: int  # minutes into the current repetition
    step_end: int  # minutes into the repetition at which this step ends

    @property
    def minutes_left_in_step(self) -> int:
        return self.step_end - self.position


def minute_of_day(now: datetime) -> int:
    """Minute offset of ``now`` from local midnight (0..1439)."""
    return now.hour * 60 + now.minute


def remaining_seconds(remaining_minutes: int, now_second: int) -> int:
    """
    Seconds until a boundary ``remaining_minutes`` whole minutes after the
    start of the current minute.

    The current minute is already ``now_second`` seconds old, so the result is
    always at least 1 for any second in 0..59.
    """
    if remaining_minutes > 0:
        return (remaining_minutes - 1) * SECONDS_PER_MINUTE + (SECONDS_PER_MINUTE - now_second)
    return SECONDS_PER_MINUTE - now_second


def find_active_interval(intervals: Sequence[TimeInterval], minute: int) -> TimeInterval | None:
    """First interval in list order containing ``minute``.

    Overlaps are not resolved here; the first match wins.
    """
    for interval in intervals:
        if interval.contains(minute):
            return interval
    return None


def next_interval_start(intervals: Sequence[TimeInterval], minute: int) -> TimeInterval | None:
    """Interval with the earliest start strictly after ``minute``, if any today.

    Ties keep the interval that comes first in list order.
    """
    best: TimeInterval | None = None
    for interval in intervals:
        start = interval.start_minutes
        if start > minute and (best is None or start < best.start_minutes):
            best = interval
    return best


def locate_cycle_step(mode: CycleMode, elapsed_minutes: int) -> CyclePosition | None:
    """
    Find the active step ``elapsed_minutes`` after the interval start.

    Returns None for a degenerate cycle (no steps, or zero total duration).
    """
    total = mode.total_minutes
    if not mode.steps or total <= 0:
        return None

    position = elapsed_minutes % total
    accumulated = 0
    for index, step in enumerate(mode.steps):
        step_end = accumulated + step.duration_minutes
        if position < step_end:
            return CyclePosition(index=index, step=step, position=position, step_end=step_end)
        accumulated = step_end
    return None


def next_preempting_start(intervals: Sequence[TimeInterval], active: TimeInterval, minute: int) -> int | None:
    """Earliest start after ``minute`` among intervals listed before ``active``.

    With overlapping intervals, such an interval takes over at its start since
    the first match wins. Inverted or empty intervals never match and are
    ignored.
    """
    earliest: int | None = None
    for interval in intervals:
        if interval is active:
            break
        start = interval.start_minutes
        if minute < start < interval.end_minutes and (earliest is None or start < earliest):
            earliest = start
    return earliest
