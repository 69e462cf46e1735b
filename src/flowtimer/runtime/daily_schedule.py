"""
Daily schedule builder.

Lists every transition point of the day for display and inspection. Purely
descriptive: the resolver and transition calculator never read this.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from flowtimer.runtime.constants import END_DESCRIPTION, START_DESCRIPTION, STEP_DESCRIPTION
from flowtimer.runtime.schedule_types import CycleMode, ScheduleConfig, TimeInterval


class TransitionKind(str, Enum):
    """What happens at a daily transition point."""

    START = "start"
    END = "end"
    STEP = "step"


class DailyTransition(NamedTuple):
    minute_of_day: int
    description: str
    kind: TransitionKind

    @property
    def time_label(self) -> str:
        """``HH:MM`` for the transition minute."""
        return f"{self.minute_of_day // 60:02d}:{self.minute_of_day % 60:02d}"


def _step_transitions(interval: TimeInterval, mode: CycleMode, repeat_cycles: bool) -> list[DailyTransition]:
    """Step boundaries strictly before the interval end.

    One pass over the steps by default; with ``repeat_cycles`` the cycle is
    unrolled until the interval ends. A zero-duration step still yields its
    own entry, on the same minute as the boundary before it.
    """
    count = len(mode.steps)
    if count == 0 or mode.total_minutes <= 0:
        return []

    entries: list[DailyTransition] = []
    boundary = interval.start_minutes
    while True:
        for idx, step in enumerate(mode.steps):
            boundary += step.duration_minutes
            if boundary >= interval.end_minutes:
                return entries
            entries.append(
                DailyTransition(
                    boundary,
                    STEP_DESCRIPTION.format(index=(idx + 1) % count + 1, count=count, name=interval.name),
                    TransitionKind.STEP,
                )
            )
        if not repeat_cycles:
            return entries


def daily_transitions(config: ScheduleConfig, *, repeat_cycles: bool = False) -> list[DailyTransition]:
    """
    All transition points of the day, ascending by minute.

    Every interval contributes a start and an end entry; cycle intervals also
    contribute step boundaries. Entries sharing a minute keep emission order.
    """
    transitions: list[DailyTransition] = []
    for interval in config.intervals:
        transitions.append(
            DailyTransition(interval.start_minutes, START_DESCRIPTION.format(name=interval.name), TransitionKind.START)
        )
        transitions.append(
            DailyTransition(interval.end_minutes, END_DESCRIPTION.format(name=interval.name), TransitionKind.END)
        )
        if isinstance(interval.mode, CycleMode):
            transitions.extend(_step_transitions(interval, interval.mode, repeat_cycles))

    transitions.sort(key=lambda t: t.minute_of_day)
    return transitions
