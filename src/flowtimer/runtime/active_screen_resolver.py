"""
Active Screen Resolver.

Pure logic: (schedule config, wall-clock now) -> active screen + remaining time.
No rendering, no persistence, no scheduler state.

Missing screen references never raise. They degrade to the first configured
screen with a diagnostic title; a schedule with nothing resolvable yields None.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import assert_never

from flowtimer.runtime.constants import (
    CYCLE_STEP_LABEL,
    MINUTES_PER_DAY,
    MISSING_SCREEN_SUBTITLE,
    MISSING_SCREEN_TITLE,
    STATIC_MODE_SUFFIX,
    WAITING_LABEL,
)
from flowtimer.runtime.day_grid import (
    find_active_interval,
    locate_cycle_step,
    minute_of_day,
    next_interval_start,
    remaining_seconds,
)
from flowtimer.runtime.schedule_types import (
    ActiveScreenInfo,
    CycleMode,
    ScheduleConfig,
    ScreenId,
    StaticMode,
    TimeInterval,
)

logger = logging.getLogger(__name__)


def resolve_active_screen(config: ScheduleConfig, now: datetime) -> ActiveScreenInfo | None:
    """
    Resolve the screen that should be displayed at ``now``.

    Rule: the first interval (in list order) with start <= now < end decides.
    Outside every interval the default screen is shown until the next
    interval starts, or until midnight if none starts later today.

    Args:
        config: Schedule to evaluate. Not mutated.
        now: Local wall-clock time. Only hour, minute and second are used.

    Returns:
        ActiveScreenInfo, or None when nothing can be displayed (no screens at
        all, or the active interval is an empty/zero-length cycle).
    """
    now_min = minute_of_day(now)
    interval = find_active_interval(config.intervals, now_min)
    if interval is not None:
        return _resolve_in_interval(config, interval, now_min, now.second)
    return _resolve_waiting(config, now_min, now.second)


def _resolve_in_interval(
    config: ScheduleConfig,
    interval: TimeInterval,
    now_min: int,
    now_sec: int,
) -> ActiveScreenInfo | None:
    mode = interval.mode
    if isinstance(mode, StaticMode):
        minutes_left = interval.end_minutes - now_min
        screen = config.find_screen(mode.screen_id)
        if screen is None:
            return _missing_screen(config, interval, mode.screen_id, remaining_seconds(minutes_left, now_sec))
        return ActiveScreenInfo(
            title=screen.title,
            subtitle=f"{screen.subtitle} {STATIC_MODE_SUFFIX}".strip(),
            color=screen.color,
            remaining_seconds=remaining_seconds(minutes_left, now_sec),
            interval_name=interval.name,
            screen_id=screen.id,
            is_default_screen=False,
        )
    if isinstance(mode, CycleMode):
        located = locate_cycle_step(mode, now_min - interval.start_minutes)
        if located is None:
            return None

        # A step is cut short when the interval ends before it does.
        minutes_left = min(located.minutes_left_in_step, interval.end_minutes - now_min)
        seconds = remaining_seconds(minutes_left, now_sec)
        step_index = located.index + 1
        step_count = len(mode.steps)

        screen = config.find_screen(located.step.screen_id)
        if screen is None:
            return _missing_screen(
                config,
                interval,
                located.step.screen_id,
                seconds,
                step_index=step_index,
                step_count=step_count,
            )

        step_info = CYCLE_STEP_LABEL.format(index=step_index, count=step_count)
        subtitle = f"{screen.subtitle} · {step_info}" if screen.subtitle else step_info
        return ActiveScreenInfo(
            title=screen.title,
            subtitle=subtitle,
            color=screen.color,
            remaining_seconds=seconds,
            interval_name=interval.name,
            screen_id=screen.id,
            is_default_screen=False,
            step_index=step_index,
            step_count=step_count,
        )
    assert_never(mode)


def _missing_screen(
    config: ScheduleConfig,
    interval: TimeInterval,
    missing_id: ScreenId,
    seconds: int,
    *,
    step_index: int | None = None,
    step_count: int | None = None,
) -> ActiveScreenInfo | None:
    fallback = config.first_screen()
    if fallback is None:
        return None
    logger.debug(
        "Interval %r references missing screen %s; falling back to screen %s",
        interval.name,
        missing_id,
        fallback.id,
    )
    return ActiveScreenInfo(
        title=MISSING_SCREEN_TITLE.format(screen_id=missing_id),
        subtitle=MISSING_SCREEN_SUBTITLE,
        color=fallback.color,
        remaining_seconds=seconds,
        interval_name=interval.name,
        screen_id=fallback.id,
        is_default_screen=False,
        step_index=step_index,
        step_count=step_count,
    )


def _resolve_waiting(config: ScheduleConfig, now_min: int, now_sec: int) -> ActiveScreenInfo | None:
    screen = config.find_screen(config.default_screen_id) or config.first_screen()
    if screen is None:
        return None

    upcoming = next_interval_start(config.intervals, now_min)
    boundary = upcoming.start_minutes if upcoming is not None else MINUTES_PER_DAY
    return ActiveScreenInfo(
        title=screen.title,
        subtitle=screen.subtitle,
        color=screen.color,
        remaining_seconds=remaining_seconds(boundary - now_min, now_sec),
        interval_name=WAITING_LABEL,
        screen_id=screen.id,
        is_default_screen=True,
    )
