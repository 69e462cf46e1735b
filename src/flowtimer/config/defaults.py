"""Built-in schedule used when no configuration file is available."""

from __future__ import annotations

from flowtimer.runtime.schedule_types import (
    CycleMode,
    CycleStep,
    Rgba8,
    ScheduleConfig,
    ScreenConfig,
    StaticMode,
    TimeInterval,
    TimeOfDay,
)

WORK_SCREEN_ID = 1
BREAK_SCREEN_ID = 2
PREPARATION_SCREEN_ID = 3

GREEN = Rgba8(46, 204, 113)
RED = Rgba8(231, 76, 60)
BLUE = Rgba8(52, 152, 219)


def default_schedule_config() -> ScheduleConfig:
    """
    A working day: focused morning, then a 25/5 pomodoro afternoon.

    Screens: Work (green), Break (red), Preparation (blue). Outside the two
    intervals the Work screen is shown.
    """
    screens = (
        ScreenConfig(id=WORK_SCREEN_ID, title="Work", subtitle="Focus", color=GREEN),
        ScreenConfig(id=BREAK_SCREEN_ID, title="Break", subtitle="Rest", color=RED),
        ScreenConfig(id=PREPARATION_SCREEN_ID, title="Preparation", subtitle="", color=BLUE),
    )
    intervals = (
        TimeInterval(
            id=1,
            name="Morning work",
            start=TimeOfDay(9, 0),
            end=TimeOfDay(12, 0),
            mode=StaticMode(screen_id=WORK_SCREEN_ID),
        ),
        TimeInterval(
            id=2,
            name="Pomodoro session",
            start=TimeOfDay(14, 0),
            end=TimeOfDay(18, 0),
            mode=CycleMode(
                steps=(
                    CycleStep(screen_id=WORK_SCREEN_ID, duration_minutes=25),
                    CycleStep(screen_id=BREAK_SCREEN_ID, duration_minutes=5),
                )
            ),
        ),
    )
    return ScheduleConfig(screens=screens, intervals=intervals, default_screen_id=WORK_SCREEN_ID)
