"""
Runtime schedule engine.

Pure resolution functions over an immutable ScheduleConfig, plus the polling
ScreenScheduler that the host UI drives.
"""

from .active_screen_resolver import resolve_active_screen
from .daily_schedule import DailyTransition, TransitionKind, daily_transitions
from .interval_validator import ensure_valid, validate_intervals
from .scheduler import SchedulerStatus, ScreenScheduler
from .schedule_types import (
    ActiveScreenInfo,
    CycleMode,
    CycleStep,
    IntervalMode,
    Rgba8,
    ScheduleConfig,
    ScreenConfig,
    StaticMode,
    TimeInterval,
    TimeOfDay,
)
from .transition_calculator import calculate_next_transition

__all__ = [
    # Schedule types
    "ActiveScreenInfo",
    "CycleMode",
    "CycleStep",
    "IntervalMode",
    "Rgba8",
    "ScheduleConfig",
    "ScreenConfig",
    "StaticMode",
    "TimeInterval",
    "TimeOfDay",
    # Engine
    "resolve_active_screen",
    "calculate_next_transition",
    "validate_intervals",
    "ensure_valid",
    "daily_transitions",
    "DailyTransition",
    "TransitionKind",
    # Controller
    "ScreenScheduler",
    "SchedulerStatus",
]
