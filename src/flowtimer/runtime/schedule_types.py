"""
Schedule Types

Canonical data structures for the daily screen schedule. These are plain,
immutable value carriers compared by value; the resolver, transition
calculator, validator and daily schedule builder all consume them read-only.

Time model: a single repeating 24-hour day at whole-minute resolution.
Seconds only enter the picture from the wall clock at evaluation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from flowtimer.runtime.constants import MINUTES_PER_DAY

ScreenId = int


@dataclass(frozen=True)
class Rgba8:
    """Display color, one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range 0..255: {channel}")

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time of day with minute precision (no seconds)."""

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")

    def to_minutes(self) -> int:
        """Absolute minute offset from midnight (0..1439)."""
        return self.hour * 60 + self.minute

    @classmethod
    def from_minutes(cls, minutes: int) -> "TimeOfDay":
        if not 0 <= minutes < MINUTES_PER_DAY:
            raise ValueError(f"minute offset must be in 0..{MINUTES_PER_DAY - 1}, got {minutes}")
        return cls(hour=minutes // 60, minute=minutes % 60)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class ScreenConfig:
    """A displayable screen. Referenced by id from interval modes."""

    id: ScreenId
    title: str
    subtitle: str = ""
    color: Rgba8 = field(default_factory=lambda: Rgba8(0, 0, 0))


@dataclass(frozen=True)
class CycleStep:
    """One step of a repeating cycle: show screen_id for duration_minutes."""

    screen_id: ScreenId
    duration_minutes: int


@dataclass(frozen=True)
class StaticMode:
    """One screen for the whole interval."""

    screen_id: ScreenId


@dataclass(frozen=True)
class CycleMode:
    """
    Screens rotate through ``steps`` in order.

    The sequence repeats every ``total_minutes`` starting at the interval's
    start time, not at midnight.
    """

    steps: tuple[CycleStep, ...] = ()

    @property
    def total_minutes(self) -> int:
        return sum(step.duration_minutes for step in self.steps)


IntervalMode = Union[StaticMode, CycleMode]


@dataclass(frozen=True)
class TimeInterval:
    """
    A named span of the day with a display mode.

    start < end is assumed but not enforced here; intervals never span
    midnight. Inverted or zero-length intervals are reported by
    :func:`flowtimer.runtime.interval_validator.validate_intervals`.
    """

    id: int
    name: str
    start: TimeOfDay
    end: TimeOfDay
    mode: IntervalMode

    @property
    def start_minutes(self) -> int:
        return self.start.to_minutes()

    @property
    def end_minutes(self) -> int:
        return self.end.to_minutes()

    def contains(self, minute_of_day: int) -> bool:
        """Half-open containment: start <= minute < end."""
        return self.start_minutes <= minute_of_day < self.end_minutes


@dataclass(frozen=True)
class ScheduleConfig:
    """
    Everything the scheduler needs for one evaluation.

    Owned by the configuration layer; the runtime only reads it.
    """

    screens: tuple[ScreenConfig, ...] = ()
    intervals: tuple[TimeInterval, ...] = ()
    default_screen_id: ScreenId | None = None

    def find_screen(self, screen_id: ScreenId | None) -> ScreenConfig | None:
        if screen_id is None:
            return None
        for screen in self.screens:
            if screen.id == screen_id:
                return screen
        return None

    def first_screen(self) -> ScreenConfig | None:
        return self.screens[0] if self.screens else None


@dataclass(frozen=True)
class ActiveScreenInfo:
    """
    What to show right now and for how long.

    Transient: recomputed on every evaluation, never persisted.
    ``step_index`` is 1-based and only set inside a cycle interval.
    """

    title: str
    subtitle: str
    color: Rgba8
    remaining_seconds: int
    interval_name: str
    screen_id: ScreenId
    is_default_screen: bool
    step_index: int | None = None
    step_count: int | None = None
