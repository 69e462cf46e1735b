"""
Pydantic schemas for schedule configuration files.

Mirrors the on-disk JSON layout used by the desktop app's settings store:
``mode`` is a tagged union (``static`` / ``cycle``) and unknown sections such
as ``system_settings`` or ``language`` are ignored. Schemas convert to and from
the immutable runtime types in :mod:`flowtimer.runtime.schedule_types`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from flowtimer.runtime.schedule_types import (
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


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ColorSchema(_Schema):
    """RGBA color, one byte per channel."""

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: int = Field(255, ge=0, le=255)


class TimeOfDaySchema(_Schema):
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)


class ScreenSchema(_Schema):
    id: int = Field(..., ge=1, description="Unique positive screen id")
    title: str
    subtitle: str = ""
    color: ColorSchema


class CycleStepSchema(_Schema):
    screen_id: int
    duration_minutes: int = Field(..., ge=0)


class StaticModeSchema(_Schema):
    mode: Literal["static"] = "static"
    screen_id: int


class CycleModeSchema(_Schema):
    mode: Literal["cycle"] = "cycle"
    steps: list[CycleStepSchema] = Field(default_factory=list)


IntervalModeSchema = Annotated[Union[StaticModeSchema, CycleModeSchema], Field(discriminator="mode")]


class IntervalSchema(_Schema):
    id: int
    name: str
    start: TimeOfDaySchema
    end: TimeOfDaySchema
    mode: IntervalModeSchema


class ScheduleConfigSchema(_Schema):
    """Top-level schedule document."""

    screens: list[ScreenSchema] = Field(default_factory=list)
    intervals: list[IntervalSchema] = Field(default_factory=list)
    default_screen_id: int | None = None

    def to_domain(self) -> ScheduleConfig:
        """Convert to the immutable runtime representation."""
        return ScheduleConfig(
            screens=tuple(
                ScreenConfig(
                    id=s.id,
                    title=s.title,
                    subtitle=s.subtitle,
                    color=Rgba8(s.color.r, s.color.g, s.color.b, s.color.a),
                )
                for s in self.screens
            ),
            intervals=tuple(_interval_to_domain(i) for i in self.intervals),
            default_screen_id=self.default_screen_id,
        )

    @classmethod
    def from_domain(cls, config: ScheduleConfig) -> "ScheduleConfigSchema":
        return cls(
            screens=[
                ScreenSchema(
                    id=s.id,
                    title=s.title,
                    subtitle=s.subtitle,
                    color=ColorSchema(r=s.color.r, g=s.color.g, b=s.color.b, a=s.color.a),
                )
                for s in config.screens
            ],
            intervals=[_interval_from_domain(i) for i in config.intervals],
            default_screen_id=config.default_screen_id,
        )


def _mode_to_domain(mode: StaticModeSchema | CycleModeSchema) -> IntervalMode:
    if isinstance(mode, StaticModeSchema):
        return StaticMode(screen_id=mode.screen_id)
    return CycleMode(
        steps=tuple(CycleStep(screen_id=s.screen_id, duration_minutes=s.duration_minutes) for s in mode.steps)
    )


def _interval_to_domain(interval: IntervalSchema) -> TimeInterval:
    return TimeInterval(
        id=interval.id,
        name=interval.name,
        start=TimeOfDay(interval.start.hour, interval.start.minute),
        end=TimeOfDay(interval.end.hour, interval.end.minute),
        mode=_mode_to_domain(interval.mode),
    )


def _interval_from_domain(interval: TimeInterval) -> IntervalSchema:
    mode: StaticModeSchema | CycleModeSchema
    if isinstance(interval.mode, StaticMode):
        mode = StaticModeSchema(screen_id=interval.mode.screen_id)
    else:
        mode = CycleModeSchema(
            steps=[
                CycleStepSchema(screen_id=s.screen_id, duration_minutes=s.duration_minutes)
                for s in interval.mode.steps
            ]
        )
    return IntervalSchema(
        id=interval.id,
        name=interval.name,
        start=TimeOfDaySchema(hour=interval.start.hour, minute=interval.start.minute),
        end=TimeOfDaySchema(hour=interval.end.hour, minute=interval.end.minute),
        mode=mode,
    )
