"""Shared schemas used at the configuration boundary."""

from .schemas import ScheduleConfigSchema

__all__ = ["ScheduleConfigSchema"]
