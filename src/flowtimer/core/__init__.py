"""Core error types shared across flowtimer."""

from .exceptions import ConfigLoadError, ScheduleValidationError

__all__ = [
    "ConfigLoadError",
    "ScheduleValidationError",
]
