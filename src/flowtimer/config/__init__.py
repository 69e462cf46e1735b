"""Default schedule configuration."""

from .defaults import default_schedule_config

__all__ = ["default_schedule_config"]
