"""
Schedule configuration providers.

Provides read-only implementations of ScheduleConfigProvider for loading
the schedule from JSON or YAML files.
"""

from __future__ import annotations

from pathlib import Path

from .base import ScheduleConfigProvider
from .file_config_provider import FileScheduleConfigProvider
from .yaml_config_provider import YamlScheduleConfigProvider

_YAML_SUFFIXES = {".yaml", ".yml"}


def provider_for_path(config_path: Path | str, strict: bool = False) -> ScheduleConfigProvider:
    """Pick the provider matching the file extension (JSON unless .yaml/.yml)."""
    path = Path(config_path)
    if path.suffix.lower() in _YAML_SUFFIXES:
        return YamlScheduleConfigProvider(path, strict=strict)
    return FileScheduleConfigProvider(path, strict=strict)


__all__ = [
    "FileScheduleConfigProvider",
    "ScheduleConfigProvider",
    "YamlScheduleConfigProvider",
    "provider_for_path",
]
