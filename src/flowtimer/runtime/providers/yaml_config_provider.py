"""
YAML schedule configuration provider.

Same document shape as the JSON provider, written as YAML:

    screens:
      - {id: 1, title: Work, subtitle: Focus, color: {r: 46, g: 204, b: 113}}
    intervals:
      - id: 1
        name: Morning work
        start: {hour: 9, minute: 0}
        end: {hour: 12, minute: 0}
        mode: {mode: static, screen_id: 1}
    default_screen_id: 1
"""

from __future__ import annotations

from typing import Any

import yaml

from .base import CachedFileProvider


class YamlScheduleConfigProvider(CachedFileProvider):
    """ScheduleConfigProvider that loads the schedule from a YAML file."""

    def _read_document(self) -> Any:
        with open(self._config_path, "r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(str(e)) from e
