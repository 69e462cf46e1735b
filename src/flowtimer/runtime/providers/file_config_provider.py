"""
File-based schedule configuration provider.

Loads a schedule from a JSON document.
"""

from __future__ import annotations

import json
from typing import Any

from .base import CachedFileProvider


class FileScheduleConfigProvider(CachedFileProvider):
    """
    ScheduleConfigProvider that loads the schedule from a JSON file.

    Expected JSON format:
    {
      "screens": [
        {"id": 1, "title": "Work", "subtitle": "Focus",
         "color": {"r": 46, "g": 204, "b": 113, "a": 255}}
      ],
      "intervals": [
        {"id": 1, "name": "Morning work",
         "start": {"hour": 9, "minute": 0}, "end": {"hour": 12, "minute": 0},
         "mode": {"mode": "static", "screen_id": 1}},
        {"id": 2, "name": "Pomodoro session",
         "start": {"hour": 14, "minute": 0}, "end": {"hour": 18, "minute": 0},
         "mode": {"mode": "cycle", "steps": [
            {"screen_id": 1, "duration_minutes": 25},
            {"screen_id": 2, "duration_minutes": 5}]}}
      ],
      "default_screen_id": 1
    }
    """

    def _read_document(self) -> Any:
        # json.JSONDecodeError is a ValueError
        with open(self._config_path, "r", encoding="utf-8") as f:
            return json.load(f)
