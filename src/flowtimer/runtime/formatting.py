"""Countdown formatting helpers for the presentation layer."""

from __future__ import annotations

from datetime import datetime

from flowtimer.runtime.constants import NO_TRANSITION_PLACEHOLDER


def format_duration_hhmmss(total_seconds: int) -> str:
    """``HH:MM:SS`` when at least an hour remains, ``MM:SS`` otherwise."""
    total_seconds = max(0, int(total_seconds))
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def format_time_until(next_transition: datetime | None, now: datetime) -> str:
    """Countdown to ``next_transition``, or a placeholder if none is ahead."""
    if next_transition is None or next_transition <= now:
        return NO_TRANSITION_PLACEHOLDER
    return format_duration_hhmmss(int((next_transition - now).total_seconds()))
