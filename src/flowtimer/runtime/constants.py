"""
Runtime constants for schedule resolution.

Display labels live here so the resolver, the daily schedule builder and the
CLI agree on wording. Localization is the presentation layer's job; these are
the built-in English strings.
"""

from __future__ import annotations

MINUTES_PER_DAY = 24 * 60
SECONDS_PER_MINUTE = 60

# interval_name reported while no interval covers the current minute.
WAITING_LABEL = "Waiting"

STATIC_MODE_SUFFIX = "(static mode)"
CYCLE_STEP_LABEL = "Step {index}/{count} (cycle)"

MISSING_SCREEN_TITLE = "⚠ Screen not found (ID: {screen_id})"
MISSING_SCREEN_SUBTITLE = "Using the default screen"

START_DESCRIPTION = "Start: {name}"
END_DESCRIPTION = "End: {name}"
STEP_DESCRIPTION = "Step {index}/{count} in '{name}'"

# Placeholder for "no upcoming transition" in formatted output.
NO_TRANSITION_PLACEHOLDER = "—"
