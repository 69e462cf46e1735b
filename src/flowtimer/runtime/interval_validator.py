"""
Interval consistency validation.

Pure validation: reports configuration defects as human-readable messages.
Never mutates or rejects the schedule; resolution keeps running best-effort
(first match wins) against a defective configuration.
"""

from __future__ import annotations

from typing import Sequence, assert_never

from flowtimer.core.exceptions import ScheduleValidationError
from flowtimer.runtime.schedule_types import CycleMode, StaticMode, TimeInterval


def _overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.start_minutes < b.end_minutes and a.end_minutes > b.start_minutes


def validate_intervals(intervals: Sequence[TimeInterval]) -> list[str]:
    """
    Check every interval and every ordered pair of intervals.

    Violations:
    - start must be strictly before end (inverted or zero-length interval)
    - no two intervals may overlap; each overlapping pair is reported from
      both sides, so the result does not depend on list order
    - a cycle needs at least one step, and a non-zero total duration

    Returns:
        List of violation messages; empty when the intervals are consistent.
    """
    violations: list[str] = []

    for idx, interval in enumerate(intervals):
        if interval.start_minutes >= interval.end_minutes:
            violations.append(
                f"Interval '{interval.name}': start ({interval.start}) must be "
                f"before end ({interval.end}); inverted or zero-length interval"
            )

        for other_idx, other in enumerate(intervals):
            if idx != other_idx and _overlaps(interval, other):
                violations.append(f"Intervals '{interval.name}' and '{other.name}' overlap")

        mode = interval.mode
        if isinstance(mode, CycleMode):
            if not mode.steps:
                violations.append(f"Interval '{interval.name}': cycle mode needs at least one step")
            elif mode.total_minutes == 0:
                violations.append(f"Interval '{interval.name}': total cycle duration cannot be zero")
        elif isinstance(mode, StaticMode):
            pass
        else:
            assert_never(mode)

    return violations


def ensure_valid(intervals: Sequence[TimeInterval]) -> None:
    """Raise ScheduleValidationError if :func:`validate_intervals` reports anything.

    For configuration editors that want to refuse a defective schedule. The
    runtime itself never calls this.
    """
    violations = validate_intervals(intervals)
    if violations:
        raise ScheduleValidationError(
            f"{len(violations)} schedule violation(s) found",
            violations=violations,
        )
