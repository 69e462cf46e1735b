"""
Transition calculator contract tests.

Fixed datetimes; also checks consistency with the resolver (no missed change).
"""

from __future__ import annotations

from datetime import timedelta, timezone

from flowtimer.runtime.active_screen_resolver import resolve_active_screen
from flowtimer.runtime.schedule_types import ScheduleConfig
from flowtimer.runtime.transition_calculator import calculate_next_transition

from schedule_helpers import BASE, BREAK, WORK, at, cycle_interval, static_interval


def test_static_interval_next_is_interval_end():
    config = ScheduleConfig(screens=(WORK,), intervals=(static_interval(1, "Morning", (9, 0), (12, 0), 1),))
    assert calculate_next_transition(config, at(10, 30, 17)) == at(12, 0, 0)


def test_cycle_next_is_step_boundary():
    config = ScheduleConfig(
        screens=(WORK, BREAK),
        intervals=(cycle_interval(1, "Pomodoro", (14, 0), (18, 0), [(1, 25), (2, 5)]),),
    )
    assert calculate_next_transition(config, at(14, 26, 0)) == at(14, 30, 0)
    assert calculate_next_transition(config, at(14, 3, 0)) == at(14, 25, 0)


def test_cycle_boundary_ignores_seconds_of_now():
    config = ScheduleConfig(
        screens=(WORK, BREAK),
        intervals=(cycle_interval(1, "Pomodoro", (14, 0), (18, 0), [(1, 25), (2, 5)]),),
    )
    assert calculate_next_transition(config, at(14, 26, 45)) == at(14, 30, 0)


def test_cycle_boundary_clamped_to_interval_end():
    config = ScheduleConfig(
        screens=(WORK, BREAK),
        intervals=(cycle_interval(1, "Short", (10, 0), (10, 40), [(1, 25), (2, 5)]),),
    )
    assert calculate_next_transition(config, at(10, 35)) == at(10, 40)


def test_outside_intervals_next_is_earliest_future_start():
    config = ScheduleConfig(
        screens=(WORK,),
        intervals=(
            static_interval(1, "Evening", (19, 0), (20, 0), 1),
            static_interval(2, "Morning", (9, 0), (12, 0), 1),
            static_interval(3, "Afternoon", (14, 0), (15, 0), 1),
        ),
    )
    assert calculate_next_transition(config, at(7, 15)) == at(9, 0)
    assert calculate_next_transition(config, at(12, 30)) == at(14, 0)


def test_nothing_left_today_is_none():
    config = ScheduleConfig(screens=(WORK,), intervals=(static_interval(1, "Morning", (9, 0), (12, 0), 1),))
    assert calculate_next_transition(config, at(13, 0)) is None
    assert calculate_next_transition(ScheduleConfig(screens=(WORK,)), at(13, 0)) is None


def test_degenerate_cycle_next_is_interval_end():
    config = ScheduleConfig(screens=(WORK,), intervals=(cycle_interval(1, "Empty", (8, 0), (9, 0), []),))
    assert calculate_next_transition(config, at(8, 30)) == at(9, 0)


def test_timezone_is_preserved():
    tz = timezone(timedelta(hours=3))
    config = ScheduleConfig(screens=(WORK,), intervals=(static_interval(1, "Morning", (9, 0), (12, 0), 1),))
    now = BASE.replace(hour=10, tzinfo=tz)
    result = calculate_next_transition(config, now)
    assert result == BASE.replace(hour=12, tzinfo=tz)
    assert result.tzinfo is tz


def test_next_transition_is_idempotent(workday_config):
    for moment in (at(7, 0), at(10, 0, 30), at(14, 26, 59), at(22, 0)):
        assert calculate_next_transition(workday_config, moment) == calculate_next_transition(workday_config, moment)


def _assert_no_missed_transition(config):
    """Whenever the screen changes between consecutive samples, the earlier
    next_transition was not later than the moment of the change."""
    moment = at(0, 0, 0)
    end = at(23, 59, 0)
    previous = resolve_active_screen(config, moment)
    predicted = calculate_next_transition(config, moment)
    step = timedelta(seconds=20)
    while moment < end:
        moment += step
        current = resolve_active_screen(config, moment)
        if current.screen_id != previous.screen_id or current.interval_name != previous.interval_name:
            assert predicted is not None
            assert predicted <= moment
        previous = current
        predicted = calculate_next_transition(config, moment)


def test_no_missed_transition_across_the_day(workday_config):
    _assert_no_missed_transition(workday_config)


def overlapping_config():
    """Later-starting interval listed first: it takes over once it starts."""
    return ScheduleConfig(
        screens=(WORK, BREAK),
        intervals=(
            static_interval(1, "Late", (10, 0), (13, 0), 2),
            static_interval(2, "Early", (9, 0), (12, 0), 1),
            static_interval(3, "Lunch", (12, 30), (12, 45), 1),
            cycle_interval(4, "Pomodoro", (14, 0), (18, 0), [(1, 25), (2, 5)]),
        ),
        default_screen_id=1,
    )


def test_overlap_listed_first_takes_over_at_its_start():
    config = overlapping_config()
    assert resolve_active_screen(config, at(9, 30)).screen_id == 1
    assert resolve_active_screen(config, at(10, 0)).screen_id == 2
    assert calculate_next_transition(config, at(9, 30, 10)) == at(10, 0, 0)
    # intervals listed later never pre-empt the active one
    assert calculate_next_transition(config, at(12, 20)) == at(13, 0, 0)


def test_no_missed_transition_with_overlapping_intervals():
    _assert_no_missed_transition(overlapping_config())


def test_cycle_clamped_to_start_of_earlier_listed_interval():
    config = ScheduleConfig(
        screens=(WORK, BREAK),
        intervals=(
            static_interval(1, "Meeting", (14, 10), (15, 0), 2),
            cycle_interval(2, "Pomodoro", (14, 0), (18, 0), [(1, 25), (2, 5)]),
        ),
    )
    assert calculate_next_transition(config, at(14, 3, 0)) == at(14, 10, 0)
    _assert_no_missed_transition(config)


def test_next_transition_matches_resolver_remaining(workday_config):
    """Inside intervals, now + remaining_seconds lands on the predicted transition."""
    for moment in (at(10, 30, 0), at(10, 30, 40), at(14, 26, 0), at(14, 26, 13), at(17, 58, 5)):
        info = resolve_active_screen(workday_config, moment)
        predicted = calculate_next_transition(workday_config, moment)
        assert moment + timedelta(seconds=info.remaining_seconds) == predicted
