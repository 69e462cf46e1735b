"""
CLI contract tests for the flowtimer inspection commands.

Commands run through Typer's CliRunner against schedule files written to a
temporary directory.
"""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from flowtimer.cli import main as cli_main
from flowtimer.cli.main import app
from flowtimer.runtime.clock import SteppedWallClock
from flowtimer.runtime.schedule_types import ScheduleConfig
from flowtimer.runtime.scheduler import ScreenScheduler
from flowtimer.shared.schemas import ScheduleConfigSchema

from schedule_helpers import WORK, at, static_interval, workday


def run_cli(args: list[str]) -> tuple[int, str]:
    """Invoke the CLI quietly; returns (exit_code, output)."""
    runner = CliRunner()
    result = runner.invoke(app, ["--log-level", "WARNING", *args])
    return result.exit_code, result.output


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "schedule.json"
    path.write_text(ScheduleConfigSchema.from_domain(workday()).model_dump_json(), encoding="utf-8")
    return str(path)


@pytest.fixture
def overlapping_file(tmp_path):
    config = ScheduleConfig(
        screens=(WORK,),
        intervals=(
            static_interval(1, "Early", (8, 0), (11, 0), 1),
            static_interval(2, "Late", (10, 0), (13, 0), 1),
        ),
    )
    path = tmp_path / "overlap.json"
    path.write_text(ScheduleConfigSchema.from_domain(config).model_dump_json(), encoding="utf-8")
    return str(path)


def test_now_in_static_interval(config_file):
    exit_code, output = run_cli(["now", "--config", config_file, "--at", "10:30"])
    assert exit_code == 0
    assert "Work [Morning work]" in output
    assert "Focus (static mode)" in output
    assert "remaining 01:30:00" in output


def test_now_json(config_file):
    exit_code, output = run_cli(["now", "--config", config_file, "--at", "14:26", "--json"])
    assert exit_code == 0
    payload = json.loads(output)
    assert payload["screen"]["screen_id"] == 2
    assert payload["screen"]["remaining_seconds"] == 240
    assert payload["screen"]["step_index"] == 2
    assert payload["screen"]["color"] == "#e74c3cff"


def test_next_transition(config_file):
    exit_code, output = run_cli(["next", "--config", config_file, "--at", "14:24:58"])
    assert exit_code == 0
    assert "14:25:00 (in 00:02)" in output


def test_next_after_last_interval(config_file):
    exit_code, output = run_cli(["next", "--config", config_file, "--at", "19:00", "--json"])
    assert exit_code == 0
    assert json.loads(output)["next_transition"] is None


def test_schedule_lists_transitions(config_file):
    exit_code, output = run_cli(["schedule", "--config", config_file, "--json"])
    assert exit_code == 0
    entries = json.loads(output)
    assert [e["time"] for e in entries] == ["09:00", "12:00", "14:00", "14:25", "14:30", "18:00"]
    assert entries[0]["kind"] == "start"
    assert "Morning work" in entries[0]["description"]


def test_schedule_repeat_cycles(config_file):
    exit_code, output = run_cli(["schedule", "--config", config_file, "--repeat-cycles", "--json"])
    assert exit_code == 0
    steps = [e for e in json.loads(output) if e["kind"] == "step"]
    # 25/5 over four hours: two boundaries per half hour, minus the one at 18:00
    assert len(steps) == 15


def test_validate_clean_schedule(config_file):
    exit_code, output = run_cli(["validate", "--config", config_file])
    assert exit_code == 0
    assert "Schedule is consistent" in output


def test_validate_reports_overlap(overlapping_file):
    exit_code, output = run_cli(["validate", "--config", overlapping_file])
    assert exit_code == 1
    assert "Schedule has problems" in output
    assert "'Early' and 'Late' overlap" in output


def test_validate_json(overlapping_file):
    exit_code, output = run_cli(["validate", "--config", overlapping_file, "--json"])
    assert exit_code == 1
    payload = json.loads(output)
    assert payload["status"] == "error"
    assert len(payload["violations"]) == 2


def test_missing_config_file_exits_2(tmp_path):
    exit_code, output = run_cli(["now", "--config", str(tmp_path / "missing.json")])
    assert exit_code == 2
    assert "not found" in output


def test_bad_at_value_is_usage_error(config_file):
    exit_code, _ = run_cli(["now", "--config", config_file, "--at", "quarter past"])
    assert exit_code == 2


def test_watch_single_tick(config_file):
    exit_code, output = run_cli(["watch", "--config", config_file, "--count", "1"])
    assert exit_code == 0
    # default screen is Work, so something is always on
    assert "Work" in output or "Break" in output


def test_watch_stamps_the_evaluated_time(config_file, monkeypatch):
    clock = SteppedWallClock(at(14, 24, 58))
    monkeypatch.setattr(cli_main, "ScreenScheduler", lambda **kwargs: ScreenScheduler(wall_clock=clock, **kwargs))
    exit_code, output = run_cli(["watch", "--config", config_file, "--count", "1"])
    assert exit_code == 0
    assert "14:24:58  Work [Pomodoro session] next change in 00:02" in output


def test_options_default_to_none(monkeypatch):
    monkeypatch.delenv("FLOWTIMER_CONFIG", raising=False)
    monkeypatch.setattr(cli_main.settings, "config_path", None)
    exit_code, output = run_cli(["schedule"])
    assert exit_code == 0
    assert "Morning work" in output
