"""
Inspection CLI for flowtimer schedules, built on Typer.

Evaluates a schedule document (or the built-in schedule) outside the desktop
UI: what is on now, when it changes next, the day's transition list, and the
validator's findings. Outputs JSON when requested.
"""

from __future__ import annotations

import json
import time
from datetime import datetime
from typing import Any

import typer

from flowtimer.config.defaults import default_schedule_config
from flowtimer.core.exceptions import ConfigLoadError
from flowtimer.infra.logging import configure_logging, get_logger
from flowtimer.infra.settings import settings
from flowtimer.runtime.active_screen_resolver import resolve_active_screen
from flowtimer.runtime.daily_schedule import daily_transitions
from flowtimer.runtime.formatting import format_duration_hhmmss, format_time_until
from flowtimer.runtime.interval_validator import validate_intervals
from flowtimer.runtime.providers import provider_for_path
from flowtimer.runtime.schedule_types import ActiveScreenInfo, ScheduleConfig
from flowtimer.runtime.scheduler import ScreenScheduler
from flowtimer.runtime.transition_calculator import calculate_next_transition

app = typer.Typer(help="flowtimer schedule inspection CLI")

# How often watch checks whether the scheduler wants a tick.
WATCH_POLL_SECONDS = 0.2

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Schedule file (.json/.yaml). Defaults to FLOWTIMER_CONFIG or the built-in schedule."
)
AT_OPTION = typer.Option(None, "--at", help="Evaluate at HH:MM[:SS] today instead of the current time")
JSON_OPTION = typer.Option(False, "--json", help="Output in JSON format")


def _load_config(config_file: str | None) -> ScheduleConfig:
    path = config_file or settings.config_path
    if not path:
        return default_schedule_config()
    try:
        return provider_for_path(path, strict=True).get_schedule_config()
    except ConfigLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


def _parse_at(at: str | None) -> datetime:
    now = datetime.now()
    if at is None:
        return now
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            parsed = datetime.strptime(at, fmt)
        except ValueError:
            continue
        return now.replace(hour=parsed.hour, minute=parsed.minute, second=parsed.second, microsecond=0)
    raise typer.BadParameter(f"expected HH:MM or HH:MM:SS, got {at!r}", param_hint="--at")


def _screen_to_dict(screen: ActiveScreenInfo) -> dict[str, Any]:
    return {
        "screen_id": screen.screen_id,
        "title": screen.title,
        "subtitle": screen.subtitle,
        "color": screen.color.to_hex(),
        "remaining_seconds": screen.remaining_seconds,
        "interval_name": screen.interval_name,
        "is_default_screen": screen.is_default_screen,
        "step_index": screen.step_index,
        "step_count": screen.step_count,
    }


@app.command("now")
def now_cmd(
    config_file: str | None = CONFIG_OPTION,
    at: str | None = AT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Show the screen that is active now (or at --at)."""
    config = _load_config(config_file)
    moment = _parse_at(at)
    screen = resolve_active_screen(config, moment)

    if json_output:
        typer.echo(json.dumps({"at": moment.isoformat(), "screen": _screen_to_dict(screen) if screen else None}, indent=2))
        return
    if screen is None:
        typer.echo("Nothing scheduled")
        return
    typer.echo(f"{screen.title} [{screen.interval_name}]")
    if screen.subtitle:
        typer.echo(f"  {screen.subtitle}")
    typer.echo(f"  remaining {format_duration_hhmmss(screen.remaining_seconds)}")


@app.command("next")
def next_cmd(
    config_file: str | None = CONFIG_OPTION,
    at: str | None = AT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Show when the next screen change happens."""
    config = _load_config(config_file)
    moment = _parse_at(at)
    upcoming = calculate_next_transition(config, moment)

    if json_output:
        typer.echo(
            json.dumps(
                {"at": moment.isoformat(), "next_transition": upcoming.isoformat() if upcoming else None},
                indent=2,
            )
        )
        return
    if upcoming is None:
        typer.echo("No further transitions today")
        return
    typer.echo(f"{upcoming.strftime('%H:%M:%S')} (in {format_time_until(upcoming, moment)})")


@app.command("schedule")
def schedule_cmd(
    config_file: str | None = CONFIG_OPTION,
    repeat_cycles: bool = typer.Option(False, "--repeat-cycles", help="List every cycle repetition"),
    json_output: bool = JSON_OPTION,
):
    """List the day's transitions in time order."""
    config = _load_config(config_file)
    transitions = daily_transitions(config, repeat_cycles=repeat_cycles)

    if json_output:
        typer.echo(
            json.dumps(
                [
                    {"time": t.time_label, "minute_of_day": t.minute_of_day, "kind": t.kind.value, "description": t.description}
                    for t in transitions
                ],
                indent=2,
            )
        )
        return
    if not transitions:
        typer.echo("No transitions scheduled")
        return
    for t in transitions:
        typer.echo(f"{t.time_label}  {t.kind.value:<5}  {t.description}")


@app.command("validate")
def validate_cmd(
    config_file: str | None = CONFIG_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Check intervals for inversions, overlaps and empty cycles. Exits 1 on violations."""
    config = _load_config(config_file)
    violations = validate_intervals(config.intervals)

    if json_output:
        typer.echo(json.dumps({"status": "ok" if not violations else "error", "violations": violations}, indent=2))
    elif violations:
        typer.echo("✗ Schedule has problems")
        for violation in violations:
            typer.echo(f"  - {violation}")
    else:
        typer.echo("✓ Schedule is consistent")

    if violations:
        raise typer.Exit(1)


@app.command("watch")
def watch_cmd(
    config_file: str | None = CONFIG_OPTION,
    count: int = typer.Option(0, "--count", "-n", min=0, help="Stop after this many ticks (0 = run until interrupted)"),
):
    """Drive the screen scheduler against the real clock and print screen changes."""
    config = _load_config(config_file)
    scheduler = ScreenScheduler(min_tick_interval=settings.tick_interval)
    ticks = 0
    try:
        while count == 0 or ticks < count:
            if scheduler.should_tick():
                ticks += 1
                if scheduler.tick(config):
                    screen = scheduler.current_screen
                    if screen is None:
                        typer.echo("Nothing scheduled")
                    else:
                        typer.echo(
                            f"{scheduler.last_tick_at:%H:%M:%S}  {screen.title} [{screen.interval_name}] "
                            f"next change in {scheduler.time_until_transition()}"
                        )
            if count and ticks >= count:
                break
            time.sleep(WATCH_POLL_SECONDS)
    except KeyboardInterrupt:
        get_logger(__name__).info("watch interrupted", ticks=ticks)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """flowtimer - daily work/break screen schedule."""
    configure_logging(level=log_level)


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
