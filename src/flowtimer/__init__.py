"""flowtimer: daily work/break screen schedule engine.

Given a schedule of named time intervals (each a single screen or a repeating
cycle of screens) and the current wall-clock time, flowtimer determines which
screen is active, how long until it changes, when the next transition occurs,
and whether the schedule itself is consistent.

Responsibilities:
    - Immutable schedule model (screens, intervals, modes)
    - Active screen resolution and remaining-time arithmetic
    - Next-transition calculation
    - Interval validation and daily transition listing
    - Polling scheduler for host UI loops

Rendering, input handling and persisting configuration belong to the host
application.
"""

__version__ = "0.1.0"
