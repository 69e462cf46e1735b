"""
Global test configuration for flowtimer.

This module provides global pytest configuration and shared schedule fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from schedule_helpers import workday  # noqa: E402


@pytest.fixture
def workday_config():
    """The built-in style working day: static morning, pomodoro afternoon."""
    return workday()
