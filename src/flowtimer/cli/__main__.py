#!/usr/bin/env python3
"""
CLI entry point for flowtimer.cli module.

This allows running: python -m flowtimer.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
