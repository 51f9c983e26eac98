"""CLI commands for logrotctl.

This package contains all subcommand implementations.
"""

from logrotctl.cli.commands import check, init, render, run, show, units

__all__ = ["check", "init", "render", "run", "show", "units"]
