"""CLI package for logrotctl.

This package contains the Typer application and all subcommands.
"""

from logrotctl.cli.main import app

__all__ = ["app"]
