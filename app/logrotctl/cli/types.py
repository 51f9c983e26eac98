"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_config_option(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the root command, if any.

    Args:
        ctx: Context of the running subcommand.

    Returns:
        Declaration file path override, or None for the default location.
    """
    obj = ctx.find_root().obj
    if not isinstance(obj, dict):
        return None
    return obj.get("config_path")
