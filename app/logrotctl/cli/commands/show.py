"""Show command implementation.

Lists the enabled entries in render order.
"""

import json
from typing import Annotated

import typer

from logrotctl.cli.display import print_entries, print_validation_errors
from logrotctl.cli.types import OutputFormat, get_config_option
from logrotctl.core.compiler import plan_paths
from logrotctl.core.config import require_config
from logrotctl.core.validator import ConfigValidationError
from logrotctl.utils.formatting import console, print_info

app = typer.Typer(
    help="List enabled entries in render order.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_entries(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the entries that would be rendered, in order."""
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(get_config_option(ctx))
    try:
        ordered = plan_paths(config)
    except ConfigValidationError as e:
        print_validation_errors(e.errors)
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = [spec.model_dump(mode="json") for spec in ordered]
        console.print_json(json.dumps(data))
        return

    if not ordered:
        print_info("No enabled entries.")
        return

    print_entries(ordered)
