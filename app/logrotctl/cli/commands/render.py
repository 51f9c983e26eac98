"""Render command implementation.

Compiles the declarations and publishes the logrotate configuration.
"""

from pathlib import Path
from typing import Annotated

import typer

from logrotctl.cli.display import print_validation_errors
from logrotctl.cli.types import get_config_option
from logrotctl.core.compiler import compile_config
from logrotctl.core.config import require_config
from logrotctl.core.paths import get_rendered_path
from logrotctl.core.validator import ConfigValidationError
from logrotctl.core.writer import RenderIOError, write_config
from logrotctl.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Render the logrotate configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def render_config_file(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Rendered file path (default: ~/.local/state/logrotctl/logrotate.conf).",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the rendered configuration instead of writing it.",
        ),
    ] = False,
    annotate: Annotated[
        bool,
        typer.Option(
            "--annotate",
            help="Prefix each block with a comment naming its entry.",
        ),
    ] = False,
) -> None:
    """Render declarations into a logrotate configuration.

    Nothing is written when any entry fails validation.

    Examples:
        logrotctl render                      # Write to the default location
        logrotctl render -o /etc/logrotate.d/app
        logrotctl render --stdout             # Preview
    """
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(get_config_option(ctx))
    try:
        text = compile_config(config, annotate=annotate)
    except ConfigValidationError as e:
        print_validation_errors(e.errors)
        raise typer.Exit(code=1) from e

    if stdout:
        typer.echo(text, nl=False)
        return

    output_path = output or get_rendered_path()
    try:
        changed = write_config(text, output_path)
    except RenderIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if changed:
        print_success(f"Rendered {config.enabled_count} entries to {output_path}")
    else:
        print_info(f"Unchanged: {output_path}")
